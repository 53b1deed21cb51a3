"""dualpush: fetch from one hosting platform, push to two."""

__version__ = "0.1.0"
