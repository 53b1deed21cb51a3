"""Remote topology models."""

from pydantic import BaseModel, Field, field_validator


class RemoteSpec(BaseModel):
    """A named git remote with one fetch URL and a set of push URLs.

    Push URLs keep insertion order for display; duplicates are collapsed,
    so each URL appears at most once.
    """

    name: str = "origin"
    fetch_url: str
    push_urls: list[str] = Field(default_factory=list)

    # True when the push URLs come from `pushurl` entries; git then ignores
    # the extra `url` entries for pushing.
    explicit_push: bool = False

    @field_validator("push_urls")
    @classmethod
    def _dedupe_push_urls(cls, value: list[str]) -> list[str]:
        return list(dict.fromkeys(value))

    def has_push_url(self, url: str) -> bool:
        """Exact membership test; similarly-prefixed URLs never match."""
        return url in self.push_urls

    def is_mirror_of(self, primary: str, secondary: str) -> bool:
        """Whether this remote fetches from primary and pushes to both."""
        return (
            self.fetch_url == primary
            and self.has_push_url(primary)
            and self.has_push_url(secondary)
        )
