"""Business logic services for dualpush."""

from dualpush.services.path_resolver import PathMode, PathResolver, ResolvedPath
from dualpush.services.reconciler import RemoteReconciler

__all__ = [
    "PathMode",
    "PathResolver",
    "ResolvedPath",
    "RemoteReconciler",
]
