"""Issue ordering and branch aggregation."""

from .branches import DEFAULT_CONCURRENCY_LIMIT, BranchLookup, fetch_branches
from .sorter import commit_sort_key, sort_by_last_commit

__all__ = [
    "BranchLookup",
    "DEFAULT_CONCURRENCY_LIMIT",
    "commit_sort_key",
    "fetch_branches",
    "sort_by_last_commit",
]
