"""Release notes engine: the surface used by the command line layer.

The engine performs no network, file or environment access itself. The branch
lookup, Jira host and concurrency limit are injected by the caller.
"""

import logging

from .aggregation.branches import (
    DEFAULT_CONCURRENCY_LIMIT,
    BranchLookup,
    fetch_branches,
)
from .aggregation.sorter import sort_by_last_commit
from .classification.grouping import Buckets, bucketize, classify
from .jira_client.models import Issue
from .report.formatter import issue_link, render_buckets

logger = logging.getLogger(__name__)


class ReleaseNotesEngine:
    """Builds the release notes report and the linked branch list for issues."""

    def __init__(
        self,
        host: str,
        lookup: BranchLookup,
        concurrency_limit: int = DEFAULT_CONCURRENCY_LIMIT,
    ):
        if concurrency_limit < 1:
            raise ValueError(
                f"concurrency_limit must be at least 1, got {concurrency_limit}"
            )
        self.host = host
        self.lookup = lookup
        self.concurrency_limit = concurrency_limit

    def link(self, issue: Issue) -> str:
        return issue_link(self.host, issue.key)

    def buckets(self, issues: list[Issue]) -> Buckets[str]:
        """Classify issues into Bugs/Tasks, rendered as browse links."""
        return bucketize(classify(issues, mapper=self.link))

    def report(self, issues: list[Issue], markup: bool = False) -> str:
        """Render the release notes report for ``issues``."""
        return render_buckets(self.buckets(issues), markup=markup)

    async def aggregate(self, issues: list[Issue], repo_filter: str = "") -> list[str]:
        """Collect branch names linked to ``issues``, most recently committed first.

        The result order follows lookup completion, not issue order.

        Raises:
            BranchLookupError: If any lookup fails
        """
        ordered = sort_by_last_commit(issues)
        logger.info(
            "Looking up branches for %d issue(s) with concurrency %d",
            len(ordered),
            self.concurrency_limit,
        )
        return await fetch_branches(
            ordered, repo_filter, self.lookup, self.concurrency_limit
        )
