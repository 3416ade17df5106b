"""Ordering of issues by the recency of their last commit."""

from ..jira_client.models import Issue
from ..utils.date_parser import EPOCH_MILLIS_MIN, parse_timestamp_or_default


def commit_sort_key(issue: Issue) -> int:
    """Epoch milliseconds of the issue's last commit, or the epoch when unknown."""
    if issue.last_commit is None:
        return EPOCH_MILLIS_MIN
    return parse_timestamp_or_default(issue.last_commit.author_timestamp)


def sort_by_last_commit(issues: list[Issue]) -> list[Issue]:
    """Order issues most-recent-commit first.

    The list is stable-sorted ascending by commit time and then reversed, so
    issues without a usable timestamp end up last, in reverse input order.
    """
    ordered = sorted(issues, key=commit_sort_key)
    ordered.reverse()
    return ordered
