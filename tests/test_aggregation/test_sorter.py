"""Tests for ordering issues by last commit time."""

from collections.abc import Callable

from jira_release_notes.aggregation.sorter import commit_sort_key, sort_by_last_commit
from jira_release_notes.jira_client.models import Issue


class TestCommitSortKey:
    """Test the per-issue sort key."""

    def test_numeric_timestamp(self, make_issue: Callable[..., Issue]) -> None:
        assert commit_sort_key(make_issue("1", author_timestamp=1500)) == 1500

    def test_iso_timestamp(self, make_issue: Callable[..., Issue]) -> None:
        early = make_issue("1", author_timestamp="2021-11-04T06:09:09.106-0700")
        late = make_issue("2", author_timestamp="2021-11-05T06:09:09.106-0700")
        assert commit_sort_key(late) - commit_sort_key(early) == 24 * 3600 * 1000

    def test_missing_commit_is_epoch(self, make_issue: Callable[..., Issue]) -> None:
        assert commit_sort_key(make_issue("1")) == 0

    def test_unparseable_timestamp_is_epoch(
        self, make_issue: Callable[..., Issue]
    ) -> None:
        """Malformed timestamps never raise."""
        assert commit_sort_key(make_issue("1", author_timestamp="last tuesday")) == 0


class TestSortByLastCommit:
    """Test most-recent-first ordering."""

    def test_most_recent_first_and_unknown_last(
        self, make_issue: Callable[..., Issue]
    ) -> None:
        a = make_issue("A", author_timestamp=100)
        b = make_issue("B", author_timestamp=200)
        c = make_issue("C")

        result = sort_by_last_commit([a, b, c])

        assert [issue.id for issue in result] == ["B", "A", "C"]

    def test_issues_without_timestamp_reverse_input_order(
        self, make_issue: Callable[..., Issue]
    ) -> None:
        issues = [
            make_issue("X"),
            make_issue("T1", author_timestamp=300),
            make_issue("Y", author_timestamp="garbage"),
            make_issue("Z"),
        ]

        result = sort_by_last_commit(issues)

        assert [issue.id for issue in result] == ["T1", "Z", "Y", "X"]

    def test_input_not_mutated(self, make_issue: Callable[..., Issue]) -> None:
        issues = [
            make_issue("1", author_timestamp=1),
            make_issue("2", author_timestamp=2),
        ]
        sort_by_last_commit(issues)
        assert [issue.id for issue in issues] == ["1", "2"]

    def test_empty(self) -> None:
        assert sort_by_last_commit([]) == []
