"""Tests for the release notes engine."""

from collections.abc import Callable
from unittest.mock import AsyncMock

import pytest

from jira_release_notes.engine import ReleaseNotesEngine
from jira_release_notes.exceptions import BranchLookupError, JiraRequestError
from jira_release_notes.jira_client.models import Branch, Issue


class TestReleaseNotesEngine:
    """Test ReleaseNotesEngine."""

    def test_report_lists_links_by_bucket(
        self, make_issue: Callable[..., Issue]
    ) -> None:
        engine = ReleaseNotesEngine("example.atlassian.net", AsyncMock())
        issues = [make_issue("1", "Bug"), make_issue("2", "Story")]

        report = engine.report(issues)

        assert report == (
            "\nTasks:\n\nhttps://example.atlassian.net/browse/GM-2\n\n"
            "\nBugs:\n\nhttps://example.atlassian.net/browse/GM-1\n\n"
        )

    @pytest.mark.asyncio
    async def test_aggregate_dispatches_most_recent_first(
        self,
        make_issue: Callable[..., Issue],
        make_branch: Callable[..., Branch],
    ) -> None:
        lookup = AsyncMock(
            side_effect=lambda issue_id, repo: [make_branch(f"b{issue_id}")]
        )
        engine = ReleaseNotesEngine(
            "example.atlassian.net", lookup, concurrency_limit=1
        )
        issues = [
            make_issue("old", author_timestamp=100),
            make_issue("none"),
            make_issue("new", author_timestamp=200),
        ]

        result = await engine.aggregate(issues, "web-app")

        assert [c.args for c in lookup.call_args_list] == [
            ("new", "web-app"),
            ("old", "web-app"),
            ("none", "web-app"),
        ]
        assert sorted(result) == ["bnew", "bnone", "bold"]

    @pytest.mark.asyncio
    async def test_aggregate_failure_does_not_affect_report(
        self, make_issue: Callable[..., Issue]
    ) -> None:
        lookup = AsyncMock(side_effect=JiraRequestError("boom", status_code=500))
        engine = ReleaseNotesEngine("example.atlassian.net", lookup)
        issues = [make_issue("1", "Bug")]

        with pytest.raises(BranchLookupError):
            await engine.aggregate(issues)

        assert "GM-1" in engine.report(issues)

    def test_rejects_invalid_limit(self) -> None:
        with pytest.raises(ValueError):
            ReleaseNotesEngine(
                "example.atlassian.net", AsyncMock(), concurrency_limit=0
            )
