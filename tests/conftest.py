"""Test configuration and fixtures."""

from collections.abc import Callable

import pytest

from jira_release_notes.jira_client.models import (
    Branch,
    BranchRepository,
    Issue,
    LastCommit,
)


def build_issue(
    issue_id: str,
    issue_type: str = "Task",
    author_timestamp: str | int | float | None = None,
    key: str | None = None,
) -> Issue:
    """Build an issue, with a last commit only when a timestamp is given."""
    last_commit = (
        LastCommit(author_timestamp=author_timestamp)
        if author_timestamp is not None
        else None
    )
    return Issue(
        id=issue_id,
        key=key or f"GM-{issue_id}",
        type=issue_type,
        title=f"Issue {issue_id}",
        last_commit=last_commit,
    )


def build_branch(name: str, repository: str = "web-app") -> Branch:
    return Branch(name=name, repository=BranchRepository(name=repository))


@pytest.fixture
def make_issue() -> Callable[..., Issue]:
    """Factory for simplified issues."""
    return build_issue


@pytest.fixture
def make_branch() -> Callable[..., Branch]:
    """Factory for branch descriptors."""
    return build_branch
