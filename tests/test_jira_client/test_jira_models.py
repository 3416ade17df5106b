"""Tests for Jira data models."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from jira_release_notes.jira_client.models import Branch, Issue


class TestIssue:
    """Test Issue model."""

    def test_from_api(self) -> None:
        issue = Issue.from_api(
            {
                "id": 13964,
                "key": "GM-12",
                "fields": {
                    "issuetype": {"name": "Bug"},
                    "priority": {"name": "Medium"},
                    "summary": "Dashboard buttons",
                    "description": None,
                    "created": "2021-11-04T06:09:09.106-0700",
                    "updated": None,
                },
            }
        )

        assert issue.id == "13964"
        assert issue.type == "Bug"
        assert issue.priority == "Medium"
        assert issue.description == ""
        assert issue.updated is None
        assert issue.created == datetime(
            2021, 11, 4, 6, 9, 9, 106000, tzinfo=timezone(timedelta(hours=-7))
        )
        assert issue.last_commit is None

    def test_from_api_missing_fields_default(self) -> None:
        issue = Issue.from_api({"id": "1", "fields": {"issuetype": None}})

        assert issue.type == "Other"
        assert issue.priority == ""
        assert issue.title == ""

    def test_last_commit_alias(self) -> None:
        issue = Issue.model_validate(
            {"id": "1", "key": "GM-1", "lastCommit": {"authorTimestamp": 1234}}
        )
        assert issue.last_commit is not None
        assert issue.last_commit.author_timestamp == 1234

    def test_issue_is_immutable(self) -> None:
        issue = Issue(id="1", key="GM-1")
        with pytest.raises(ValidationError):
            issue.title = "changed"  # type: ignore[misc]


class TestBranch:
    """Test Branch model."""

    def test_parse_dev_status_branch(self) -> None:
        branch = Branch.model_validate(
            {
                "name": "feature/x",
                "repository": {"name": "web-app"},
                "lastCommit": {"authorTimestamp": "2021-11-05T03:57:23.000-0700"},
            }
        )

        assert branch.repository.name == "web-app"
        assert branch.last_commit is not None

    def test_repository_required(self) -> None:
        with pytest.raises(ValidationError):
            Branch.model_validate({"name": "feature/x"})
