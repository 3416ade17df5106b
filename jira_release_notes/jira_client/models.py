"""Pydantic models for Jira data structures.

These models map to the Jira Cloud REST API v2 and the dev-status API used by
the Jira development panel.
API Reference: https://developer.atlassian.com/cloud/jira/platform/rest/v2/
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.date_parser import parse_timestamp

OTHER_ISSUE_TYPE = "Other"


class LastCommit(BaseModel):
    """Most recent commit known for an issue or branch.

    ``author_timestamp`` is kept raw; consumers decide how to treat values that
    do not parse.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    author_timestamp: str | int | float | None = Field(
        None,
        alias="authorTimestamp",
        description="Commit author timestamp (epoch millis or ISO 8601)",
    )


class Issue(BaseModel):
    """Simplified Jira issue carrying the fields used for release notes.

    Maps a Jira REST API search hit down to basic properties.
    API Reference:
    https://developer.atlassian.com/cloud/jira/platform/rest/v2/api-group-issue-search/
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Unique issue identifier (string)")
    key: str = Field(..., description="Human readable issue key, e.g. 'GM-12'")
    type: str = Field(OTHER_ISSUE_TYPE, description="Issue type name, e.g. 'Bug'")
    created: datetime | None = Field(None, description="Creation timestamp")
    updated: datetime | None = Field(None, description="Last update timestamp")
    priority: str = Field("", description="Priority name, e.g. 'Medium'")
    title: str = Field("", description="Issue summary")
    description: str = Field("", description="Issue description")
    last_commit: LastCommit | None = Field(
        None, alias="lastCommit", description="Last known commit, when supplied"
    )

    @field_validator("created", "updated", mode="before")
    @classmethod
    def _parse_jira_timestamp(cls, value: Any) -> Any:
        if isinstance(value, str):
            if not value:
                return None
            return parse_timestamp(value)
        return value

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "Issue":
        """Build an issue from a raw Jira REST search result.

        Missing nested fields fall back to defaults rather than raising.
        """
        fields = payload.get("fields") or {}
        issue_type = (fields.get("issuetype") or {}).get("name") or OTHER_ISSUE_TYPE
        priority = (fields.get("priority") or {}).get("name") or ""

        return cls(
            id=str(payload["id"]),
            key=payload.get("key", ""),
            type=issue_type,
            created=fields.get("created"),
            updated=fields.get("updated") or None,
            priority=priority,
            title=fields.get("summary") or "",
            description=fields.get("description") or "",
            last_commit=payload.get("lastCommit"),
        )


class BranchRepository(BaseModel):
    """Repository a branch belongs to, as reported by the dev-status API."""

    name: str = Field(..., description="Repository name")
    url: str | None = Field(None, description="Repository web URL")


class Branch(BaseModel):
    """Branch linked to an issue through the Jira development panel."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Branch name")
    repository: BranchRepository = Field(..., description="Owning repository")
    url: str | None = Field(None, description="Branch web URL")
    last_commit: LastCommit | None = Field(
        None, alias="lastCommit", description="Latest commit on the branch"
    )


class BoardLocation(BaseModel):
    """Project location of an agile board."""

    model_config = ConfigDict(populate_by_name=True)

    project_id: int | None = Field(None, alias="projectId")
    project_key: str | None = Field(None, alias="projectKey")
    project_name: str | None = Field(None, alias="projectName")


class Board(BaseModel):
    """Jira agile board.

    API Reference: https://developer.atlassian.com/cloud/jira/software/rest/api-group-board/
    """

    id: int = Field(..., description="Board identifier")
    name: str = Field(..., description="Board name")
    type: str | None = Field(None, description="Board type: 'scrum' or 'kanban'")
    location: BoardLocation | None = Field(None, description="Owning project")


class Project(BaseModel):
    """Jira project."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Project identifier")
    key: str = Field(..., description="Project key, e.g. 'GM'")
    name: str = Field(..., description="Project name")
    project_type_key: str | None = Field(None, alias="projectTypeKey")


class IssueStatus(BaseModel):
    """Jira workflow status."""

    id: str = Field(..., description="Status identifier")
    name: str = Field(..., description="Status name, e.g. 'Ready For Handoff'")
    description: str | None = Field(None, description="Status description")
