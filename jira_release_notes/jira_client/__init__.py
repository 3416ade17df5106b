"""Jira client package for API interaction."""

from .client import JiraClient
from .models import (
    Board,
    Branch,
    BranchRepository,
    Issue,
    IssueStatus,
    LastCommit,
    Project,
)
from .search import IssueFilter, build_jql_query

__all__ = [
    "JiraClient",
    "IssueFilter",
    "Issue",
    "LastCommit",
    "Branch",
    "BranchRepository",
    "Board",
    "IssueStatus",
    "Project",
    "build_jql_query",
]
