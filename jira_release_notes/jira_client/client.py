"""Async Jira REST API client using httpx."""

import logging
from typing import Any

import httpx

from ..config import DEFAULT_TIMEOUT, JiraConfig
from ..exceptions import JiraRequestError
from ..utils.slug import names_match
from .models import Board, Branch, Issue, IssueStatus, Project
from .search import IssueFilter, build_jql_query, project_status_filters

logger = logging.getLogger(__name__)

SEARCH_PAGE_SIZE = 50
DEV_STATUS_APPLICATION = "bitbucket"


class JiraClient:
    """Jira API client with basic authentication.

    Use as an async context manager so the underlying connection pool is closed:

        async with JiraClient(host, username, token) as jira:
            board = await jira.get_board("Team Board")
    """

    def __init__(
        self,
        host: str,
        username: str,
        api_token: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize Jira client.

        Args:
            host: Jira host name without scheme, e.g. 'example.atlassian.net'
            username: Atlassian account e-mail
            api_token: Atlassian API token
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (used for testing)
        """
        if not host:
            raise ValueError("Jira host is required. Set ATLASSIAN_HOST.")

        self.host = host
        self.headers = {
            "Accept": "application/json",
            "User-Agent": "jira-release-notes/0.1.0",
        }
        self._client = httpx.AsyncClient(
            base_url=f"https://{host}",
            auth=(username, api_token),
            headers=self.headers,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_config(cls, config: JiraConfig) -> "JiraClient":
        """Create a client from validated configuration."""
        config.validate()
        assert config.host and config.username and config.api_token
        return cls(
            config.host, config.username, config.api_token, timeout=config.timeout
        )

    async def __aenter__(self) -> "JiraClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET ``path`` and return the decoded JSON body.

        Raises:
            JiraRequestError: On transport errors or non-2xx responses
        """
        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise JiraRequestError(
                f"Jira request {path} failed: "
                f"{e.response.status_code} {e.response.reason_phrase}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise JiraRequestError(f"Jira request {path} failed: {e}") from e
        except ValueError as e:
            raise JiraRequestError(f"Jira request {path} returned invalid JSON") from e

    async def get_boards(self) -> list[Board]:
        """Fetch all agile boards visible to the current user."""
        boards: list[Board] = []
        start_at = 0
        while True:
            data = await self._get(
                "/rest/agile/1.0/board",
                params={"startAt": start_at, "maxResults": SEARCH_PAGE_SIZE},
            )
            values = data.get("values", [])
            boards.extend(Board.model_validate(item) for item in values)
            if data.get("isLast", True) or not values:
                return boards
            start_at += len(values)

    async def get_board(self, board_name: str) -> Board | None:
        """Find a board by slug-normalized name."""
        for board in await self.get_boards():
            if names_match(board.name, board_name):
                return board
        return None

    async def get_project(self, board_id: int) -> Project | None:
        """Fetch the first project attached to a board."""
        data = await self._get(f"/rest/agile/1.0/board/{board_id}/project")
        values = data.get("values") or []
        if not values:
            return None
        return Project.model_validate(values[0])

    async def get_statuses(self, project_id: str = "") -> list[IssueStatus]:
        """Fetch workflow statuses, optionally limited to one project."""
        if not project_id:
            data = await self._get("/rest/api/2/status")
            return [IssueStatus.model_validate(item) for item in data]

        data = await self._get(f"/rest/api/2/project/{project_id}/statuses")
        statuses: dict[str, IssueStatus] = {}
        for issue_type in data:
            for item in issue_type.get("statuses", []):
                status = IssueStatus.model_validate(item)
                statuses.setdefault(status.id, status)
        return list(statuses.values())

    async def search_issues(self, filters: list[IssueFilter]) -> list[Issue]:
        """Fetch every issue matching the given filters (all pages)."""
        jql = build_jql_query(filters)
        logger.debug("Searching issues with JQL: %s", jql)

        issues: list[Issue] = []
        start_at = 0
        while True:
            data = await self._get(
                "/rest/api/2/search",
                params={
                    "jql": jql,
                    "startAt": start_at,
                    "maxResults": SEARCH_PAGE_SIZE,
                },
            )
            page = data.get("issues") or []
            issues.extend(Issue.from_api(item) for item in page)
            start_at += len(page)
            if not page or start_at >= data.get("total", 0):
                return issues

    async def get_issues_by_project_and_status(
        self, project: str, status: str
    ) -> list[Issue]:
        """Fetch issues from ``project`` in workflow ``status``."""
        return await self.search_issues(project_status_filters(project, status))

    async def get_issue_branches(
        self, issue_id: str, repo_filter: str = ""
    ) -> list[Branch]:
        """Fetch branches linked to an issue, optionally limited to one repository.

        Repository names are compared after slug normalization. An empty
        ``repo_filter`` returns branches from every repository.

        Raises:
            JiraRequestError: If the dev-status request fails
        """
        data = await self._get(
            "/rest/dev-status/latest/issue/detail",
            params={
                "issueId": issue_id,
                "applicationType": DEV_STATUS_APPLICATION,
                "dataType": "branch",
            },
        )
        detail = data.get("detail") or []
        if not detail:
            return []

        branches = [
            Branch.model_validate(item) for item in detail[0].get("branches", [])
        ]
        if not repo_filter:
            return branches
        return [b for b in branches if names_match(b.repository.name, repo_filter)]
