"""CLI command for generating release notes."""

import asyncio
import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..config import JiraConfig
from ..engine import ReleaseNotesEngine
from ..exceptions import BranchLookupError, ReleaseNotesError
from ..jira_client.client import JiraClient
from ..report.formatter import render_branch_list, render_title
from .options import (
    BOARD_NAME_OPTION,
    CONCURRENCY_OPTION,
    ISSUE_STATUS_OPTION,
    REPO_NAME_OPTION,
    VERBOSE_OPTION,
)

console = Console()

TITLE_STYLE = "bold reverse"


def configure_logging(verbose: bool) -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def notes(
    board_name: str = BOARD_NAME_OPTION,
    repo_name: str = REPO_NAME_OPTION,
    issue_status_name: str = ISSUE_STATUS_OPTION,
    concurrency: int | None = CONCURRENCY_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Print release notes and branch merge commands for a board.

    Issues of the board's project in the given status are listed as Tasks and
    Bugs, followed by a `git merge` line for every branch linked to them in
    the given repository.

    Examples:
        release-notes notes --board-name "Team Board" --repo-name web-app \\
            --issue-status-name "Ready For Handoff"
    """
    configure_logging(verbose)

    try:
        config = JiraConfig()
        config.validate()
    except ValueError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)

    if concurrency is not None:
        config.concurrency = concurrency

    try:
        asyncio.run(_run_notes(config, board_name, repo_name, issue_status_name))
    except BranchLookupError as e:
        console.print(f"[red]❌ Could not collect branches: {e}[/red]")
        raise typer.Exit(1)
    except ReleaseNotesError as e:
        console.print(f"[red]❌ Error while getting issue data: {e}[/red]")
        raise typer.Exit(1)


async def _run_notes(
    config: JiraConfig, board_name: str, repo_name: str, issue_status_name: str
) -> None:
    """Resolve board, project and issues, then print the report and branches."""
    async with JiraClient.from_config(config) as jira:
        board = await jira.get_board(board_name)
        if board is None:
            raise ReleaseNotesError(f"Board '{board_name}' not found")

        project = await jira.get_project(board.id)
        if project is None:
            raise ReleaseNotesError(f"Board '{board.name}' has no project")

        issues = await jira.get_issues_by_project_and_status(
            project.key, issue_status_name
        )
        engine = ReleaseNotesEngine(
            jira.host, jira.get_issue_branches, config.concurrency
        )

        console.print(render_title("RELEASE NOTES"), style=TITLE_STYLE)
        console.print(engine.report(issues, markup=True))

        branch_names = await engine.aggregate(issues, repo_name)
        if branch_names:
            console.print(render_title("BRANCHES"), style=TITLE_STYLE)
            console.print(render_branch_list(branch_names), markup=False)
