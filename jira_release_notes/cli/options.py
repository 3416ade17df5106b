"""Standardized CLI option definitions for consistent shorthand mappings."""

import typer

BOARD_NAME_OPTION = typer.Option(
    ..., "--board-name", "-b", help="Jira board name (matched ignoring case)"
)

REPO_NAME_OPTION = typer.Option(
    ..., "--repo-name", "-r", help="Repository whose branches are listed"
)

ISSUE_STATUS_OPTION = typer.Option(
    ..., "--issue-status-name", "-s", help="Workflow status of released issues"
)

CONCURRENCY_OPTION = typer.Option(
    None,
    "--concurrency",
    "-c",
    min=1,
    help="Maximum concurrent branch lookups (defaults to JIRA_BRANCH_CONCURRENCY or 5)",
)

VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
