"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from .notes import notes

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="release-notes",
    help="Jira release notes and branch merge lists",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="notes", context_settings={"help_option_names": ["-h", "--help"]})(
    notes
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from jira_release_notes import __version__

    console.print(f"Jira Release Notes v{__version__}")


if __name__ == "__main__":
    app()
