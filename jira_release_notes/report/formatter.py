"""Plain-text rendering of release notes and branch merge lists."""

from rich.markup import escape

from ..classification.grouping import Buckets

BUGS_TITLE = "Bugs"
TASKS_TITLE = "Tasks"

# Rich styles used when rendering with markup
BUGS_STYLE = "bold reverse red"
TASKS_STYLE = "bold reverse green"


def render_title(text: str, side_padding: int = 3) -> str:
    """Render a three-row banner with ``text`` centred between blank rows."""
    width = len(text) + side_padding * 2
    padding = " " * side_padding
    blank_row = " " * width + "\n"
    return "\n" + blank_row + padding + text + padding + "\n" + blank_row


def issue_link(host: str, key: str) -> str:
    """Browse URL of an issue."""
    return f"https://{host}/browse/{key}"


def _section_heading(title: str, style: str, markup: bool) -> str:
    heading = f"{title}:"
    if markup:
        return f"[{style}]{heading}[/]"
    return heading


def render_buckets(buckets: Buckets, markup: bool = False) -> str:
    """Render the Tasks section followed by the Bugs section.

    Args:
        buckets: Classified items; each item is rendered with ``str()``
        markup: Emit rich console markup for the section headings
    """
    output = ""
    sections = [
        (TASKS_TITLE, TASKS_STYLE, buckets.tasks),
        (BUGS_TITLE, BUGS_STYLE, buckets.bugs),
    ]
    for title, style, items in sections:
        output += "\n" + _section_heading(title, style, markup) + "\n\n"
        for item in items:
            text = str(item)
            output += (escape(text) if markup else text) + "\n"
        output += "\n"
    return output


def render_branch_list(branch_names: list[str]) -> str:
    """Render one ``git merge`` command per branch."""
    return "\n".join(f"git merge origin/{name}" for name in branch_names) + "\n"
