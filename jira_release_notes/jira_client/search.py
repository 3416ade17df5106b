"""JQL query building."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IssueFilter:
    """Single JQL equality clause, e.g. ``project = "GM"``."""

    name: str
    value: str
    negation: bool = False

    def to_jql(self) -> str:
        operator = "!=" if self.negation else "="
        escaped = self.value.replace("\\", "\\\\").replace('"', '\\"')
        return f'{self.name} {operator} "{escaped}"'


def build_jql_query(filters: list[IssueFilter]) -> str:
    """Build a JQL query joining every filter with AND.

    Example:
        >>> build_jql_query(
        ...     [IssueFilter("project", "GM"), IssueFilter("status", "Done")]
        ... )
        'project = "GM" AND status = "Done"'
    """
    return " AND ".join(f.to_jql() for f in filters)


def project_status_filters(project: str, status: str) -> list[IssueFilter]:
    """Filters selecting the issues of ``project`` currently in ``status``."""
    return [IssueFilter("project", project), IssueFilter("status", status)]
