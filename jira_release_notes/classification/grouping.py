"""Grouping of issues by type and collapsing of groups into report buckets."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from ..jira_client.models import OTHER_ISSUE_TYPE, Issue

T = TypeVar("T")

BUG_GROUP = "bug"


def issue_type_key(issue: Issue) -> str:
    """Group key for an issue: its type name."""
    return issue.type


def classify(
    issues: Iterable[Issue],
    group_key: Callable[[Issue], str | None] = issue_type_key,
    mapper: Callable[[Issue], T] | None = None,
) -> dict[str, list]:
    """Group issues by ``group_key``, optionally projecting each through ``mapper``.

    Groups keep first-seen order, as do the items within a group. Blank keys
    are collected under "Other".
    """
    grouped: dict[str, list] = {}
    for issue in issues:
        key = group_key(issue) or OTHER_ISSUE_TYPE
        item = mapper(issue) if mapper is not None else issue
        grouped.setdefault(key, []).append(item)
    return grouped


@dataclass
class Buckets(Generic[T]):
    """The two release-notes sections."""

    bugs: list[T] = field(default_factory=list)
    tasks: list[T] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.bugs) + len(self.tasks)


def is_bug_group(group: str) -> bool:
    return group.casefold() == BUG_GROUP


def bucketize(groups: dict[str, list[T]]) -> Buckets[T]:
    """Merge "Bug" groups (any case) into ``bugs`` and the rest into ``tasks``."""
    buckets: Buckets[T] = Buckets()
    for group, items in groups.items():
        target = buckets.bugs if is_bug_group(group) else buckets.tasks
        target.extend(items)
    return buckets
