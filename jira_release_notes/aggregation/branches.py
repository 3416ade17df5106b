"""Bounded-concurrency aggregation of branches linked to issues.

A single coordinator owns the work queue, the set of in-flight lookups and the
accumulated branch names. Lookups only return values; they never touch shared
state. At most ``concurrency_limit`` lookups are outstanding at any time.

Branch names are accumulated in lookup *completion* order, which depends on
the remote service and is not stable between runs. Duplicates are kept.

Failure policy is drain-without-refill: once a lookup fails, no further
lookups are started, lookups already in flight are awaited, and then
``BranchLookupError`` is raised for the first failure. No partial list is
returned.
"""

import asyncio
import logging
from collections import deque
from collections.abc import Callable, Coroutine
from typing import Any

from ..exceptions import AggregationIncompleteError, BranchLookupError
from ..jira_client.models import Branch, Issue

logger = logging.getLogger(__name__)

DEFAULT_CONCURRENCY_LIMIT = 5

BranchLookup = Callable[[str, str], Coroutine[Any, Any, list[Branch]]]


async def fetch_branches(
    issues: list[Issue],
    repo_filter: str,
    lookup: BranchLookup,
    concurrency_limit: int = DEFAULT_CONCURRENCY_LIMIT,
) -> list[str]:
    """Look up the branches of every issue and return their names.

    Args:
        issues: Issues in dispatch order (see ``sort_by_last_commit``)
        repo_filter: Repository name passed through to ``lookup``; empty for all
        lookup: Async callable returning the branches of one issue
        concurrency_limit: Maximum number of lookups in flight

    Returns:
        Branch names in lookup completion order

    Raises:
        ValueError: If ``concurrency_limit`` is smaller than 1
        BranchLookupError: If any lookup fails
    """
    if concurrency_limit < 1:
        raise ValueError(
            f"concurrency_limit must be at least 1, got {concurrency_limit}"
        )

    queue: deque[str] = deque(issue.id for issue in issues)
    in_flight: dict[asyncio.Task[list[Branch]], str] = {}
    branch_names: list[str] = []
    failures: list[tuple[str, BaseException]] = []

    def refill() -> None:
        while queue and len(in_flight) < concurrency_limit:
            issue_id = queue.popleft()
            task = asyncio.create_task(lookup(issue_id, repo_filter))
            in_flight[task] = issue_id
            logger.debug("Started branch lookup for issue %s", issue_id)

    refill()
    while in_flight:
        if len(in_flight) > concurrency_limit:
            raise AggregationIncompleteError(
                f"{len(in_flight)} lookups in flight, limit is {concurrency_limit}"
            )

        done, _ = await asyncio.wait(in_flight, return_when=asyncio.FIRST_COMPLETED)
        for task in done:
            issue_id = in_flight.pop(task)
            error = task.exception()
            if error is not None:
                if failures:
                    logger.warning(
                        "Branch lookup for issue %s also failed: %s", issue_id, error
                    )
                else:
                    logger.error(
                        "Branch lookup for issue %s failed: %s", issue_id, error
                    )
                failures.append((issue_id, error))
                continue

            branches = task.result()
            logger.debug("Issue %s has %d branch(es)", issue_id, len(branches))
            branch_names.extend(branch.name for branch in branches)

        if not failures:
            refill()

    if failures:
        issue_id, error = failures[0]
        raise BranchLookupError(
            issue_id, error, additional_failures=failures[1:]
        ) from error

    if queue:
        raise AggregationIncompleteError(
            f"{len(queue)} issue(s) were never dispatched"
        )

    return branch_names
