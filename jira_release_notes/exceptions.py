"""Exception hierarchy for release notes generation."""


class ReleaseNotesError(Exception):
    """Base class for all release notes errors."""


class JiraRequestError(ReleaseNotesError):
    """A request to the Jira REST API failed (transport, auth or HTTP status)."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class BranchLookupError(ReleaseNotesError):
    """The branch lookup for a single issue failed, aborting the aggregation."""

    def __init__(
        self,
        issue_id: str,
        cause: BaseException,
        additional_failures: list[tuple[str, BaseException]] | None = None,
    ):
        super().__init__(f"Branch lookup failed for issue {issue_id}: {cause}")
        self.issue_id = issue_id
        self.cause = cause
        self.additional_failures = additional_failures or []


class AggregationIncompleteError(ReleaseNotesError):
    """Internal bookkeeping of the branch fetcher is inconsistent."""
