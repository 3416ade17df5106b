"""Configuration for the Jira connection."""

import os
from typing import Optional

DEFAULT_CONCURRENCY = 5
DEFAULT_TIMEOUT = 30.0


class JiraConfig:
    """Configuration class for Jira API access."""

    def __init__(self) -> None:
        """Initialize Jira configuration from environment variables."""
        self.host: Optional[str] = os.getenv("ATLASSIAN_HOST")
        self.username: Optional[str] = os.getenv("ATLASSIAN_USERNAME")
        self.api_token: Optional[str] = os.getenv("ATLASSIAN_API_TOKEN")
        self.concurrency: int = _int_from_env(
            "JIRA_BRANCH_CONCURRENCY", DEFAULT_CONCURRENCY
        )
        self.timeout: float = _float_from_env("JIRA_REQUEST_TIMEOUT", DEFAULT_TIMEOUT)

    def is_configured(self) -> bool:
        """Check if Jira credentials are present."""
        return all([self.host, self.username, self.api_token])

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        missing = []
        if not self.host:
            missing.append("ATLASSIAN_HOST")
        if not self.username:
            missing.append("ATLASSIAN_USERNAME")
        if not self.api_token:
            missing.append("ATLASSIAN_API_TOKEN")

        if missing:
            raise ValueError(
                f"Environment variables required for Jira access: {', '.join(missing)}"
            )

        if self.concurrency < 1:
            raise ValueError(
                f"JIRA_BRANCH_CONCURRENCY must be at least 1, got {self.concurrency}"
            )


def _int_from_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{value}'")


def _float_from_env(name: str, default: float) -> float:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got '{value}'")
