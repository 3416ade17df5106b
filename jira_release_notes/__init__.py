"""Jira release notes and linked branch aggregation."""

__version__ = "0.1.0"
