"""Issue classification for release notes."""

from .grouping import Buckets, bucketize, classify, issue_type_key

__all__ = ["Buckets", "bucketize", "classify", "issue_type_key"]
