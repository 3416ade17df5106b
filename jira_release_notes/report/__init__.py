"""Report rendering."""

from .formatter import issue_link, render_branch_list, render_buckets, render_title

__all__ = ["issue_link", "render_branch_list", "render_buckets", "render_title"]
