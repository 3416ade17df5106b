"""Slug normalization for comparing board and repository names."""

from slugify import slugify


def normalize_name(name: str | None) -> str:
    """Return the lower-case slug of ``name`` ("My Repo" -> "my-repo")."""
    if not name:
        return ""
    return slugify(name, lowercase=True)


def names_match(left: str | None, right: str | None) -> bool:
    """Check whether two names are equal after slug normalization."""
    return normalize_name(left) == normalize_name(right)
