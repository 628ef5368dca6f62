"""Slug generation utilities."""
from __future__ import annotations

import itertools
import re
import secrets
from typing import Iterable

_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")
_SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def generate_slug(name: str | None) -> str:
    """
    Convert a display name to a URL-friendly slug.

    Every run of characters outside ``[a-z0-9]`` (after lowercasing) becomes
    a single hyphen and leading/trailing hyphens are stripped. A name with
    no ASCII letters or digits yields an empty string.

    Args:
        name: The text to convert to a slug

    Returns:
        A slug string, possibly empty
    """
    if not name:
        return ""

    text = _NON_ALNUM_RUN.sub("-", name.lower())
    return text.strip("-")


def generate_unique_slug(candidate: str, existing: Iterable[str]) -> str:
    """
    Return ``candidate`` if unused, else the first free ``candidate-N`` (N >= 2).

    Args:
        candidate: The preferred slug
        existing: Slugs already taken in the collection

    Returns:
        A slug not present in ``existing``
    """
    taken = existing if isinstance(existing, (set, frozenset)) else set(existing)
    if candidate not in taken:
        return candidate

    for n in itertools.count(2):
        suffixed = f"{candidate}-{n}"
        if suffixed not in taken:
            return suffixed
    raise AssertionError("unreachable")


def fallback_slug(nbytes: int = 4) -> str:
    """Random lowercase hex token for names that produce an empty slug."""
    return secrets.token_hex(nbytes)


def is_valid_slug(value: str | None) -> bool:
    if not value:
        return False
    return bool(_SLUG_PATTERN.match(value))
