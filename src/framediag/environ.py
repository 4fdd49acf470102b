"""Namespaced environment variable access."""

import os
import re

ENV_PREFIX = "IMMICHFRAME_"

_SUFFIX_RE = re.compile(r"[A-Z0-9_]+")
_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def read_env(suffix: str) -> str | None:
    """
    Look up ``IMMICHFRAME_<suffix>``.

    Only upper-case ASCII letters, digits and underscores are accepted in
    ``suffix``. Anything else, including an empty suffix, returns None
    without touching the environment.
    """
    if not _SUFFIX_RE.fullmatch(suffix):
        return None
    return os.environ.get(ENV_PREFIX + suffix)


def is_truthy(value: str | None) -> bool:
    """Return True for 1/true/yes/on, case-insensitively."""
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


def parse_positive_int(value: str | None) -> int | None:
    """Return the leading integer of ``value`` if it is positive."""
    match = _LEADING_INT_RE.match(value or "")
    if match is None:
        return None
    n = int(match.group(1))
    return n if n > 0 else None
