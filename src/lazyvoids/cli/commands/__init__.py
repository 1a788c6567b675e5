"""CLI command implementations."""

from __future__ import annotations


def parse_pair(value: str) -> tuple[str, str]:
    """Split a `key=value` argument.

    Raises:
        ValueError: If there is no `=` or the key is empty.
    """
    key, sep, item = value.partition("=")
    key = key.strip()
    if not sep or not key:
        msg = f"Invalid entry {value!r} (expected key=value)"
        raise ValueError(msg)
    return key, item
