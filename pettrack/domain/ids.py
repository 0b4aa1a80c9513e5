"""Identifier generation."""

from uuid6 import uuid7


def new_id() -> str:
    """Return a fresh UUID version 7 string; ids sort by creation time."""
    return str(uuid7())
