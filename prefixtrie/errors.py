"""Exceptions raised by the prefix trie."""

from __future__ import annotations


class ParseError(ValueError):
    """Serialized trie text is not a well-formed JSON tree."""
