"""Serialization format constants for the prefix trie."""

from __future__ import annotations

LOGGER_NAME = "prefixtrie"

# ── JSON tree format ────────────────────────────────────────────────────
# Each node is a JSON object keyed by single characters. The marker key
# flags a node that ends a stored word.

TERMINAL_KEY = "^"
TERMINAL_FLAG = 1

# A literal "^" child is written under this two-character key so it can
# never be read back as the marker.
ESCAPED_TERMINAL_KEY = "\\^"
