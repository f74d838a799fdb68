"""JSON codec for the trie's node tree.

A node is written as a JSON object whose keys are single characters
mapping to child nodes, plus the marker key ``"^"`` set to ``1`` on nodes
that end a stored word::

    {"c":{"a":{"t":{"^":1},"r":{"^":1}}}}

A literal ``"^"`` in a word is written under ``"\\\\^"`` instead, so the
marker and real characters never collide.

Both directions walk the tree with an explicit stack rather than
``json.dumps``/``json.loads`` on nested dicts, so a trie holding very long
words serializes and loads back without hitting the recursion limit.
Strings and numbers are still scanned with the :mod:`json` helpers.
"""

from __future__ import annotations

import json
import logging
import re
from json.decoder import scanstring
from json.scanner import NUMBER_RE
from typing import Iterator

from prefixtrie.constants import (
    ESCAPED_TERMINAL_KEY,
    LOGGER_NAME,
    TERMINAL_FLAG,
    TERMINAL_KEY,
)
from prefixtrie.errors import ParseError
from prefixtrie.node import TrieNode

log = logging.getLogger(LOGGER_NAME)

_WHITESPACE = re.compile(r"[ \t\n\r]*")
_MARKER = json.dumps(TERMINAL_KEY) + ":" + str(TERMINAL_FLAG)


# Encoding

def _open(node: TrieNode, out: list[str]) -> Iterator[tuple[str, TrieNode]]:
    out.append("{")
    if node.is_terminal:
        out.append(_MARKER)
    return iter(node.children.items())


def dumps(root: TrieNode) -> str:
    """Compact JSON text for *root*, as ``json.dumps(..., separators=(",", ":"))`` writes it."""
    out: list[str] = []
    stack = [_open(root, out)]
    while stack:
        item = next(stack[-1], None)
        if item is None:
            out.append("}")
            stack.pop()
            continue
        ch, child = item
        key = ESCAPED_TERMINAL_KEY if ch == TERMINAL_KEY else ch
        if out[-1] != "{":
            out.append(",")
        out.append(json.dumps(key, ensure_ascii=False))
        out.append(":")
        stack.append(_open(child, out))
    return "".join(out)


# Decoding

def _skip(text: str, pos: int) -> int:
    return _WHITESPACE.match(text, pos).end()


def _after_value(text: str, pos: int) -> tuple[int, bool]:
    """Consume the ``,`` that may follow a member; returns (pos, may_close)."""
    pos = _skip(text, pos)
    if text.startswith(",", pos):
        return pos + 1, False
    if text.startswith("}", pos):
        return pos, True
    raise json.JSONDecodeError("Expecting ',' delimiter", text, pos)


def _child_char(key: str) -> str:
    if key == ESCAPED_TERMINAL_KEY:
        return TERMINAL_KEY
    if len(key) == 1:
        return key
    raise ParseError(f"node key must be a single character, got {key!r}")


def _parse(text: str) -> TrieNode:
    pos = _skip(text, 0)
    if not text.startswith("{", pos):
        raise ParseError("trie root must be a JSON object")

    root = TrieNode()
    # (node, character it hangs from in its parent)
    stack: list[tuple[TrieNode, str]] = [(root, "")]
    pos += 1
    may_close = True

    while stack:
        pos = _skip(text, pos)

        if may_close and text.startswith("}", pos):
            node, ch = stack.pop()
            pos += 1
            if not stack:
                break
            if node.is_dead():
                log.debug("Dropping empty branch %r while loading", ch)
                del stack[-1][0].children[ch]
            pos, may_close = _after_value(text, pos)
            continue

        if not text.startswith('"', pos):
            raise json.JSONDecodeError(
                "Expecting property name enclosed in double quotes", text, pos)
        key, pos = scanstring(text, pos + 1)
        pos = _skip(text, pos)
        if not text.startswith(":", pos):
            raise json.JSONDecodeError("Expecting ':' delimiter", text, pos)
        pos = _skip(text, pos + 1)
        node = stack[-1][0]

        if key == TERMINAL_KEY:
            match = NUMBER_RE.match(text, pos)
            if match is None or match.group(2) or match.group(3) \
                    or match.group(1) not in ("0", str(TERMINAL_FLAG)):
                raise ParseError(f"terminal marker must be 0 or 1 (char {pos})")
            node.is_terminal = match.group(1) == str(TERMINAL_FLAG)
            pos, may_close = _after_value(text, match.end())
            continue

        ch = _child_char(key)
        if not text.startswith("{", pos):
            raise ParseError(f"child {key!r} must be an object (char {pos})")
        child = TrieNode()
        node.children[ch] = child
        stack.append((child, ch))
        pos += 1
        may_close = True

    pos = _skip(text, pos)
    if pos != len(text):
        raise json.JSONDecodeError("Extra data", text, pos)
    if root.is_terminal:
        raise ParseError("trie root cannot be terminal: the empty word is never stored")
    return root


def loads(text: str) -> TrieNode:
    """Parse serialized trie text into a fresh root node.

    Raises:
        ParseError: if *text* is not JSON or does not describe a node tree.
    """
    if not isinstance(text, str):
        raise ParseError(f"expected serialized text, got {type(text).__name__}")
    try:
        return _parse(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"malformed trie JSON: {exc}") from exc
