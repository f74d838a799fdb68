"""Prefix trie dictionary with pruning deletion and JSON dump/load."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from prefixtrie import serialization
from prefixtrie.constants import LOGGER_NAME
from prefixtrie.node import TrieNode

log = logging.getLogger(LOGGER_NAME)


def _is_valid_word(word) -> bool:
    return isinstance(word, str) and len(word) > 0


class PrefixTrie:
    """Set of non-empty strings stored as a prefix tree.

    Queries given anything other than a non-empty ``str`` answer ``False``
    and mutations given one do nothing; bad input is never an error.
    """

    def __init__(self):
        self.root = TrieNode()

    # -------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------

    def is_valid_prefix(self, word: str) -> bool:
        """True if at least one stored word starts with *word* (itself included)."""
        if not _is_valid_word(word):
            return False
        node = self._walk(word)
        return node is not None and node.contains_words()

    def lookup(self, word: str) -> bool:
        """True only if *word* itself is stored."""
        if not _is_valid_word(word):
            return False
        node = self._walk(word)
        return node is not None and node.is_terminal

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    # -------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------

    def add_word(self, word: str) -> None:
        if not _is_valid_word(word):
            return
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        node.is_terminal = True
        log.debug("Added %r", word)

    def remove_word(self, word: str) -> None:
        """Remove *word* and prune branches left without any word.

        Missing words are ignored. Pruning walks the visited path back
        from the deepest node and stops at the first node that is still
        terminal or still has children; the root is never removed.
        """
        if not _is_valid_word(word):
            return

        path = [self.root]
        for ch in word:
            nxt = path[-1].children.get(ch)
            if nxt is None:
                return
            path.append(nxt)

        path[-1].is_terminal = False

        pruned = 0
        depth = len(word)
        while depth > 0 and path[depth].is_dead():
            del path[depth - 1].children[word[depth - 1]]
            depth -= 1
            pruned += 1
        log.debug("Removed %r (pruned %d nodes)", word, pruned)

    # -------------------------------------------------------------
    # Enumeration
    # -------------------------------------------------------------

    def get_words(self) -> list[str]:
        """All stored words in depth-first, insertion-ordered traversal."""
        return list(self)

    def __iter__(self) -> Iterator[str]:
        # Children are pushed in reverse so they pop in insertion order.
        stack = [(self.root, "")]
        while stack:
            node, path = stack.pop()
            if node.is_terminal:
                yield path
            stack.extend((nxt, path + ch) for ch, nxt in reversed(node.children.items()))

    def __len__(self) -> int:
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            count += node.is_terminal
            stack.extend(node.children.values())
        return count

    def __contains__(self, word: object) -> bool:
        return self.lookup(word)  # type: ignore[arg-type]

    # -------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------

    def dump_json(self) -> str:
        return serialization.dumps(self.root)

    def load_json(self, text: str) -> None:
        """Replace the whole tree with one parsed from *text*.

        Raises:
            ParseError: if *text* is malformed. The current tree is kept.
        """
        self.root = serialization.loads(text)
        log.debug("Loaded trie from %d characters of JSON", len(text))

    def __repr__(self) -> str:
        return f"<PrefixTrie words={len(self)}>"


# Construction helpers

def new_empty() -> PrefixTrie:
    return PrefixTrie()


def from_word_list(words: Iterable[str]) -> PrefixTrie:
    """Build a trie by inserting *words* in order."""
    trie = PrefixTrie()
    for w in words:
        trie.add_word(w)
    return trie


def from_serialized(text: str) -> PrefixTrie:
    """Build a trie from :meth:`PrefixTrie.dump_json` output.

    Raises:
        ParseError: if *text* is malformed.
    """
    trie = PrefixTrie()
    trie.load_json(text)
    return trie
