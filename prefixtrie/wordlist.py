"""Word list loading into a prefix trie."""

from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator

from prefixtrie.constants import LOGGER_NAME
from prefixtrie.trie import PrefixTrie

log = logging.getLogger(LOGGER_NAME)


def iter_words(lines: Iterable[str]) -> Iterator[str]:
    """Yield one stripped word per line, skipping blanks and ``#`` comments."""
    for line in lines:
        word = line.strip()
        if not word or word.startswith("#"):
            continue
        yield word


def load_word_list(path: str | os.PathLike[str], trie: PrefixTrie | None = None) -> PrefixTrie:
    """Insert every word in the file at *path* into *trie* (a new one by default)."""
    if trie is None:
        trie = PrefixTrie()

    count = 0
    with open(path, "r", encoding="utf-8") as f:
        for word in iter_words(f):
            trie.add_word(word)
            count += 1

    if count:
        log.info("Loaded %s words from %s", f"{count:,}", path)
    else:
        log.warning("No words found in %s", path)
    return trie
