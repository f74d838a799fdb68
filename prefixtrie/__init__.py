"""Prefix trie dictionary."""

from prefixtrie.constants import TERMINAL_KEY, TERMINAL_FLAG, ESCAPED_TERMINAL_KEY
from prefixtrie.errors import ParseError
from prefixtrie.node import TrieNode
from prefixtrie.trie import PrefixTrie, new_empty, from_word_list, from_serialized
from prefixtrie.wordlist import load_word_list, iter_words

__all__ = [
    "ESCAPED_TERMINAL_KEY",
    "TERMINAL_FLAG",
    "TERMINAL_KEY",
    "ParseError",
    "PrefixTrie",
    "TrieNode",
    "from_serialized",
    "from_word_list",
    "iter_words",
    "load_word_list",
    "new_empty",
]
