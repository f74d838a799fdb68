"""Single node of the prefix trie."""

from __future__ import annotations


class TrieNode:
    """One position along the prefix of one or more stored words."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False

    def is_dead(self) -> bool:
        """True when the node neither ends a word nor leads to one."""
        return not self.is_terminal and not self.children

    def contains_words(self) -> bool:
        """True if this node or any descendant is terminal."""
        stack = [self]
        while stack:
            node = stack.pop()
            if node.is_terminal:
                return True
            stack.extend(node.children.values())
        return False

    def __repr__(self) -> str:
        flag = " terminal" if self.is_terminal else ""
        return f"<TrieNode children={''.join(self.children)!r}{flag}>"
