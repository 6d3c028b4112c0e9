"""Prefix tries: a binary trie over 32-bit integers and a lowercase word trie."""

from __future__ import annotations

from dataclasses import dataclass, field

BITS = 32
_SIGN_BIT = 1 << (BITS - 1)


@dataclass
class _BitNode:
    children: list[_BitNode | None] = field(default_factory=lambda: [None, None])
    count: int = 0


class BitTrie:
    """Multiset of 32-bit integers answering maximum-XOR queries."""

    def __init__(self) -> None:
        self.root = _BitNode()

    @staticmethod
    def _bits(number: int):
        for i in range(BITS - 1, -1, -1):
            yield i, (number >> i) & 1

    def insert(self, number: int) -> None:
        """Add one occurrence of ``number``."""
        current = self.root
        for _, bit in self._bits(number):
            child = current.children[bit]
            if child is None:
                child = current.children[bit] = _BitNode()
            current = child
            current.count += 1

    def remove(self, number: int) -> None:
        """Remove one occurrence of ``number``; stops where its path ends."""
        current = self.root
        for _, bit in self._bits(number):
            child = current.children[bit]
            if child is None:
                return
            current = child
            current.count -= 1

    def find_max_xor(self, number: int) -> int:
        """Return the largest ``number ^ x`` over stored ``x``, as a signed 32-bit value."""
        current = self.root
        result = 0
        for i, bit in self._bits(number):
            wanted = current.children[1 - bit]
            same = current.children[bit]
            if wanted is not None and wanted.count > 0:
                result |= 1 << i
                current = wanted
            elif same is not None and same.count > 0:
                current = same
            else:
                break
        if result & _SIGN_BIT:
            result -= 1 << BITS
        return result


@dataclass
class _WordNode:
    children: dict[str, _WordNode] = field(default_factory=dict)
    end: bool = False


def _check_word(word: str) -> None:
    if any(not "a" <= ch <= "z" for ch in word):
        raise ValueError(f"only lowercase letters a-z are allowed: {word!r}")


class Trie:
    """Set of lowercase words with prefix lookup."""

    def __init__(self) -> None:
        self.root = _WordNode()

    def _walk(self, word: str) -> _WordNode | None:
        _check_word(word)
        node = self.root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        _check_word(word)
        node = self.root
        for ch in word:
            node = node.children.setdefault(ch, _WordNode())
        node.end = True

    def search(self, word: str) -> bool:
        """Return whether ``word`` was inserted."""
        node = self._walk(word)
        return node is not None and node.end

    def starts_with(self, prefix: str) -> bool:
        """Return whether some inserted word begins with ``prefix``."""
        return self._walk(prefix) is not None