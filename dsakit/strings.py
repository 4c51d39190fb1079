"""Substring search algorithms, a suffix trie and suffix arrays."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


def prefix_function(pattern: str) -> List[int]:
    """Longest proper prefix that is also a suffix, for every prefix of ``pattern``."""
    lps = [0] * len(pattern)
    j = 0
    for i in range(1, len(pattern)):
        while j > 0 and pattern[i] != pattern[j]:
            j = lps[j - 1]
        if pattern[i] == pattern[j]:
            j += 1
            lps[i] = j
    return lps


def kmp_search(text: str, pattern: str) -> List[int]:
    """Start indices of every occurrence of ``pattern`` in ``text`` (Knuth-Morris-Pratt)."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    n, m = len(text), len(pattern)
    lps = prefix_function(pattern)
    found: List[int] = []
    i = j = 0
    while i < n:
        if pattern[j] == text[i]:
            i += 1
            j += 1
        if j == m:
            found.append(i - j)
            j = lps[j - 1]
        elif i < n and pattern[j] != text[i]:
            if j:
                j = lps[j - 1]
            else:
                i += 1
    return found


def rabin_karp_search(
    text: str, pattern: str, base: int = 256, modulus: int = 101
) -> List[int]:
    """Start indices of every occurrence of ``pattern`` using a rolling hash."""
    n, m = len(text), len(pattern)
    if m > n:
        return []
    high = pow(base, m - 1, modulus) if m else 1
    pattern_hash = window_hash = 0
    for p_char, t_char in zip(pattern, text):
        pattern_hash = (base * pattern_hash + ord(p_char)) % modulus
        window_hash = (base * window_hash + ord(t_char)) % modulus
    found: List[int] = []
    for i in range(n - m + 1):
        if pattern_hash == window_hash and text[i : i + m] == pattern:
            found.append(i)
        if i < n - m:
            window_hash = (
                base * (window_hash - ord(text[i]) * high) + ord(text[i + m])
            ) % modulus
    return found


def bad_char_table(pattern: str) -> Dict[str, int]:
    """Last index at which each character occurs in ``pattern``."""
    return {char: index for index, char in enumerate(pattern)}


def boyer_moore_search(text: str, pattern: str) -> List[int]:
    """Start indices of every occurrence of ``pattern`` using the bad-character rule."""
    n, m = len(text), len(pattern)
    last = bad_char_table(pattern)
    found: List[int] = []
    shift = 0
    while shift <= n - m:
        j = m - 1
        while j >= 0 and pattern[j] == text[shift + j]:
            j -= 1
        if j < 0:
            found.append(shift)
            if shift + m < n:
                shift += m - last.get(text[shift + m], -1)
            else:
                shift += 1
        else:
            shift += max(1, j - last.get(text[shift + j], -1))
    return found


@dataclass
class _TrieNode:
    children: Dict[str, "_TrieNode"] = field(default_factory=dict)
    index: Optional[int] = None


class SuffixTree:
    """Uncompressed trie of every suffix of a text."""

    def __init__(self, text: str) -> None:
        self.text = text
        self._root = _TrieNode()
        for start in range(len(text)):
            node = self._root
            for char in text[start:]:
                node = node.children.setdefault(char, _TrieNode())
            node.index = start

    def search(self, pattern: str) -> List[int]:
        """Sorted start indices of every occurrence of ``pattern``."""
        node = self._root
        for char in pattern:
            child = node.children.get(char)
            if child is None:
                return []
            node = child
        indices: List[int] = []
        pending = [node]
        while pending:
            current = pending.pop()
            if current.index is not None:
                indices.append(current.index)
            pending.extend(current.children.values())
        return sorted(indices)


def suffix_array(text: str) -> List[int]:
    """Start positions of the suffixes of ``text`` in lexicographic order."""
    return sorted(range(len(text)), key=lambda start: text[start:])