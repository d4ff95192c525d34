"""
Prefix Index - Character trie used for job title and skill lookups.

Words are stored lowercased, one node per character. Each terminal node
also keeps every original spelling that normalized to it, so lookups are
case-insensitive while results keep the caller's casing.

Complexity:
- insert / contains / has_prefix / remove: O(length of word)
- words_with_prefix: O(length of prefix + number of matches)
"""

from typing import Optional


class _TrieNode:
    __slots__ = ("children", "is_terminal", "words")

    def __init__(self):
        self.children: dict[str, "_TrieNode"] = {}
        self.is_terminal = False
        self.words: set[str] = set()  # original-case spellings


class PrefixIndex:
    """Case-insensitive trie supporting prefix enumeration."""

    def __init__(self):
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Insert a word, remembering its original casing."""
        if not word:
            return

        node = self._root
        for char in word.lower():
            node = node.children.setdefault(char, _TrieNode())

        node.is_terminal = True
        node.words.add(word)

    def contains(self, word: str) -> bool:
        """Exact, case-insensitive membership."""
        if not word:
            return False

        node = self._find_node(word.lower())
        return node is not None and node.is_terminal

    def has_prefix(self, prefix: str) -> bool:
        """Check if any stored word starts with the prefix."""
        if not prefix:
            return False
        return self._find_node(prefix.lower()) is not None

    def words_with_prefix(self, prefix: str) -> list[str]:
        """
        Get all stored words starting with the prefix (autocomplete).

        An empty prefix matches nothing. Order among results is unspecified.

        Args:
            prefix: Prefix to look up, any casing

        Returns:
            Original-case spellings of every matching word
        """
        if not prefix:
            return []

        node = self._find_node(prefix.lower())
        if node is None:
            return []

        return self._collect_words(node)

    def all_words(self) -> list[str]:
        return self._collect_words(self._root)

    def remove(self, word: str) -> bool:
        """
        Remove a word and prune branches left without any terminal below them.

        All original-case spellings of the word are dropped together.

        Returns:
            True if the word was present
        """
        if not word:
            return False

        path = [self._root]
        node = self._root
        lowered = word.lower()
        for char in lowered:
            node = node.children.get(char)
            if node is None:
                return False
            path.append(node)

        if not node.is_terminal:
            return False

        node.is_terminal = False
        node.words.clear()

        # Walk back towards the root, dropping nodes that no longer lead anywhere
        for depth in range(len(lowered), 0, -1):
            current = path[depth]
            if current.children or current.is_terminal:
                break
            del path[depth - 1].children[lowered[depth - 1]]

        return True

    def size(self) -> int:
        """Number of stored original-case spellings."""
        return len(self.all_words())

    def is_empty(self) -> bool:
        return not self._root.children

    def clear(self) -> None:
        self._root = _TrieNode()

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def _find_node(self, lowered: str) -> Optional[_TrieNode]:
        node = self._root
        for char in lowered:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    @staticmethod
    def _collect_words(start: _TrieNode) -> list[str]:
        # Depth-first with an explicit stack so long words can't hit the recursion limit
        result = []
        stack = [start]
        while stack:
            node = stack.pop()
            if node.is_terminal:
                result.extend(node.words)
            stack.extend(node.children.values())
        return result
