from typing import Iterable, Iterator, Self

from gridwords.dictionary import read_words, split_words


class Trie:
    """Prefix tree over arbitrary characters.

    Words sharing a prefix share the nodes for that prefix. Characters are
    stored and compared exactly as given; callers normalize case.
    """

    _children: dict[str, Self]
    _is_word: bool

    def __init__(self):
        self._is_word = False
        self._children = {}

    def descend(self, ch: str) -> Self | None:
        return self._children.get(ch)

    def is_word(self):
        return self._is_word

    # ---

    def set_is_word(self):
        self._is_word = True

    def insert(self, word: str) -> Self:
        node = self
        for ch in word:
            child = node.descend(ch)
            if child is None:
                child = node._children[ch] = Trie()
            node = child
        node.set_is_word()
        return node

    def find_node(self, prefix: str) -> Self | None:
        node = self
        for ch in prefix:
            node = node.descend(ch)
            if node is None:
                return None
        return node

    def contains(self, word: str) -> bool:
        node = self.find_node(word)
        return node is not None and node.is_word()

    def possible_prefix(self, prefix: str) -> bool:
        return self.find_node(prefix) is not None

    def _nodes(self) -> Iterator[Self]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(node._children.values())

    def size(self):
        return sum(1 for node in self._nodes() if node.is_word())

    def num_nodes(self):
        return sum(1 for _ in self._nodes())

    def words(self) -> Iterator[str]:
        """All stored words, in sorted order."""
        stack = [("", self)]
        while stack:
            prefix, node = stack.pop()
            if node.is_word():
                yield prefix
            for ch in sorted(node._children, reverse=True):
                stack.append((prefix + ch, node._children[ch]))

    def __repr__(self):
        return f"Trie({self.size()} words, {self.num_nodes()} nodes)"

    @staticmethod
    def create_from_wordlist(words: Iterable[str]) -> "Trie":
        trie = Trie()
        for word in words:
            trie.insert(word)
        return trie

    @staticmethod
    def create_from_string(blob: str) -> "Trie":
        """Words separated by any whitespace."""
        return Trie.create_from_wordlist(split_words(blob))

    @staticmethod
    def create_from_file(path: str) -> "Trie":
        return Trie.create_from_wordlist(read_words(path))
