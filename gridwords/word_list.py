"""Unindexed list of words.

Every query scans the whole list, so this is only useful as a reference to
check the Trie against and to show how much prefix sharing buys.
"""

from typing import Iterable

from gridwords.dictionary import read_words, split_words


class WordList:
    _words: list[str]

    def __init__(self, words: Iterable[str]):
        self._words = list(words)

    def contains(self, word: str) -> bool:
        return word in self._words

    def possible_prefix(self, prefix: str) -> bool:
        for word in self._words:
            if word.startswith(prefix):
                return True
        return False

    def __len__(self):
        return len(self._words)

    @staticmethod
    def create_from_wordlist(words: Iterable[str]) -> "WordList":
        return WordList(words)

    @staticmethod
    def create_from_string(blob: str) -> "WordList":
        return WordList(split_words(blob))

    @staticmethod
    def create_from_file(path: str) -> "WordList":
        return WordList(read_words(path))
