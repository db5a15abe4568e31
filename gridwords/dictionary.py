from typing import Iterator, Protocol


class WordCollection(Protocol):
    """What the word finder needs from a dictionary."""

    def contains(self, word: str) -> bool: ...

    def possible_prefix(self, prefix: str) -> bool: ...


def split_words(blob: str) -> list[str]:
    return blob.split()


def read_words(path: str) -> Iterator[str]:
    """Every whitespace-separated token in a line-oriented word file."""
    with open(path) as f:
        for line in f:
            yield from line.split()
