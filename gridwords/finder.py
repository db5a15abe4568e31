from gridwords.board import Board, Cell
from gridwords.dictionary import WordCollection

MIN_WORD_LENGTH = 3


class BoardInUseError(RuntimeError):
    """A search was started while another traversal holds cells on the board."""


class WordFinder:
    """Backtracking search for every dictionary word that can be traced on a board.

    A word is a path of adjacent cells (diagonals included) that uses each cell
    at most once. Letters are lowercased before any dictionary query, so the
    dictionary should hold lowercase words.

    The board's in_use flags are the only traversal state, so a board must not
    be shared between two searches running at the same time.
    """

    _board: Board
    _dict: WordCollection
    min_length: int
    found_words: set[str]
    paths: dict[str, tuple[tuple[int, int], ...]]

    def __init__(
        self, board: Board, dictionary: WordCollection, min_length: int = MIN_WORD_LENGTH
    ):
        self._board = board
        self._dict = dictionary
        self.min_length = min_length
        self.found_words = set()
        self.paths = {}
        self._seq: list[tuple[int, int]] = []

    def find_words(self) -> set[str]:
        if not self._board.is_idle():
            busy = [(cell.row, cell.col) for cell in self._board if cell.in_use]
            raise BoardInUseError(f"Cells already in use: {busy}")
        self.found_words = set()
        self.paths = {}
        self._seq = []
        for cell in self._board.cells():
            self.find_words_from(cell, "")
        assert not self._seq
        return self.found_words

    def find_words_from(self, cell: Cell, prefix: str):
        current = (prefix + str(cell.symbol)).lower()
        with cell.claim():
            self._seq.append((cell.row, cell.col))
            try:
                if len(current) >= self.min_length and self._dict.contains(current):
                    if current not in self.found_words:
                        self.found_words.add(current)
                        self.paths[current] = tuple(self._seq)

                if self._dict.possible_prefix(current):
                    for n in self._board.unvisited_neighbors(cell.row, cell.col):
                        self.find_words_from(n, current)
            finally:
                self._seq.pop()


def find_words(board: Board, dictionary: WordCollection) -> set[str]:
    return WordFinder(board, dictionary).find_words()
