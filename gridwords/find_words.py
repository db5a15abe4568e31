#!/usr/bin/env python
"""Find all the words on a board and print them.

$ python -m gridwords.find_words "eila tpag reto htay"
$ python -m gridwords.find_words --size 5 --random_seed 42
"""

import argparse
import time

from gridwords.args import add_standard_args, get_dictionary_from_args, get_rng_from_args
from gridwords.board import Board, random_board
from gridwords.finder import WordFinder


def main():
    parser = argparse.ArgumentParser(
        prog="find_words",
        description="List every dictionary word that can be traced on a board.",
    )
    add_standard_args(parser, random_seed=True, dictionary_kind=True)
    parser.add_argument(
        "boards",
        nargs="*",
        help='Boards as rows separated by spaces ("eila tpag reto htay") or as one '
        "run of n*n letters. A random --size board is used if none are given.",
    )
    args = parser.parse_args()

    d = get_dictionary_from_args(args)
    if args.boards:
        boards = [Board.from_letters(b) for b in args.boards]
    else:
        boards = [random_board(args.size, get_rng_from_args(args))]

    for board in boards:
        print(board)
        finder = WordFinder(board, d)
        start_s = time.time()
        words = finder.find_words()
        elapsed_ms = (time.time() - start_s) * 1000
        for word in sorted(words):
            print(word)
        print(f"Found {len(words)} words in {elapsed_ms:.0f} ms!")
        print()


if __name__ == "__main__":
    main()
