#!/usr/bin/env python
"""Compare the Trie and WordList dictionaries on the same random boards.

Both must find exactly the same words; only the time should differ.

$ python -m gridwords.perf --size 3 --random_seed 808813 20
"""

import argparse
import random
import time

from tqdm import tqdm

from gridwords.args import add_standard_args, get_rng_from_args
from gridwords.board import random_board
from gridwords.dictionary import WordCollection
from gridwords.finder import find_words
from gridwords.trie import Trie
from gridwords.word_list import WordList


def time_boards(
    name: str, dictionary: WordCollection, size: int, seeds: list[int]
) -> tuple[list[set[str]], float]:
    """Search a freshly built board per seed, so no board is shared between runs."""
    results = []
    start_s = time.time()
    for seed in tqdm(seeds, desc=name, smoothing=0):
        board = random_board(size, random.Random(seed))
        results.append(find_words(board, dictionary))
    return results, time.time() - start_s


def main():
    parser = argparse.ArgumentParser(
        prog="Word finder perf test",
        description="Measure the speed of the Trie and WordList dictionaries.",
    )
    add_standard_args(parser, random_seed=True)
    parser.add_argument(
        "num_boards",
        type=int,
        help="Number of boards to evaluate",
        default=10,
        nargs="?",
    )
    args = parser.parse_args()
    rng = get_rng_from_args(args)

    trie = Trie.create_from_file(args.dictionary)
    word_list = WordList.create_from_file(args.dictionary)
    print(f"Loaded {len(word_list)} words ({trie.num_nodes()} trie nodes)")

    seeds = [rng.randint(0, 2**32) for _ in range(args.num_boards)]
    print(f"Searching {len(seeds)} {args.size}x{args.size} boards...")
    fast, fast_s = time_boards("trie", trie, args.size, seeds)
    slow, slow_s = time_boards("list", word_list, args.size, seeds)
    assert fast == slow, "Trie and WordList disagree"

    total_words = sum(len(words) for words in fast)
    print(f"{total_words=}")
    print(f"fast --- trie: {fast_s:.02f}s")
    print(f"slow --- list: {slow_s:.02f}s")


if __name__ == "__main__":
    main()
