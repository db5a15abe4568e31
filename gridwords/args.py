"""Standard command-line arguments shared across tools."""

import argparse
import random

from gridwords.dictionary import WordCollection
from gridwords.trie import Trie
from gridwords.word_list import WordList

DICTIONARY_KINDS = {
    "trie": Trie,
    "list": WordList,
}


def add_standard_args(
    parser: argparse.ArgumentParser, *, random_seed=False, dictionary_kind=False
):
    parser.add_argument(
        "--size",
        type=int,
        default=4,
        help="Edge length of generated boards.",
    )
    parser.add_argument(
        "--dictionary",
        type=str,
        default="wordlists/commonwords.txt",
        help="Path to dictionary file with whitespace-separated lowercase words.",
    )

    if random_seed:
        parser.add_argument(
            "--random_seed",
            help="Explicitly set the random seed.",
            type=int,
            default=-1,
        )
    if dictionary_kind:
        parser.add_argument(
            "--dictionary_kind",
            choices=tuple(DICTIONARY_KINDS),
            default="trie",
            help="Dictionary implementation. 'list' scans every word on every query.",
        )


def get_dictionary_from_args(args: argparse.Namespace) -> WordCollection:
    kind = getattr(args, "dictionary_kind", "trie")
    return DICTIONARY_KINDS[kind].create_from_file(args.dictionary)


def get_rng_from_args(args: argparse.Namespace) -> random.Random:
    if args.random_seed >= 0:
        return random.Random(args.random_seed)
    return random.Random()
