from gridwords.trie import Trie
from gridwords.word_list import WordList

WORDS = ["agriculture", "culture", "boggle", "tea", "sea", "teapot"]


def test_word_list():
    wl = WordList.create_from_wordlist(WORDS)
    assert len(wl) == 6
    assert wl.contains("tea")
    assert wl.contains("teapot")
    assert not wl.contains("teap")
    assert not wl.contains("")

    assert wl.possible_prefix("teap")
    assert wl.possible_prefix("")
    assert not wl.possible_prefix("teapots")
    assert not wl.possible_prefix("x")


def test_matches_trie():
    wl = WordList.create_from_wordlist(WORDS)
    t = Trie.create_from_wordlist(WORDS)
    queries = ["", "t", "te", "tea", "teap", "teapot", "teapots", "cul", "boggle", "z"]
    for q in queries:
        assert wl.contains(q) == t.contains(q), q
        assert wl.possible_prefix(q) == t.possible_prefix(q), q


def test_constructors(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("cat can\nbat\n")
    from_file = WordList.create_from_file(str(path))
    from_string = WordList.create_from_string(" cat\tcan  bat\n")
    for wl in (from_file, from_string):
        assert len(wl) == 3
        assert wl.contains("bat")
        assert wl.possible_prefix("ca")


def test_empty():
    wl = WordList.create_from_string("")
    assert len(wl) == 0
    assert not wl.contains("a")
    assert not wl.possible_prefix("a")


def test_very_long_word_matches_trie():
    blob = "cat " + "x" * 5000
    wl = WordList.create_from_string(blob)
    t = Trie.create_from_string(blob)
    assert len(wl) == t.size() == 2
    for q in ("cat", "ca", "x" * 4999, "x" * 5000, "x" * 5001):
        assert wl.contains(q) == t.contains(q), len(q)
        assert wl.possible_prefix(q) == t.possible_prefix(q), len(q)
