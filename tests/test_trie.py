import pytest

from dsakit.trie import Trie


@pytest.fixture
def trie():
    t = Trie()
    for word in ("and", "are", "dot"):
        t.insert(word)
    return t


def test_main_sequence(trie):
    assert trie.search("and") is True
    trie.remove("and")
    assert trie.search("and") is False


def test_remove_keeps_shared_prefix_words(trie):
    trie.remove("and")
    assert trie.search("are") is True
    assert trie.search("dot") is True


def test_prefix_is_not_a_word(trie):
    assert trie.search("an") is False
    assert "ar" not in trie


def test_remove_longer_word_keeps_prefix_word():
    t = Trie()
    t.insert("an")
    t.insert("and")
    t.remove("and")
    assert t.search("an") is True
    assert t.search("and") is False


def test_remove_prefix_word_keeps_longer_word():
    t = Trie()
    t.insert("an")
    t.insert("and")
    t.remove("an")
    assert t.search("and") is True
    assert t.search("an") is False


def test_remove_absent_word_changes_nothing(trie):
    trie.remove("zebra")
    trie.remove("an")
    assert [trie.search(w) for w in ("and", "are", "dot")] == [True, True, True]


def test_reinsert_after_remove(trie):
    trie.remove("dot")
    trie.insert("dot")
    assert "dot" in trie


def test_empty_word():
    t = Trie()
    assert t.search("") is False
    t.insert("")
    assert t.search("") is True
    t.remove("")
    assert t.search("") is False


def test_rejects_non_lowercase():
    with pytest.raises(ValueError):
        Trie().insert("Hello")


def test_contains_with_other_characters_is_false(trie):
    assert ("AND" in trie) is False