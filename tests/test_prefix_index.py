"""
Tests for the PrefixIndex trie.
"""

import pytest

from job_recommender.core import PrefixIndex


@pytest.fixture
def index():
    index = PrefixIndex()
    for word in ["Java Developer", "JavaScript Engineer", "Python Developer", "Tailor"]:
        index.insert(word)
    return index


class TestPrefixIndex:
    """Test insert, lookup, enumeration and removal."""

    def test_contains_is_case_insensitive(self, index):
        assert index.contains("java developer")
        assert index.contains("TAILOR")
        assert "Python Developer" in index

    def test_contains_rejects_prefixes_and_unknown_words(self, index):
        assert not index.contains("Java")
        assert not index.contains("Welder")
        assert not index.contains("")

    def test_has_prefix(self, index):
        assert index.has_prefix("jav")
        assert index.has_prefix("Python D")
        assert not index.has_prefix("rust")
        assert not index.has_prefix("")

    def test_words_with_prefix_returns_original_case(self, index):
        assert sorted(index.words_with_prefix("java")) == ["Java Developer", "JavaScript Engineer"]
        assert index.words_with_prefix("TAI") == ["Tailor"]

    def test_words_with_prefix_includes_exact_word(self, index):
        assert index.words_with_prefix("tailor") == ["Tailor"]

    def test_empty_prefix_matches_nothing(self, index):
        assert index.words_with_prefix("") == []

    def test_unknown_prefix_matches_nothing(self, index):
        assert index.words_with_prefix("xyz") == []

    def test_keeps_every_spelling_of_the_same_word(self):
        index = PrefixIndex()
        index.insert("Cook")
        index.insert("COOK")
        index.insert("Cook")

        assert sorted(index.words_with_prefix("co")) == ["COOK", "Cook"]
        assert index.size() == 2

    def test_insert_ignores_empty_word(self):
        index = PrefixIndex()
        index.insert("")
        assert index.is_empty()
        assert index.size() == 0

    def test_remove_existing_word(self, index):
        assert index.remove("java developer")
        assert not index.contains("Java Developer")
        assert index.words_with_prefix("java") == ["JavaScript Engineer"]

    def test_remove_missing_word(self, index):
        assert not index.remove("Java")
        assert not index.remove("Welder")
        assert not index.remove("")
        assert index.size() == 4

    def test_remove_prunes_branch(self):
        index = PrefixIndex()
        index.insert("sewing")
        assert index.remove("sewing")

        assert not index.has_prefix("s")
        assert index.is_empty()

    def test_remove_keeps_longer_words_sharing_the_prefix(self):
        index = PrefixIndex()
        index.insert("cook")
        index.insert("cooking")

        assert index.remove("cook")
        assert index.contains("cooking")
        assert index.has_prefix("cook")
        assert index.words_with_prefix("coo") == ["cooking"]

    def test_remove_keeps_shorter_words_on_the_path(self):
        index = PrefixIndex()
        index.insert("cook")
        index.insert("cooking")

        assert index.remove("cooking")
        assert index.contains("cook")
        assert not index.has_prefix("cooki")

    def test_size_and_clear(self, index):
        assert index.size() == 4
        assert len(index) == 4
        assert not index.is_empty()

        index.clear()

        assert index.size() == 0
        assert index.is_empty()
        assert index.words_with_prefix("j") == []

    def test_deep_words_do_not_recurse(self):
        index = PrefixIndex()
        long_word = "a" * 5000
        index.insert(long_word)

        assert index.words_with_prefix("a") == [long_word]
