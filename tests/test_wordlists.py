"""Test built-in word lists, fill alphabets and word-list files."""

import unicodedata

import pytest

from src.puzzle import (
    ALPHABETS,
    DEFAULT_LANGUAGE,
    WORD_LISTS,
    get_alphabet,
    get_word_list,
    load_word_list,
)


class TestBuiltInLists:
    """Test the bundled language data."""

    def test_languages(self):
        assert set(WORD_LISTS) == {"Hausa", "English", "Yoruba", "Igbo"}
        assert set(ALPHABETS) == set(WORD_LISTS)
        assert DEFAULT_LANGUAGE in WORD_LISTS

    def test_words_are_lowercase(self):
        for words in WORD_LISTS.values():
            assert all(word == word.lower() for word in words)

    def test_one_code_point_per_letter(self):
        """No built-in word needs a combining mark in a cell of its own."""
        for words in WORD_LISTS.values():
            for word in words:
                composed = unicodedata.normalize("NFC", word)
                assert all(unicodedata.combining(ch) == 0 for ch in composed), word

    def test_alphabets_have_no_repeats(self):
        for alphabet in ALPHABETS.values():
            assert len(set(alphabet)) == len(alphabet)

    def test_hausa_alphabet(self):
        assert get_alphabet("Hausa") == "abcdefghijklmnopqrstuwyzɓɗƙ"

    def test_get_word_list_is_a_copy(self):
        words = get_word_list("English")
        words.append("zzz")
        assert "zzz" not in WORD_LISTS["English"]

    def test_unknown_language(self):
        with pytest.raises(KeyError, match="Klingon"):
            get_word_list("Klingon")
        with pytest.raises(KeyError, match="known"):
            get_alphabet("Klingon")


class TestLoadWordList:
    """Test loading word lists from files."""

    def test_load(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("# fruit\nApple\n\n  kiwi  \nɗaki\n", encoding="utf-8")
        assert load_word_list(path) == ["apple", "kiwi", "ɗaki"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_word_list(tmp_path / "missing.txt")
