from pathlib import Path
from typing import Dict, List


DEFAULT_LANGUAGE = "Hausa"

# Built-in word lists per language. Larger lists can be loaded with load_word_list().
# Each letter must be a single code point after NFC; words needing a combining
# mark (e.g. a tone on a dotted vowel) would spill the mark into its own cell.
WORD_LISTS: Dict[str, List[str]] = {
    "Hausa": [
        "abinchi", "asibiti", "kwakwa", "gida", "ɗaki", "ƙafa",
        "ɓarawo", "shago", "tsalle", "mutum", "ingarma", "kifi",
        "ruwa", "rana", "wuta", "iska", "ido", "kunne",
        "baki", "hannu", "zaɓi", "karfe", "gora", "ciki", "daji",
        "fari", "hoto", "jira", "kala", "kusa", "lemu", "lura",
        "mota", "nono", "rafi", "sabo", "taro", "uku", "yara", "zane",
    ],
    "English": [
        "apple", "banana", "orange", "grape", "kiwi", "mango",
        "pear", "plum", "lemon", "peach", "berry", "melon",
        "fruit", "sweet", "juice", "seeds", "tree", "plant",
    ],
    "Yoruba": [
        "ilu", "omo", "owo", "ile", "esin", "oja",
        "ogun", "iya", "baba", "eja", "oògùn", "òkúta",
        "òfin", "irin", "orí", "ẹranko", "òjò", "ìyàwó",
        "ẹni", "igi", "ilé", "ọkọ", "ẹran",
    ],
    "Igbo": [
        "mmiri", "aka", "ụkwụ", "isi", "anya", "ọnụ",
        "nwoke", "nwanyị", "ezi", "ọdụ", "mkpụrụ", "osisi",
        "akwa", "ego", "ude", "ụlọ", "akwụkwọ", "ụmụaka",
        "ala", "azu", "oke", "ututu", "eziokwu",
    ],
}

# Single-character fill alphabets for cells no word occupies
ALPHABETS: Dict[str, str] = {
    "Hausa": "abcdefghijklmnopqrstuwyzɓɗƙ",
    "English": "abcdefghijklmnopqrstuvwxyz",
    "Yoruba": "abdeẹfghijklmnoọprsṣtuwyàáèéìíòóùú",
    "Igbo": "abdefghiịjklmnṅoọprstuụvwyz",
}


def _unknown(language: str) -> KeyError:
    known = ", ".join(sorted(WORD_LISTS))
    return KeyError(f"Unknown language '{language}' (known: {known})")


def get_word_list(language: str) -> List[str]:
    """Return a copy of the built-in word list for `language`."""
    if language not in WORD_LISTS:
        raise _unknown(language)
    return list(WORD_LISTS[language])


def get_alphabet(language: str) -> str:
    """Return the fill alphabet for `language`."""
    if language not in ALPHABETS:
        raise _unknown(language)
    return ALPHABETS[language]


def load_word_list(path: str | Path) -> List[str]:
    """
    Load a word list from a text file, one word per line.

    Blank lines and lines starting with '#' are ignored. Words are lowercased.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Word list not found: {path}")

    words = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if word and not word.startswith("#"):
                words.append(word.lower())
    return words
