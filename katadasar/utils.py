"""Utility functions shared by the dictionary and the stemmer"""

import hashlib
from pathlib import Path
from typing import Iterable, Union


def normalize_word(word: str) -> str:
    """
    Normalize a surface word before any dictionary lookup or rule match.

    Only surrounding whitespace is removed and the word is lower-cased;
    punctuation and digits are left for the rules to ignore.

    Raises:
        TypeError: if word is not a string

    Examples:
        >>> normalize_word("  Perekonomian ")
        'perekonomian'
        >>> normalize_word("")
        ''
    """
    if not isinstance(word, str):
        raise TypeError(f"word must be a string, got {type(word).__name__}")

    return word.strip().lower()


def calculate_hash(source: Union[str, Path, bytes, Iterable[str]]) -> str:
    """
    Calculate SHA256 hash of a word list source

    Args:
        source: File path (str/Path), raw content (bytes), or an iterable
            of words. Words are hashed in sorted order, one per line, so two
            iterables holding the same set give the same digest.

    Returns:
        Hexadecimal hash string (64 characters)

    Examples:
        >>> calculate_hash(b"ajar baru")
        'c3a4...'
        >>> calculate_hash(["baru", "ajar"]) == calculate_hash(["ajar", "baru"])
        True
    """
    if isinstance(source, bytes):
        content = source
    elif isinstance(source, (str, Path)):
        with open(Path(source), "rb") as f:
            content = f.read()
    else:
        content = "\n".join(sorted(source)).encode("utf-8")

    return hashlib.sha256(content).hexdigest()
