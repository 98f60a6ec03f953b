"""
Root-word dictionary used as the stemming oracle.

A RootDictionary is an immutable snapshot of root words. Lookups are exact
string matches; callers normalize their input first. Rebuilding means
constructing a new snapshot, never mutating an existing one.

Sources:
- Bundled list (`katadasar/data/root_words.txt`)
- Any UTF-8 text file of whitespace-separated words (`#` starts a comment line)
- Any iterable of words
"""

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, Optional, Union

from .utils import calculate_hash

logger = logging.getLogger(__name__)

BUNDLED_ROOT_WORDS = Path(__file__).parent / "data" / "root_words.txt"

DictionarySource = Union[None, str, Path, Iterable[str]]


class DictionaryLoadError(RuntimeError):
    """Root-word source could not be read"""


def _parse_words(text: str) -> Iterator[str]:
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        for token in line.split():
            yield token.lower()


class RootDictionary:
    """
    Immutable set of root words.

    Duplicates collapse and empty tokens are dropped. Membership is O(1).
    """

    __slots__ = ("_words", "_fingerprint", "source")

    def __init__(self, words: Iterable[str] = (), source: str = "<memory>"):
        self._words: FrozenSet[str] = frozenset(w for w in words if w)
        self._fingerprint: Optional[str] = None
        self.source = source

    @classmethod
    def from_text(cls, text: str, source: str = "<text>") -> "RootDictionary":
        """Build from whitespace-separated words, skipping `#` comment lines."""
        return cls(_parse_words(text), source=source)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "RootDictionary":
        """
        Build from a UTF-8 word-list file.

        Raises:
            DictionaryLoadError: file missing, unreadable or not UTF-8
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DictionaryLoadError(f"Cannot read root words from {path}: {e}") from e

        return cls.from_text(text, source=str(path))

    def contains(self, word: str) -> bool:
        """Exact membership test"""
        return word in self._words

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"RootDictionary(words={len(self._words)}, source={self.source!r})"

    @property
    def fingerprint(self) -> str:
        """SHA256 over the sorted words; equal sets give equal fingerprints"""
        if self._fingerprint is None:
            self._fingerprint = calculate_hash(self._words)
        return self._fingerprint


def load_dictionary(source: DictionarySource = None) -> RootDictionary:
    """
    Build a RootDictionary from any supported source.

    Args:
        source: None for the bundled list, a path to a word-list file,
            an existing RootDictionary (returned as is), or an iterable
            of words (lower-cased on the way in)

    Returns:
        New RootDictionary snapshot

    Raises:
        DictionaryLoadError: file source could not be read
    """
    if isinstance(source, RootDictionary):
        return source

    if source is None:
        if not BUNDLED_ROOT_WORDS.exists():
            raise DictionaryLoadError(
                f"{BUNDLED_ROOT_WORDS} is missing. It seems that your installation is corrupted"
            )
        dictionary = RootDictionary.from_file(BUNDLED_ROOT_WORDS)
    elif isinstance(source, (str, Path)):
        dictionary = RootDictionary.from_file(source)
    else:
        dictionary = RootDictionary((w.strip().lower() for w in source), source="<iterable>")

    logger.info(
        f"Loaded {len(dictionary)} root words from {dictionary.source} "
        f"(sha256={dictionary.fingerprint[:12]})"
    )
    return dictionary
