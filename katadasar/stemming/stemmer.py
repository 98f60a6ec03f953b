"""
Indonesian stemmer (Nazief-Adriani / Arifin-Setiono style).

Stemming order, stopping at the first root word found:
1. The word itself
2. Derivation prefixes only                       (dibuang -> buang)
3. Inflection suffixes, then derivation suffixes  (bukumukah -> buku)
4. Derivation prefixes on the result of step 3     (kebaikannya -> baik)
5. People suffixes on the result of step 4          (budayawan -> budaya)

The result of step 5 is returned even when it is not a root word, so an
unknown word comes back unchanged (apart from lower-casing).

Examples:
    >>> stem("mensyaratkan")
    'syarat'
    >>> stem_all(["dibuang", "memukul"])
    ['buang', 'pukul']
"""

import logging
import threading
from functools import lru_cache
from typing import Iterable, List, Optional

from ..config import DEFAULT_CACHE_SIZE, get_settings
from ..dictionary import DictionarySource, RootDictionary, load_dictionary
from ..utils import normalize_word
from .prefixes import remove_derivation_prefixes
from .suffixes import (
    remove_derivation_people,
    remove_derivation_suffixes,
    remove_inflection_suffixes,
)

logger = logging.getLogger(__name__)


class Stemmer:
    """
    Stemmer bound to one root dictionary snapshot at a time.

    Stemming only reads the current snapshot, so any number of threads may
    stem concurrently. `reinitialize` builds a new snapshot first and then
    swaps it in; a call in progress keeps the snapshot it started with.
    """

    def __init__(self, dictionary: DictionarySource = None, cache_size: int = DEFAULT_CACHE_SIZE):
        """
        Args:
            dictionary: RootDictionary, path to a word list, iterable of
                words, or None for the bundled list
            cache_size: Max cached stem results (0 disables caching)
        """
        self._dictionary: RootDictionary = load_dictionary(dictionary)
        self._lock = threading.Lock()
        self.cache_size = cache_size

        if cache_size:
            self._stem_cached = lru_cache(maxsize=cache_size)(self._stem)
        else:
            self._stem_cached = self._stem

    def __repr__(self) -> str:
        return f"Stemmer(dictionary={self._dictionary!r}, cache_size={self.cache_size})"

    @property
    def dictionary(self) -> RootDictionary:
        """Current root dictionary snapshot"""
        return self._dictionary

    def is_root_word(self, word: str) -> bool:
        """Dictionary membership after normalization"""
        return normalize_word(word) in self._dictionary

    def stem(self, word: str) -> str:
        """
        Reduce one word to its root form.

        Args:
            word: Surface word, any case

        Returns:
            Root word, or the normalized input when no rule applies

        Raises:
            TypeError: word is not a string
        """
        # Snapshot and word together form the cache key
        return self._stem_cached(normalize_word(word), self._dictionary)

    def stem_all(self, words: Iterable[str]) -> List[str]:
        """Stem each word independently, preserving order and count"""
        return [self.stem(word) for word in words]

    def reinitialize(self, source: DictionarySource = None) -> RootDictionary:
        """
        Replace the root dictionary.

        The new dictionary is fully built before it becomes visible; on a
        load error the current one stays in place.

        Returns:
            The new dictionary

        Raises:
            DictionaryLoadError: source could not be read
        """
        dictionary = load_dictionary(source)

        with self._lock:
            previous = self._dictionary
            self._dictionary = dictionary
            # Calls still running on the old snapshot may re-add entries; they age out of the LRU
            if self.cache_size:
                self._stem_cached.cache_clear()

        logger.info(
            f"Root dictionary replaced: {len(previous)} -> {len(dictionary)} words "
            f"(sha256 {previous.fingerprint[:12]} -> {dictionary.fingerprint[:12]})"
        )
        return dictionary

    @staticmethod
    def _stem(word: str, dictionary: RootDictionary) -> str:
        if word in dictionary:
            return word

        # Prefix only (dibuang, memukul)
        prefix_removed = remove_derivation_prefixes(word, dictionary)
        if prefix_removed in dictionary:
            return prefix_removed

        # Suffixes (hancurlah, bukumukah, jualan)
        inflection_removed = remove_inflection_suffixes(word)
        suffix_removed = remove_derivation_suffixes(inflection_removed, dictionary)
        if suffix_removed in dictionary:
            return suffix_removed

        # Confix (kebaikannya, pelangganmukah)
        confix_removed = remove_derivation_prefixes(suffix_removed, dictionary)

        # People suffix (budayawan, karyawati)
        return remove_derivation_people(confix_removed, dictionary)


# ── Process-wide default stemmer ────────────────────────────────────────────

_default_stemmer: Optional[Stemmer] = None
_default_lock = threading.Lock()


def get_stemmer() -> Stemmer:
    """
    Default stemmer, created on first use from environment configuration
    (KATADASAR_DICTIONARY_PATH, KATADASAR_CACHE_SIZE).
    """
    global _default_stemmer

    if _default_stemmer is None:
        with _default_lock:
            if _default_stemmer is None:
                settings = get_settings()
                _default_stemmer = Stemmer(settings.dictionary_path, cache_size=settings.cache_size)
                logger.info(f"Default stemmer initialized: {_default_stemmer}")

    return _default_stemmer


def reset_stemmer() -> None:
    """Drop the default stemmer; the next call recreates it from configuration."""
    global _default_stemmer

    with _default_lock:
        _default_stemmer = None


def stem(word: str) -> str:
    """Stem one word with the default stemmer"""
    return get_stemmer().stem(word)


def stem_all(words: Iterable[str]) -> List[str]:
    """Stem each word with the default stemmer, preserving order"""
    return get_stemmer().stem_all(words)


def is_root_word(word: str) -> bool:
    """Check the default stemmer's dictionary"""
    return get_stemmer().is_root_word(word)


def reinitialize_dictionary(source: DictionarySource = None) -> RootDictionary:
    """
    Rebuild the default stemmer's dictionary.

    Args:
        source: Path, iterable of words or RootDictionary; None reloads the
            configured source (KATADASAR_DICTIONARY_PATH or the bundled list)
    """
    if source is None:
        source = get_settings().dictionary_path

    return get_stemmer().reinitialize(source)
