"""
katadasar - Indonesian root-word stemmer.

Usage:
    from katadasar import stem, stem_all

    stem("kebaikannya")                    # 'baik'
    stem_all(["dibuang", "pengupas"])      # ['buang', 'kupas']

    # Own dictionary instead of the bundled list:
    from katadasar import Stemmer

    stemmer = Stemmer(["ajar", "baca"])
    stemmer.stem("membaca")                # 'baca'
"""

from .dictionary import DictionaryLoadError, RootDictionary, load_dictionary
from .stemming import (
    Stemmer,
    get_stemmer,
    is_root_word,
    reinitialize_dictionary,
    reset_stemmer,
    stem,
    stem_all,
    tokenize,
)

__version__ = "0.1.0"

__all__ = [
    "Stemmer",
    "RootDictionary",
    "DictionaryLoadError",
    "load_dictionary",
    "get_stemmer",
    "reset_stemmer",
    "stem",
    "stem_all",
    "is_root_word",
    "reinitialize_dictionary",
    "tokenize",
]
