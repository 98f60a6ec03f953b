"""
Affix-stripping stemmer for Indonesian.

Components:
- suffixes: inflection (-lah, -kah, -tah, -pun, -ku, -mu, -nya),
  derivation (-kan, -an, -i) and people (-man, -wan, -wati) suffix removal
- guards: disallowed and precedence prefix-suffix combinations
- prefixes: table-driven derivation prefix removal (prefix_rules.yaml)
- stemmer: orchestration and the process-wide default stemmer
- tokenizer: text to stems
"""

from .guards import is_disallowed_prefix_suffixes, is_rule_precedence
from .prefixes import remove_derivation_prefixes
from .suffixes import (
    remove_derivation_people,
    remove_derivation_suffixes,
    remove_inflection_suffixes,
)
from .stemmer import (
    Stemmer,
    get_stemmer,
    is_root_word,
    reinitialize_dictionary,
    reset_stemmer,
    stem,
    stem_all,
)
from .tokenizer import tokenize

__all__ = [
    "Stemmer",
    "get_stemmer",
    "reset_stemmer",
    "stem",
    "stem_all",
    "is_root_word",
    "reinitialize_dictionary",
    "tokenize",
    "remove_inflection_suffixes",
    "remove_derivation_suffixes",
    "remove_derivation_people",
    "remove_derivation_prefixes",
    "is_disallowed_prefix_suffixes",
    "is_rule_precedence",
]
