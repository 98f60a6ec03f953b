"""
Suffix removal rules.

Three independent removers, applied by the stemmer in a fixed order:

1. Inflection suffixes (unconditional):
   - Particles: -lah, -kah, -tah, -pun
   - Possessive pronouns: -ku, -mu, -nya
   A particle may follow a possessive pronoun ("bukumukah" → "buku"),
   so after a particle one possessive pronoun is removed as well.

2. Derivation suffixes (dictionary-checked): -kan, then -an / -i

3. People suffixes (dictionary-checked): -man / -wan, then -wati

Dictionary-checked removers only return a shorter word when the stripped
form is a root word; otherwise the input comes back unchanged.
"""

import logging
import re
from typing import Container, Optional

from .guards import is_disallowed_prefix_suffixes

logger = logging.getLogger(__name__)

PARTICLE_SUFFIX = re.compile(r"([klt]ah|pun)$")
POSSESSIVE_SUFFIX = re.compile(r"([km]u|nya)$")

KAN_SUFFIX = re.compile(r"(kan)$")
AN_I_SUFFIX = re.compile(r"(an|i)$")

MAN_WAN_SUFFIX = re.compile(r"([mw]an)$")
WATI_SUFFIX = re.compile(r"(wati)$")


def _strip(pattern: re.Pattern, word: str) -> Optional[str]:
    match = pattern.search(word)
    if match is None:
        return None
    return word[:match.start()]


def remove_inflection_suffixes(word: str) -> str:
    """
    Remove a particle and/or possessive pronoun from the end of a word.

    Examples:
        >>> remove_inflection_suffixes("hancurlah")
        'hancur'
        >>> remove_inflection_suffixes("bukumukah")
        'buku'
        >>> remove_inflection_suffixes("cintanya")
        'cinta'
    """
    without_particle = _strip(PARTICLE_SUFFIX, word)
    if without_particle is not None:
        word = without_particle

    without_pronoun = _strip(POSSESSIVE_SUFFIX, word)
    if without_pronoun is not None:
        return without_pronoun

    return word


def _remove_checked(word: str, patterns, dictionary: Container[str]) -> str:
    """Try each suffix pattern in order; keep the first root-word result."""
    candidate = None

    for pattern in patterns:
        stripped = _strip(pattern, word)
        if stripped is None:
            continue
        candidate = stripped
        if candidate in dictionary:
            return candidate

    if candidate is not None and is_disallowed_prefix_suffixes(candidate):
        logger.debug(f"Disallowed prefix-suffix combination in {candidate!r}, keeping {word!r}")
        return word

    return word


def remove_derivation_suffixes(word: str, dictionary: Container[str]) -> str:
    """
    Remove -kan, or else -an / -i, when what remains is a root word.

    -an / -i are tried on the input word, not on the -kan-stripped form.

    Examples:
        >>> remove_derivation_suffixes("cintai", {"cinta"})
        'cinta'
        >>> remove_derivation_suffixes("belikan", {"beli"})
        'beli'
        >>> remove_derivation_suffixes("tekaan", set())
        'tekaan'
    """
    return _remove_checked(word, (KAN_SUFFIX, AN_I_SUFFIX), dictionary)


def remove_derivation_people(word: str, dictionary: Container[str]) -> str:
    """
    Remove -man / -wan, or else -wati, when what remains is a root word.

    Examples:
        >>> remove_derivation_people("budayawan", {"budaya"})
        'budaya'
        >>> remove_derivation_people("karyawati", {"karya"})
        'karya'
    """
    return _remove_checked(word, (MAN_WAN_SUFFIX, WATI_SUFFIX), dictionary)
