"""
Prefix-suffix combination checks.

Both predicates look at a surface word that still carries its prefix and
its (last) suffix.

Disallowed combinations (never valid together):
    be-...-i, di-...-an, ke-...-i, ke-...-kan, me-...-an,
    se-...-i, se-...-kan, te-...-an

Rule precedence (valid although they resemble the above):
    be-...-lah, be-...-an, di-...-i, me-...-i, pe-...-i, te-...-i
"""

import re

DISALLOWED_PATTERNS = (
    re.compile(r"^(be)([a-z\-]+)(i)$"),
    re.compile(r"^(di)([a-z\-]+)(an)$"),
    re.compile(r"^(ke)([a-z\-]+)(i|kan)$"),
    re.compile(r"^(me)([a-z\-]+)(an)$"),
    re.compile(r"^(se)([a-z\-]+)(i|kan)$"),
    re.compile(r"^(te)([a-z\-]+)(an)$"),
)

PRECEDENCE_PATTERNS = (
    re.compile(r"^(be)([a-z\-]+)(lah|an)$"),
    re.compile(r"^(di|[mpt]e)([a-z\-]+)(i)$"),
)


def is_disallowed_prefix_suffixes(word: str) -> bool:
    """
    Check for a prefix-suffix pair that cannot occur together.

    Examples:
        >>> is_disallowed_prefix_suffixes("merasakan")
        True
        >>> is_disallowed_prefix_suffixes("mencinta")
        False
    """
    return any(pattern.match(word) for pattern in DISALLOWED_PATTERNS)


def is_rule_precedence(word: str) -> bool:
    """
    Check for a prefix-suffix pair whose prefix should be removed first.

    Not consulted by the stemmer: stemming output is defined without it.

    Examples:
        >>> is_rule_precedence("berkawanlah")
        True
        >>> is_rule_precedence("dicinta")
        False
    """
    return any(pattern.match(word) for pattern in PRECEDENCE_PATTERNS)
