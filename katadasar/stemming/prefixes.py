"""
Derivation prefix removal: di-, ke-, se-, be-, te-, me-, pe-.

Nasal prefixes assimilate to the first consonant of the root ("meny-" before
roots starting with "s", "mem-" before "p"), so the original consonant is
lost on the surface. Each rule lists the plausible restorations in priority
order and the first one the dictionary confirms wins:

    memukul   -> mukul, pukul          -> pukul
    menyuarakan -> suarakan (-kan)     -> suara
    pengupas  -> upas, kupas           -> kupas

The rule table lives in `prefix_rules.yaml` and is compiled once at import.
A candidate is accepted when it is a root word, or when removing a
derivation suffix from it gives one ("pembangunan" -> "bangunan" -> "bangun").
If nothing is confirmed the input word comes back unchanged.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Container, Iterator, List, Optional, Tuple

import yaml

from .suffixes import remove_derivation_suffixes

logger = logging.getLogger(__name__)

_RULES_PATH = Path(__file__).with_name("prefix_rules.yaml")


@dataclass(frozen=True)
class Restoration:
    """Replace a leading prefix pattern with the restored root onset"""
    strip: re.Pattern
    replacement: str = ""

    def apply(self, word: str) -> Optional[str]:
        match = self.strip.match(word)
        if match is None:
            return None
        return self.replacement + word[match.end():]


@dataclass(frozen=True)
class PrefixRule:
    """One prefix allomorph with its restorations and optional complex prefix"""
    match: re.Pattern
    restorations: Tuple[Restoration, ...] = ()
    nested: Optional["PrefixRule"] = None
    halt: bool = False

    def candidates(self, word: str) -> Iterator[str]:
        for restoration in self.restorations:
            candidate = restoration.apply(word)
            if candidate is not None:
                yield candidate

        if self.nested is not None and self.nested.match.match(word):
            yield from self.nested.candidates(word)


@dataclass(frozen=True)
class PrefixFamily:
    """Prefix family; only its first matching rule is applied"""
    name: str
    match: re.Pattern
    rules: Tuple[PrefixRule, ...]
    carry: bool = False

    def select(self, word: str) -> Optional[PrefixRule]:
        if not self.match.match(word):
            return None
        for rule in self.rules:
            if rule.match.match(word):
                return rule
        return None


@dataclass(frozen=True)
class PrefixGroup:
    """Families sharing a trigger, evaluated in sequence"""
    name: str
    match: re.Pattern
    families: Tuple[PrefixFamily, ...]
    exclusive: bool = False


# ── Load prefix rules from YAML ─────────────────────────────────────────────

def _compile(pattern, where: str) -> re.Pattern:
    if not isinstance(pattern, str):
        raise ValueError(f"{where}: pattern must be a string, got {pattern!r}")
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ValueError(f"{where}: invalid pattern {pattern!r}: {e}") from e


def _build_rule(raw: dict, where: str) -> PrefixRule:
    if "match" not in raw:
        raise ValueError(f"{where}: missing 'match'")

    restorations = []
    for i, pair in enumerate(raw.get("restore", [])):
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise ValueError(f"{where}.restore[{i}]: expected [strip, replacement], got {pair!r}")
        strip, replacement = pair
        restorations.append(Restoration(_compile(strip, f"{where}.restore[{i}]"), replacement or ""))

    halt = bool(raw.get("halt", False))
    if not restorations and not halt:
        raise ValueError(f"{where}: rule needs 'restore' or 'halt'")

    nested = None
    if raw.get("nested"):
        nested = _build_rule(raw["nested"], f"{where}.nested")

    return PrefixRule(
        match=_compile(raw["match"], f"{where}.match"),
        restorations=tuple(restorations),
        nested=nested,
        halt=halt,
    )


def _load_rules(path: Path = _RULES_PATH) -> Tuple[PrefixGroup, ...]:
    """
    Read the prefix rule table from a YAML file.

    Raises:
        ValueError: a group, family or rule is malformed
    """
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict) or not isinstance(raw.get("groups"), list):
        raise ValueError(f"{path}: expected a top-level 'groups' list")

    groups = []
    for raw_group in raw["groups"]:
        if not isinstance(raw_group, dict):
            raise ValueError(f"{path}: group must be a mapping, got {raw_group!r}")
        group_name = raw_group.get("name", "?")
        families = []
        for raw_family in raw_group.get("families", []):
            family_name = raw_family.get("name", "?")
            where = f"{group_name}/{family_name}"
            families.append(PrefixFamily(
                name=family_name,
                match=_compile(raw_family.get("match"), f"{where}.match"),
                rules=tuple(
                    _build_rule(raw_rule, f"{where}.rules[{i}]")
                    for i, raw_rule in enumerate(raw_family.get("rules", []))
                ),
                carry=bool(raw_family.get("carry", False)),
            ))
        groups.append(PrefixGroup(
            name=group_name,
            match=_compile(raw_group.get("match"), f"{group_name}.match"),
            families=tuple(families),
            exclusive=bool(raw_group.get("exclusive", False)),
        ))

    logger.debug(f"Loaded {len(groups)} prefix groups from {path}")
    return tuple(groups)


PREFIX_RULES = _load_rules()


def _confirm(candidate: str, dictionary: Container[str]) -> Optional[str]:
    if candidate in dictionary:
        return candidate

    stripped = remove_derivation_suffixes(candidate, dictionary)
    if stripped in dictionary:
        return stripped

    return None


def _remove_with_group(group: PrefixGroup, word: str, dictionary: Container[str]) -> Optional[str]:
    """
    Run every family of a group against the word.

    Returns:
        Confirmed root, the word itself when a rule halts, or None
    """
    last_candidate = None

    for family in group.families:
        subject = last_candidate if family.carry and last_candidate else word

        rule = family.select(subject)
        if rule is None:
            continue
        if rule.halt:
            return word

        for candidate in rule.candidates(subject):
            last_candidate = candidate
            root = _confirm(candidate, dictionary)
            if root is not None:
                return root

    return None


def remove_derivation_prefixes(
    word: str,
    dictionary: Container[str],
    rules: Optional[Tuple[PrefixGroup, ...]] = None,
) -> str:
    """
    Remove a derivation prefix, restoring the root's first consonant if needed.

    Args:
        word: Normalized word, possibly already without suffixes
        dictionary: Root words (anything supporting `in`)
        rules: Alternative rule table (default: PREFIX_RULES)

    Returns:
        Confirmed root word, or word unchanged

    Examples:
        >>> remove_derivation_prefixes("memukul", {"pukul"})
        'pukul'
        >>> remove_derivation_prefixes("pengupas", {"kupas"})
        'kupas'
        >>> remove_derivation_prefixes("terrible", {"rible"})
        'terrible'
    """
    for group in PREFIX_RULES if rules is None else rules:
        if not group.match.match(word):
            continue

        result = _remove_with_group(group, word, dictionary)
        if result is not None:
            return result
        if group.exclusive:
            break

    return word


def family_names() -> List[str]:
    """Names of all prefix families in dispatch order"""
    return [family.name for group in PREFIX_RULES for family in group.families]
