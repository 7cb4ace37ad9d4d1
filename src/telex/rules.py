# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""The ordered table of Telex suffix-rewrite rules.

Each rule rewrites a short literal suffix of the text before the caret. Rules
are grouped into tiers, and the tiers are consulted strictly in order:

1. revert rules, which undo a previous composition when its key is repeated
   (``aaa`` -> ``aa``, ``âa`` -> ``aa``, ``ddd`` -> ``dd``);
2. tones on circumflex/breve/horn vowels (``âs`` -> ``ấ``);
3. modifier composition (``aa`` -> ``â``, ``ow`` -> ``ơ``, ``dd`` -> ``đ``);
4. tones on plain vowels (``as`` -> ``á``).

``aaa`` also ends in ``aa``; the revert tier always wins over composition.
Within a tier no suffix is a suffix of another, so at most one rule per tier
can match.
"""
from __future__ import annotations

import enum
import itertools
import typing

import msgspec
import pygtrie

from .tables import MODIFIED_VOWELS, MODIFIER_TABLE, PLAIN_VOWELS, TONE_KEYS, TONE_TABLE, UNMODIFIED, case_variants, match_case

if typing.TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class RuleFamily(enum.Enum):
    REVERT = "revert"
    COMPOSE = "compose"
    TONE = "tone"


class Tier(enum.IntEnum):
    REVERT = 0
    TONE_ON_MODIFIED = 1
    COMPOSE = 2
    TONE_ON_PLAIN = 3

    @enum.property
    def family(self) -> RuleFamily:
        match self:
            case Tier.REVERT:
                return RuleFamily.REVERT
            case Tier.COMPOSE:
                return RuleFamily.COMPOSE
            case Tier.TONE_ON_MODIFIED | Tier.TONE_ON_PLAIN:
                return RuleFamily.TONE


class TransformRule(msgspec.Struct, frozen=True, kw_only=True):
    suffix: str
    replacement: str
    tier: Tier

    @property
    def family(self):
        return self.tier.family

    @property
    def span(self):
        return len(self.suffix)

    def produce(self, matched: str) -> str:
        "Replacement for `matched`; every rule is a literal suffix, so this is always the same string."
        if matched != self.suffix:
            raise ValueError(f"Rule for {self.suffix!r} cannot rewrite {matched!r}")
        return self.replacement

    def rewrite(self, window: str) -> str:
        return window[: len(window) - self.span] + self.replacement


class RuleMatch(msgspec.Struct, frozen=True):
    rule: TransformRule
    span: int

    @property
    def replacement(self):
        return self.rule.replacement


def _revert_rules() -> Iterator[TransformRule]:
    # any further repeat of a reverted pair stays literal
    for vowel in "oae":
        for suffix in case_variants(vowel * 3):
            yield TransformRule(suffix=suffix, replacement=suffix[:2], tier=Tier.REVERT)
    for vowel in "aou":
        for suffix in case_variants(vowel + "ww"):
            yield TransformRule(suffix=suffix, replacement=suffix[0] + "w", tier=Tier.REVERT)
    for suffix in case_variants("ddd"):
        yield TransformRule(suffix=suffix, replacement=suffix[:2], tier=Tier.REVERT)
    # composed letter followed by its own modifier key
    for composed, (base, key) in UNMODIFIED.items():
        for partner in case_variants(key):
            yield TransformRule(suffix=composed + partner, replacement=base + partner, tier=Tier.REVERT)


def _compose_rules() -> Iterator[TransformRule]:
    for (base, key), composed in MODIFIER_TABLE.items():
        if base.isupper():
            continue
        for suffix in case_variants(base + key):
            yield TransformRule(suffix=suffix, replacement=match_case(composed, suffix[0]), tier=Tier.COMPOSE)


def _tone_rules(vowels: str, tier: Tier) -> Iterator[TransformRule]:
    for vowel in vowels:
        for cased_vowel in (vowel, vowel.upper()):
            # tone keys are lowercase only; capitals are ordinary letters
            for key in TONE_KEYS:
                yield TransformRule(suffix=cased_vowel + key, replacement=TONE_TABLE[(cased_vowel, key)], tier=tier)


RULES: tuple[TransformRule, ...] = tuple(
    itertools.chain(
        _revert_rules(),
        _tone_rules(MODIFIED_VOWELS, Tier.TONE_ON_MODIFIED),
        _compose_rules(),
        _tone_rules(PLAIN_VOWELS, Tier.TONE_ON_PLAIN),
    )
)

MAX_SUFFIX_LENGTH = max(rule.span for rule in RULES)


class RuleTable:
    """Rules indexed for lookup from the end of a window.

    Each tier gets its own trie, keyed by the reversed suffix, so the longest
    rule ending at the caret is found by walking back from the caret.
    """

    def __init__(self, rules: Iterable[TransformRule]):
        self.rules = tuple(rules)
        self.max_span = max((rule.span for rule in self.rules), default=0)
        self._tiers: dict[Tier, pygtrie.CharTrie] = {}
        for rule in self.rules:
            trie = self._tiers.setdefault(rule.tier, pygtrie.CharTrie())
            key = rule.suffix[::-1]
            if trie.has_key(key):
                raise ValueError(f"Duplicate {rule.tier.name} rule for {rule.suffix!r}")
            trie[key] = rule

    def __len__(self):
        return len(self.rules)

    def __iter__(self):
        return iter(self.rules)

    def by_tier(self, tier: Tier) -> list[TransformRule]:
        return [rule for rule in self.rules if rule.tier is tier]

    def select(self, window: str) -> typing.Optional[RuleMatch]:
        if not window or self.max_span == 0:
            return None
        tail = window[max(0, len(window) - self.max_span) :][::-1]
        for tier in sorted(self._tiers):
            step = self._tiers[tier].longest_prefix(tail)
            if step:
                rule = step.value
                return RuleMatch(rule=rule, span=rule.span)
        return None

    def scan(self, window: str) -> typing.Optional[RuleMatch]:
        "Linear first-match over the rules in table order. Slower than select(), and must always agree with it."
        if not window:
            return None
        for rule in sorted(self.rules, key=lambda r: r.tier):
            if window.endswith(rule.suffix):
                return RuleMatch(rule=rule, span=rule.span)
        return None


DEFAULT_RULE_TABLE = RuleTable(RULES)


def select_rule(window: str) -> typing.Optional[RuleMatch]:
    return DEFAULT_RULE_TABLE.select(window)
