# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""Constant character tables for Telex input.

Everything here is built once at import time and never mutated afterwards.
Uppercase entries are derived with str.upper(); every precomposed Vietnamese
letter has a simple one-to-one case mapping.
"""
import enum
import itertools
import types


class Tone(enum.Enum):
    GRAVE = "f"
    ACUTE = "s"
    HOOK = "r"
    TILDE = "x"
    DOT = "j"

    @enum.property
    def key(self):
        return self.value

    @enum.property
    def vietnamese_name(self):
        return TONE_NAMES[self]


TONE_NAMES = {
    Tone.GRAVE: "huyền",
    Tone.ACUTE: "sắc",
    Tone.HOOK: "hỏi",
    Tone.TILDE: "ngã",
    Tone.DOT: "nặng",
}

# f s r x j, in that order
TONE_KEYS = "".join(tone.key for tone in Tone)

PLAIN_VOWELS = "aeiouy"
MODIFIED_VOWELS = "âăêôơư"

_TONED_FORMS = {
    "a": "àáảãạ",
    "ă": "ằắẳẵặ",
    "â": "ầấẩẫậ",
    "e": "èéẻẽẹ",
    "ê": "ềếểễệ",
    "i": "ìíỉĩị",
    "o": "òóỏõọ",
    "ô": "ồốổỗộ",
    "ơ": "ờớởỡợ",
    "u": "ùúủũụ",
    "ư": "ừứửữự",
    "y": "ỳýỷỹỵ",
}

# (base letter, modifier key) -> composed letter
_MODIFIED_FORMS = {
    ("a", "a"): "â",
    ("e", "e"): "ê",
    ("o", "o"): "ô",
    ("a", "w"): "ă",
    ("o", "w"): "ơ",
    ("u", "w"): "ư",
    ("d", "d"): "đ",
}


def _build_tone_table():
    table = {}
    for base, forms in _TONED_FORMS.items():
        for key, toned in zip(TONE_KEYS, forms, strict=True):
            table[(base, key)] = toned
            table[(base.upper(), key)] = toned.upper()
    return types.MappingProxyType(table)


def _build_modifier_table():
    table = {}
    for (base, key), composed in _MODIFIED_FORMS.items():
        table[(base, key)] = composed
        table[(base.upper(), key)] = composed.upper()
    return types.MappingProxyType(table)


# (vowel, lowercase tone key) -> toned vowel, both cases of vowel
TONE_TABLE = _build_tone_table()
# (base letter, lowercase modifier key) -> composed letter, both cases of base
MODIFIER_TABLE = _build_modifier_table()
# composed letter -> (base letter, lowercase modifier key)
UNMODIFIED = types.MappingProxyType({composed: pair for pair, composed in MODIFIER_TABLE.items()})


def case_variants(letters: str):
    """Every upper/lower spelling of `letters`, lowercase-first.

    >>> list(case_variants("dd"))
    ['dd', 'dD', 'Dd', 'DD']
    """
    choices = [(ch.lower(), ch.upper()) for ch in letters]
    for combo in itertools.product(*choices):
        yield "".join(combo)


def match_case(letter: str, template: str):
    return letter.upper() if template.isupper() else letter.lower()
