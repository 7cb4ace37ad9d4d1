# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later OR CC-BY-SA-4.0
from __future__ import annotations

import typing

from .tables import MODIFIER_TABLE, Tone

if typing.TYPE_CHECKING:
    from .settings import Settings

GUIDE_TEMPLATE = """\
Type Vietnamese with ordinary Latin keys. Each keystroke may rewrite the letters just before the caret.

Tones: {tones}
Circumflex: {circumflex}
Breve and horn: {horn}
Stroke: {stroke}

Press the same key once more to get the plain letters back ("tooo" gives "too", "ddd" gives "dd").
The tone key must come straight after the vowel it marks.
"""

EXAMPLES_TEMPLATE = """\
Examples:
{examples}
"""


def _modifier_list(key: str, bases: str):
    return ", ".join(f"{base}{key} ({MODIFIER_TABLE[(base, key)]})" for base in bases)


def format_guide(settings: Settings) -> str:
    tones = ", ".join(f"{tone.key} ({tone.vietnamese_name})" for tone in Tone)
    guide = GUIDE_TEMPLATE.format(
        tones=tones,
        circumflex=", ".join(f"{base}{base} ({MODIFIER_TABLE[(base, base)]})" for base in "aeo"),
        horn=_modifier_list("w", "aou"),
        stroke=f"dd ({MODIFIER_TABLE[('d', 'd')]})",
    )
    if not settings.examples:
        return guide
    examples = "\n".join(f"  {example['typed']} → {example['result']}" for example in settings.examples)
    return guide + "\n" + EXAMPLES_TEMPLATE.format(examples=examples)
