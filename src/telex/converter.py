# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import logging
import typing

import msgspec

from .commontypes import WindowSizeError
from .rules import DEFAULT_RULE_TABLE

if typing.TYPE_CHECKING:
    from .rules import RuleTable

logger = logging.getLogger(__name__)

# The converter only ever looks at the buffer's length before and after an edit, never at which
# characters changed. A growing buffer is assumed to have been typed into at the caret; anything
# else (deletion, replacement by something shorter, a caret move) passes through untouched.
# Pasting several characters at once therefore looks exactly like typing them, and the trailing
# window may match a rule made of characters that were not freshly typed. Hosts that care should
# route pastes around the converter; see TelexInput.paste.

WINDOW_SIZE = 10


class Conversion(typing.NamedTuple):
    new_text: str
    caret_delta: int

    def caret_after(self, caret_index: int) -> int:
        return min(max(caret_index + self.caret_delta, 0), len(self.new_text))


class EditEvent(msgspec.Struct, frozen=True, kw_only=True):
    previous_text: str
    current_text: str
    caret_index: int

    @property
    def inserted_count(self):
        return len(self.current_text) - len(self.previous_text)


def check_window_size(window_size: int, rules: RuleTable = DEFAULT_RULE_TABLE):
    if window_size < rules.max_span:
        raise WindowSizeError(window_size, rules.max_span)


def apply(
    previous_text: str,
    current_text: str,
    caret_index: int,
    *,
    window_size: int = WINDOW_SIZE,
    rules: RuleTable = DEFAULT_RULE_TABLE,
) -> Conversion:
    """Rewrite the text just before the caret after an edit.

    Returns the new text and how much its length changed, which is also how far the caller
    should move the caret. Unknown input comes back unchanged with a delta of 0.
    """
    check_window_size(window_size, rules)
    unchanged = Conversion(current_text, 0)
    if len(current_text) <= len(previous_text):
        return unchanged

    caret = min(max(caret_index, 0), len(current_text))
    window = current_text[max(0, caret - window_size) : caret]
    match = rules.select(window)
    if match is None:
        return unchanged

    new_text = current_text[: caret - match.span] + match.replacement + current_text[caret:]
    logger.debug("Applied %s rule %r -> %r before offset %d", match.rule.tier.name, match.rule.suffix, match.replacement, caret)
    return Conversion(new_text, len(new_text) - len(current_text))


def apply_event(event: EditEvent, **kwargs) -> Conversion:
    return apply(event.previous_text, event.current_text, event.caret_index, **kwargs)
