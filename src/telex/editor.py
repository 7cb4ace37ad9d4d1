# SPDX-FileCopyrightText: 2023 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import logging
import typing

from .converter import Conversion, apply
from .settings import Settings

if typing.TYPE_CHECKING:
    from collections.abc import Callable

    ChangeCallback = Callable[[str, int], None]


logger = logging.getLogger(__name__)

# The caret is a code point offset. We don't know about grapheme clusters: a decomposed
# "e" + U+0302 (COMBINING CIRCUMFLEX ACCENT) is two positions here, and no rule will match
# it, since every rule is written in precomposed letters.


class TelexInput:
    """A text field that converts Telex keystrokes as they are typed.

    The host owns rendering; it hands over each edit and gets told (through `on_change`)
    what the field now contains and where the caret belongs.
    """

    def __init__(self, settings: typing.Optional[Settings] = None, on_change: typing.Optional[ChangeCallback] = None):
        self.settings = settings if settings is not None else Settings()
        self.on_change = on_change
        self.text = ""
        self.caret = 0
        self.enabled = self.settings.enabled

    def __len__(self):
        return len(self.text)

    def _store(self, text: str, caret: int):
        self.text = text
        self.caret = min(max(caret, 0), len(text))
        if self.on_change is not None:
            self.on_change(self.text, self.caret)

    def edit(self, new_text: str, caret: int) -> Conversion:
        if self.enabled:
            conversion = apply(self.text, new_text, caret, window_size=self.settings.window_size)
        else:
            conversion = Conversion(new_text, 0)
        self._store(conversion.new_text, conversion.caret_after(caret))
        return conversion

    def keystroke(self, character: str) -> Conversion:
        new_text = self.text[: self.caret] + character + self.text[self.caret :]
        return self.edit(new_text, self.caret + len(character))

    def backspace(self) -> Conversion:
        if self.caret == 0:
            # no going back
            return Conversion(self.text, 0)
        return self.edit(self.text[: self.caret - 1] + self.text[self.caret :], self.caret - 1)

    def paste(self, pasted: str) -> Conversion:
        new_text = self.text[: self.caret] + pasted + self.text[self.caret :]
        caret = self.caret + len(pasted)
        if not self.settings.bypass_paste:
            return self.edit(new_text, caret)
        logger.debug("Pasted %d characters without conversion", len(pasted))
        self._store(new_text, caret)
        return Conversion(new_text, 0)

    def move_caret(self, index: int):
        self._store(self.text, index)

    def clear(self):
        self._store("", 0)

    def toggle(self):
        self.enabled = not self.enabled
        logger.debug("Telex conversion %s", "enabled" if self.enabled else "disabled")
        return self.enabled

    @property
    def before_caret(self):
        return self.text[: self.caret]

    @property
    def after_caret(self):
        return self.text[self.caret :]
