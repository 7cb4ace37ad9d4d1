# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from .commontypes import SettingsError, TelexError, WindowSizeError
from .converter import WINDOW_SIZE, Conversion, EditEvent, apply, apply_event
from .editor import TelexInput
from .rules import RULES, RuleFamily, RuleMatch, RuleTable, Tier, TransformRule, select_rule
from .settings import Settings

__all__ = [
    "WINDOW_SIZE",
    "Conversion",
    "EditEvent",
    "RULES",
    "RuleFamily",
    "RuleMatch",
    "RuleTable",
    "Settings",
    "SettingsError",
    "TelexError",
    "TelexInput",
    "Tier",
    "TransformRule",
    "WindowSizeError",
    "apply",
    "apply_event",
    "select_rule",
]
