# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later


class TelexError(Exception):
    pass


class SettingsError(TelexError, ValueError):
    pass


class WindowSizeError(SettingsError):
    def __init__(self, window_size: int, minimum: int):
        self.window_size = window_size
        self.minimum = minimum
        super().__init__(f"Window size {window_size} is shorter than the longest rule ({minimum} characters)")
