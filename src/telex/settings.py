# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import dataclasses
import json
import pathlib

import cattrs
from cattrs.errors import BaseValidationError, ForbiddenExtraKeysError
from cattrs.gen import make_dict_structure_fn

from .commontypes import SettingsError
from .converter import WINDOW_SIZE, check_window_size

EXAMPLES = [
    {"typed": "xin chafo", "result": "xin chào"},
    {"typed": "Vieejt Nam", "result": "Việt Nam"},
    {"typed": "coos gawsng", "result": "cố gắng"},
    {"typed": "hojc taajp", "result": "học tập"},
    {"typed": "tooo", "result": "too"},
    {"typed": "ddd", "result": "dd"},
]


settings_converter = cattrs.Converter()


@dataclasses.dataclass(kw_only=True)
class Settings:
    window_size: int = WINDOW_SIZE
    bypass_paste: bool = True
    enabled: bool = True
    examples: list[dict[str, str]] = dataclasses.field(default_factory=lambda: [dict(example) for example in EXAMPLES])

    def __post_init__(self):
        check_window_size(self.window_size)

    def save(self, dest: pathlib.Path):
        raw = settings_converter.unstructure(self)
        with dest.open("w", encoding="utf-8") as out:
            json.dump(raw, out, indent=2, ensure_ascii=False)

    @classmethod
    def load(cls, src: pathlib.Path):
        try:
            with src.open(encoding="utf-8") as f:
                raw = json.load(f)
            return settings_converter.structure(raw, cls)
        except json.JSONDecodeError as e:
            raise SettingsError(f"{src} is not valid JSON: {e}") from e
        except (BaseValidationError, ForbiddenExtraKeysError) as e:
            raise SettingsError(f"{src} does not contain valid settings") from e

    @classmethod
    def for_test(cls):
        return settings_converter.structure(
            {
                "window_size": WINDOW_SIZE,
                "bypass_paste": True,
                "enabled": True,
                "examples": EXAMPLES,
            },
            cls,
        )


settings_converter.register_structure_hook(
    Settings, make_dict_structure_fn(Settings, settings_converter, _cattrs_forbid_extra_keys=True)
)
