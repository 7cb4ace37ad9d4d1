import json

import pytest

from telex.commontypes import SettingsError, WindowSizeError
from telex.guide import format_guide
from telex.scripts import guide_cli, list_rules, rules_cli, type_cli
from telex.settings import EXAMPLES, Settings


def test_for_test_matches_defaults():
    settings = Settings.for_test()
    assert settings == Settings()
    assert settings.window_size == 10
    assert settings.bypass_paste is True
    assert settings.examples == EXAMPLES


def test_save_and_load(tmp_path):
    path = tmp_path / "telex.json"
    settings = Settings(window_size=4, bypass_paste=False, examples=[{"typed": "aa", "result": "â"}])
    settings.save(path)
    assert json.loads(path.read_text(encoding="utf-8"))["examples"] == [{"typed": "aa", "result": "â"}]
    assert Settings.load(path) == settings


def test_load_partial(tmp_path):
    path = tmp_path / "telex.json"
    path.write_text(json.dumps({"enabled": False}))
    settings = Settings.load(path)
    assert settings.enabled is False
    assert settings.window_size == 10


@pytest.mark.parametrize(
    "raw",
    (
        {"window_size": 2},
        {"window_size": "ten"},
        {"windowsize": 10},
    ),
)
def test_load_invalid(tmp_path, raw):
    path = tmp_path / "telex.json"
    path.write_text(json.dumps(raw))
    with pytest.raises(SettingsError):
        Settings.load(path)


def test_load_not_json(tmp_path):
    path = tmp_path / "telex.json"
    path.write_text("window_size = 10")
    with pytest.raises(SettingsError):
        Settings.load(path)


def test_window_size_too_small():
    with pytest.raises(WindowSizeError):
        Settings(window_size=1)


def test_guide():
    guide = format_guide(Settings.for_test())
    assert "f (huyền), s (sắc), r (hỏi), x (ngã), j (nặng)" in guide
    assert "aa (â), ee (ê), oo (ô)" in guide
    assert "aw (ă), ow (ơ), uw (ư)" in guide
    assert "dd (đ)" in guide
    assert "coos gawsng → cố gắng" in guide


def test_guide_without_examples():
    assert "Examples:" not in format_guide(Settings(examples=[]))


def test_list_rules():
    assert list_rules(window="aaa") == ("REVERT", "aaa", "aa")
    assert list_rules(window="xyz") is None
    rules = list_rules("COMPOSE")
    assert list(rules) == ["COMPOSE"]
    assert ("dd", "đ") in rules["COMPOSE"]
    assert list(list_rules()) == ["REVERT", "TONE_ON_MODIFIED", "COMPOSE", "TONE_ON_PLAIN"]


def test_type_cli(capsys):
    assert type_cli(["hojc taajp"]) == 0
    assert capsys.readouterr().out == "học tập\n"


def test_type_cli_with_settings(tmp_path, capsys):
    path = tmp_path / "telex.json"
    Settings(enabled=False).save(path)
    assert type_cli(["--settings", str(path), "aa"]) == 0
    assert capsys.readouterr().out == "aa\n"


def test_rules_cli(capsys):
    assert rules_cli(["--window", "xos"]) == 0
    assert capsys.readouterr().out == "('TONE_ON_PLAIN', 'os', 'ó')\n"


def test_guide_cli(capsys):
    assert guide_cli([]) == 0
    assert "Tones:" in capsys.readouterr().out
