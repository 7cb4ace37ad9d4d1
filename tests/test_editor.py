from telex.editor import TelexInput
from telex.settings import Settings


def type_into(telex_input: TelexInput, keys: str):
    for key in keys:
        telex_input.keystroke(key)


def test_keystrokes():
    telex_input = TelexInput()
    type_into(telex_input, "coos gawsng")
    assert telex_input.text == "cố gắng"
    assert telex_input.caret == len("cố gắng")
    assert len(telex_input) == 7


def test_keystroke_reports_conversion():
    telex_input = TelexInput()
    telex_input.keystroke("a")
    assert telex_input.keystroke("a") == ("â", -1)
    assert telex_input.caret == 1


def test_on_change_callback():
    changes = []
    telex_input = TelexInput(on_change=lambda text, caret: changes.append((text, caret)))
    type_into(telex_input, "aas")
    assert changes == [("a", 1), ("â", 1), ("ấ", 1)]


def test_typing_in_the_middle():
    telex_input = TelexInput()
    type_into(telex_input, "tn")
    telex_input.move_caret(1)
    type_into(telex_input, "oo")
    assert telex_input.text == "tôn"
    assert telex_input.caret == 2
    assert telex_input.before_caret == "tô"
    assert telex_input.after_caret == "n"


def test_backspace():
    telex_input = TelexInput()
    type_into(telex_input, "aa")
    assert telex_input.text == "â"
    telex_input.backspace()
    assert telex_input.text == ""
    assert telex_input.caret == 0
    # no going back
    assert telex_input.backspace() == ("", 0)
    assert telex_input.caret == 0


def test_backspace_is_never_reconverted():
    telex_input = TelexInput()
    type_into(telex_input, "aâ")
    telex_input.move_caret(1)
    telex_input.backspace()
    assert telex_input.text == "â"
    type_into(telex_input, "x")
    assert telex_input.text == "xâ"


def test_paste_bypasses_conversion():
    telex_input = TelexInput()
    assert telex_input.paste("aas") == ("aas", 0)
    assert telex_input.text == "aas"
    assert telex_input.caret == 3


def test_paste_without_bypass():
    telex_input = TelexInput(Settings(bypass_paste=False))
    telex_input.paste("aas")
    assert telex_input.text == "aá"
    assert telex_input.caret == 2


def test_move_caret_is_clamped():
    telex_input = TelexInput()
    type_into(telex_input, "ab")
    telex_input.move_caret(10)
    assert telex_input.caret == 2
    telex_input.move_caret(-1)
    assert telex_input.caret == 0


def test_clear():
    changes = []
    telex_input = TelexInput(on_change=lambda text, caret: changes.append((text, caret)))
    type_into(telex_input, "dd")
    telex_input.clear()
    assert telex_input.text == ""
    assert telex_input.caret == 0
    assert changes[-1] == ("", 0)


def test_toggle():
    telex_input = TelexInput()
    assert telex_input.toggle() is False
    type_into(telex_input, "aa")
    assert telex_input.text == "aa"
    assert telex_input.toggle() is True
    type_into(telex_input, "s")
    assert telex_input.text == "aá"


def test_disabled_by_settings():
    telex_input = TelexInput(Settings(enabled=False))
    type_into(telex_input, "dd")
    assert telex_input.text == "dd"


def test_edit_like_a_text_field():
    telex_input = TelexInput()
    telex_input.edit("xin chao", 8)
    assert telex_input.text == "xin chao"
    telex_input.edit("xin chaof", 9)
    assert telex_input.text == "xin chaò"
    assert telex_input.caret == 8
