from appdeck.ui.common import (
    NOTIFICATION_COLORS,
    NOTIFICATION_LEVELS,
    NOTIFICATION_SOUNDS,
    UI_TEXT,
    normalize_level,
    readable_text_color,
)
from appdeck.ui.sound import SOUND_TONES


def test_normalize_level_falls_back_to_info():
    assert normalize_level("ERROR") == "error"
    assert normalize_level(" success ") == "success"
    assert normalize_level("fatal") == "info"
    assert normalize_level(None) == "info"


def test_every_level_has_colors_and_a_known_sound():
    for level in NOTIFICATION_LEVELS:
        assert level in NOTIFICATION_COLORS
        assert NOTIFICATION_SOUNDS[level] in SOUND_TONES


def test_readable_text_color():
    assert readable_text_color("#FFFFFF") == UI_TEXT
    assert readable_text_color("#000") == "#FFFFFF"
    assert readable_text_color("#zzzzzz") == UI_TEXT
