import numpy as np
import pytest

from appdeck.ui.tween import EASINGS, TweenHandle, hex_to_rgb, interpolate, rgb_to_hex


def test_easings_hit_both_endpoints():
    for name, easing in EASINGS.items():
        assert easing(0.0) == pytest.approx(0.0), name
        assert easing(1.0) == pytest.approx(1.0), name
    assert EASINGS["in_out"](0.5) == pytest.approx(0.5)


def test_hex_conversion_handles_short_form():
    assert np.array_equal(hex_to_rgb("#fff"), np.array([255.0, 255.0, 255.0]))
    assert rgb_to_hex(np.array([300.0, -4.0, 127.6])) == "#ff0080"


def test_interpolate_numbers_and_colors():
    assert interpolate(0.0, 10.0, 0.25) == pytest.approx(2.5)
    assert interpolate(0, 10, 0.26) == 3
    assert isinstance(interpolate(0, 10, 0.26), int)
    assert interpolate(0.0, 1.0, 5.0) == 1.0
    assert interpolate("#000000", "#FFFFFF", 0.5) == "#808080"


def test_interpolate_rejects_non_color_strings():
    with pytest.raises(ValueError):
        interpolate("red", "#ffffff", 0.5)


def test_handle_advances_to_the_end_value():
    applied = []
    handle = TweenHandle(applied.append, 0.0, 1.0, 1.0, easing="linear")

    assert handle.advance(0.5) is False
    assert handle.connected
    assert handle.advance(0.75) is True

    assert applied == [pytest.approx(0.5), 1.0]
    assert handle.progress == 1.0
    assert not handle.connected


def test_zero_duration_finishes_on_first_step():
    applied = []
    handle = TweenHandle(applied.append, 1, 5, 0.0)

    assert handle.advance(0.0) is True
    assert applied == [5]


def test_disconnect_cancels_once():
    cancels = []
    applied = []
    handle = TweenHandle(applied.append, 0.0, 1.0, 1.0, on_cancel=lambda: cancels.append(1))

    handle.disconnect()
    handle.disconnect()

    assert handle.cancelled
    assert cancels == [1]
    assert handle.advance(0.5) is True
    assert applied == []


def test_unknown_easing_is_rejected():
    with pytest.raises(ValueError):
        TweenHandle(lambda _value: None, 0.0, 1.0, 1.0, easing="bounce")
