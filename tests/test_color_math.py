import pytest

from jank.services.theme.color_math import (
    contrast_color,
    darken,
    lighten,
    luminance,
    parse_hex,
    rgb_to_hex,
    to_hex,
)


def test_parse_hex_basic():
    assert parse_hex("#0969da") == (0x09, 0x69, 0xDA)
    assert parse_hex("FFFFFF") == (255, 255, 255)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("#zz00ff", (0, 0, 255)),
        ("not a color", (0, 0, 0)),
        ("", (0, 0, 0)),
        ("#fff", (255, 15, 0)),
        ("#-10000", (0, 0, 0)),
    ],
)
def test_parse_hex_tolerates_garbage(raw, expected):
    assert parse_hex(raw) == expected


def test_to_hex_clamps_and_lowercases():
    assert to_hex((300, -5, 171)) == "#ff00ab"


def test_lighten_keeps_factor_share_of_the_channel():
    # 0 + 255 * (1 - 0.5) = 127.5 -> 127
    assert lighten("#000000", 0.5) == "#7f7f7f"
    # 0 + 255 * 0.03 = 7.65 -> 7
    assert lighten("#000000", 0.97) == "#070707"
    assert lighten("#ffffff", 0.94) == "#ffffff"
    assert lighten("#24292f", 0.0) == "#ffffff"
    assert lighten("#24292f", 1.0) == "#24292f"


def test_darken_scales_channels_down():
    # 0x09 * 0.9 = 8.1 -> 8, 0x69 * 0.9 = 94.5 -> 94, 0xda * 0.9 = 196.2 -> 196
    assert darken("#0969da", 0.1) == "#085ec4"
    assert darken("#ffffff", 1.0) == "#000000"


def test_luminance_range():
    assert luminance("#000000") == 0.0
    assert luminance("#ffffff") == 1.0


def test_contrast_color_black_on_light_white_on_dark():
    assert contrast_color("#ffffff") == "#000000"
    assert contrast_color("#a6e22e") == "#000000"
    assert contrast_color("#000000") == "#ffffff"
    assert contrast_color("#0969da") == "#ffffff"


def test_contrast_boundary_half_luminance_is_white():
    # 0.299*22 + 0.587*206 + 0.114*0 == 127.5 -> luminance exactly 0.5
    assert luminance("#16ce00") == 0.5
    assert contrast_color("#16ce00") == "#ffffff"
    # one step brighter tips it over
    assert contrast_color("#16ce01") == "#000000"


def test_contrast_on_garbage_does_not_raise():
    assert contrast_color("garbage!") == "#ffffff"


def test_rgb_to_hex():
    assert rgb_to_hex("#abcdef") == "#abcdef"
    assert rgb_to_hex("rgb(9, 105, 218)") == "#0969da"
    assert rgb_to_hex("  rgb(255,255,255) ") == "#ffffff"
    assert rgb_to_hex("transparent") == "transparent"
