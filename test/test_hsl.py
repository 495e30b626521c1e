from pytest import mark, raises

from rcp_palette.colors import Color
from rcp_palette.errors import UnsupportedFormatError
from rcp_palette.parser import parse_color
from rcp_palette.parsers.hsl import hsl_to_rgb


@mark.parametrize(
    "input,output",
    [
        ("hsl(0, 100%, 50%)", (255, 0, 0)),
        ("hsl(60, 100%, 50%)", (255, 255, 0)),
        ("hsl(120, 100%, 50%)", (0, 255, 0)),
        ("hsl(240, 100%, 50%)", (0, 0, 255)),
        ("hsl(0, 0%, 0%)", (0, 0, 0)),
        ("hsl(0, 0%, 100%)", (255, 255, 255)),
        ("hsl(0, 0%, 50%)", (128, 128, 128)),
        ("hsl(0, 100%, 25%)", (128, 0, 0)),
        ("hsl(270, 50%, 40%)", (102, 51, 153)),
        ("HSL( 0 , 100% , 50% )", (255, 0, 0)),
        ("  hsl(0.0,100.0%,50.0%)  ", (255, 0, 0)),
    ],
)
def test_hsl_colors(input, output):
    assert parse_color(input) == Color(*output)


@mark.parametrize(
    "hue,equivalent",
    [("360", "0"), ("720", "0"), ("-120", "240"), ("-360", "0"), ("480", "120")],
)
def test_hsl_hue_wraps_around(hue, equivalent):
    template = "hsl({0}, 100%, 50%)"
    assert parse_color(template.format(hue)) == parse_color(template.format(equivalent))


def test_hsl_saturation_and_lightness_are_clamped():
    assert parse_color("hsl(0, 150%, 50%)") == parse_color("hsl(0, 100%, 50%)")
    assert parse_color("hsl(0, -50%, 50%)") == parse_color("hsl(0, 0%, 50%)")
    assert parse_color("hsl(0, 100%, -10%)") == Color(0, 0, 0)
    assert parse_color("hsl(0, 100%, 200%)") == Color(255, 255, 255)


@mark.parametrize(
    "input",
    [
        "hsl()",
        "hsl(",
        "hsl(0, 100%, 50%",
        "hsl(0, 100%)",
        "hsl(0, 100%, 50%, 1)",
        "hsl(0, 100, 50%)",
        "hsl(0, 100%, 50)",
        "hsl(abc, 100%, 50%)",
        "hsl(0deg, 100%, 50%)",
        "hsl(1e2, 100%, 50%)",
        "hsl(nan, 100%, 50%)",
        "hsl(0, 100 %, 50%)",
        "hsl(0, x%, 50%)",
        "hsl(0, 100%%, 50%)",
        "hsl(, , )",
    ],
)
def test_hsl_unsupported_format(input):
    with raises(UnsupportedFormatError):
        parse_color(input)


def test_hsl_to_rgb():
    assert hsl_to_rgb(0.0, 1.0, 0.5) == (255, 0, 0)
    assert hsl_to_rgb(1 / 3, 1.0, 0.5) == (0, 255, 0)
    assert hsl_to_rgb(2 / 3, 1.0, 0.5) == (0, 0, 255)
    assert hsl_to_rgb(0.5, 0.0, 0.5) == (128, 128, 128)


def test_hsl_to_rgb_stays_in_range():
    for hue in range(0, 360, 15):
        for saturation in (0.0, 0.25, 0.5, 0.75, 1.0):
            for lightness in (0.0, 0.1, 0.5, 0.9, 1.0):
                channels = hsl_to_rgb(hue / 360, saturation, lightness)
                assert all(0 <= channel <= 255 for channel in channels)


def test_hsl_hue_overflowing_float_is_rejected():
    with raises(UnsupportedFormatError):
        parse_color("hsl(1{0}, 100%, 50%)".format("0" * 400))
    with raises(UnsupportedFormatError):
        parse_color("hsl(0, 1{0}%, 50%)".format("0" * 400))
