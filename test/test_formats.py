from pytest import mark, raises

from rcp_palette.errors import MissingHashPrefixError
from rcp_palette.formats import ColorFormat


def test_format_detection():
    detect = ColorFormat.detect
    assert detect("red") is ColorFormat.NAMED
    assert detect("GREY") is ColorFormat.NAMED
    assert detect("#fff") is ColorFormat.HEX
    assert detect("#") is ColorFormat.HEX
    assert detect("#not-really-hex") is ColorFormat.HEX
    assert detect("rgb(1, 2, 3)") is ColorFormat.RGB
    assert detect("RGB(") is ColorFormat.RGB
    assert detect("hsl(0, 0%, 0%)") is ColorFormat.HSL
    assert detect("Hsl(") is ColorFormat.HSL


@mark.parametrize(
    "input",
    ["1A2B3C", "notacolor", "", "rgb 1, 2, 3", "rgb (1, 2, 3)", "hsv(0, 0%, 0%)"],
)
def test_format_detection_failure(input):
    with raises(MissingHashPrefixError):
        ColorFormat.detect(input)
