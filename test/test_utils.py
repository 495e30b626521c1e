from pytest import mark, raises

from rcp_palette.parsers.utils import (
    find_arguments,
    parse_hex_byte,
    parse_int32,
    parse_real,
    split_arguments,
)


@mark.parametrize(
    "input,output", [("00", 0), ("0a", 10), ("0A", 10), ("7f", 127), ("FF", 255)]
)
def test_parse_hex_byte(input, output):
    assert parse_hex_byte(input) == output


@mark.parametrize("input", ["3G", "+f", " f", "f ", "-1", "f", "fff", ""])
def test_parse_hex_byte_invalid(input):
    with raises(ValueError):
        parse_hex_byte(input)


@mark.parametrize(
    "input,output",
    [
        ("0", 0),
        ("255", 255),
        ("-1", -1),
        ("+7", 7),
        ("007", 7),
        ("2147483647", 2 ** 31 - 1),
    ],
)
def test_parse_int32(input, output):
    assert parse_int32(input) == output


@mark.parametrize(
    "input",
    ["", "aa", "1.0", "1e3", "0x10", "1_000", "- 1", "2147483648", "-2147483649"],
)
def test_parse_int32_invalid(input):
    with raises(ValueError):
        parse_int32(input)


@mark.parametrize(
    "input,output", [("0", 0.0), ("12.5", 12.5), ("-0.25", -0.25), ("+720", 720.0)]
)
def test_parse_real(input, output):
    assert parse_real(input) == output


@mark.parametrize(
    "input",
    [
        "",
        ".5",
        "5.",
        "1e3",
        "inf",
        "nan",
        "12.5.1",
        "abc",
        "1" + "0" * 400,
        "-" + "9" * 400 + ".5",
    ],
)
def test_parse_real_invalid(input):
    with raises(ValueError):
        parse_real(input)


def test_find_arguments():
    assert find_arguments("rgb(1, 2, 3)") == "1, 2, 3"
    assert find_arguments("rgb((1), 2, 3))") == "(1), 2, 3)"
    assert find_arguments("rgb(1, 2, 3) trailing") == "1, 2, 3"
    assert find_arguments("rgb( )") == " "
    assert find_arguments("rgb()") is None
    assert find_arguments("rgb(1, 2, 3") is None
    assert find_arguments("rgb 1, 2, 3)") is None
    assert find_arguments("rgb)1(") is None


def test_split_arguments():
    assert split_arguments(" 1 , 2 ,3 ", 3) == ("1", "2", "3")
    assert split_arguments(",,", 3) == ("", "", "")
    assert split_arguments("1, 2", 3) is None
    assert split_arguments("1, 2, 3, 4", 3) is None
