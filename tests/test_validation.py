import pytest

from belanja.validation import (
    InputError,
    is_low_stock,
    is_number,
    is_valid_username,
    parse_int,
    safe_divide,
    split,
)


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("  -7", -7), ("+15", 15), ("12abc", 12), ("2147483647", 2147483647), ("-2147483648", -2147483648)],
)
def test_parse_int_accepts_leading_integer(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "  ", "-", "x12"])
def test_parse_int_rejects_non_numbers(text):
    with pytest.raises(InputError, match="Input bukan angka yang valid."):
        parse_int(text)


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "99999999999"])
def test_parse_int_rejects_out_of_range(text):
    with pytest.raises(InputError, match="Angka terlalu besar atau kecil."):
        parse_int(text)


def test_safe_divide_truncates_toward_zero():
    assert safe_divide(7, 2) == 3
    assert safe_divide(-7, 2) == -3


@pytest.mark.parametrize("a, b", [(7, 2), (-7, 2), (7, -2), (-7, -2), (100, 7), (0, 5)])
def test_safe_divide_remainder_invariant(a, b):
    q = safe_divide(a, b)
    r = a - q * b
    assert abs(r) < abs(b)
    assert r == 0 or (r > 0) == (a > 0)


def test_safe_divide_by_zero():
    with pytest.raises(ZeroDivisionError, match="Pembagian dengan nol"):
        safe_divide(5, 0)


@pytest.mark.parametrize("text, expected", [("123", True), ("", False), ("12a", False), ("-1", False), ("²", False)])
def test_is_number(text, expected):
    assert is_number(text) is expected


def test_split_basic_and_edges():
    assert split("a,b,c", ",") == ["a", "b", "c"]
    assert split("a,,b", ",") == ["a", "", "b"]
    assert split("a,b,", ",") == ["a", "b"]
    assert split("", ",") == []


@pytest.mark.parametrize("text", ["x", "x;y", ";y", "one;;two;three"])
def test_split_round_trip(text):
    assert ";".join(split(text, ";")) == text


@pytest.mark.parametrize(
    "name, expected",
    [("abc", True), ("user123", True), ("ab", False), ("bad name", False), ("bad_name", False), ("é12", False)],
)
def test_is_valid_username(name, expected):
    assert is_valid_username(name) is expected


def test_is_low_stock_boundary():
    assert is_low_stock(9) is True
    assert is_low_stock(10) is False
    assert is_low_stock(0) is True