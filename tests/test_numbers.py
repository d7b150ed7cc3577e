import pytest

from pipeweld.numbers import atoi, itoa


def test_atoi_skips_whitespace_and_reads_sign():
    assert atoi(" \t\n\v\f\r-42abc") == -42


def test_atoi_plus_sign():
    assert atoi("+7") == 7


def test_atoi_double_sign_gives_zero():
    assert atoi("--5") == 0
    assert atoi("+-5") == 0


def test_atoi_no_digits_gives_zero():
    assert atoi("") == 0
    assert atoi("abc") == 0
    assert atoi("   ") == 0


def test_atoi_stops_at_first_non_digit():
    assert atoi("123 456") == 123


def test_atoi_whitespace_after_sign_stops():
    assert atoi("- 5") == 0


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_zero():
    assert itoa(0) == "0"


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 2147483647, -2147483648, 123456])
def test_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_negative_has_leading_minus():
    text = itoa(-305)
    assert text.startswith("-")
    assert atoi(text[1:]) == 305


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("5")