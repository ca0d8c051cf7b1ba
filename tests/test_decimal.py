import random

import pytest

from luhnkit import decimal
from luhnkit.errors import EmptyInputError, InvalidCheckDigitError, InvalidSymbolError

from samples import DECIMAL_LUHN_SAMPLES, ISIN_SAMPLES, change_digit


def test_visa_is_valid():
    assert decimal.valid("4111111111111111")
    assert decimal.valid(b"4111111111111111")


def test_visa_with_bad_check_digit():
    assert not decimal.valid("4111111111111121")


def test_amex_checksum():
    sample = "378282246310005"
    assert decimal.checksum(sample[:-1]) == "5"
    assert decimal.checksum(sample[:-1].encode()) == b"5"


def test_empty_input():
    assert decimal.checksum("") is None
    assert decimal.checksum(b"") is None
    assert decimal.valid("") is False
    assert decimal.valid(b"") is False


def test_single_symbol():
    assert decimal.valid("0")
    for d in "123456789":
        assert not decimal.valid(d)


@pytest.mark.parametrize("sample", DECIMAL_LUHN_SAMPLES)
def test_decimal_luhn_samples(sample):
    # valid as is
    assert decimal.valid(sample)

    # a single changed digit is detected
    s = list(sample)
    s[3] = change_digit(s[3])
    assert not decimal.valid("".join(s))

    # so is a swap of two adjacent different digits
    s = list(sample)
    if s[3] != s[4]:
        s[3], s[4] = s[4], s[3]
        assert not decimal.valid("".join(s))

    # last digit is the check digit of the rest
    assert decimal.checksum(sample[:-1]) == sample[-1]

    # only decimal digits are accepted
    s = list(sample)
    s[3] = "x"
    assert not decimal.valid("".join(s))
    assert decimal.checksum("".join(s)[:-1]) is None


@pytest.mark.parametrize("isin", ISIN_SAMPLES[:3])
def test_isin_is_not_decimal(isin):
    assert not decimal.valid(isin)
    assert decimal.checksum(isin[:-1]) is None


@pytest.mark.parametrize(
    "value",
    [
        "banana",
        "?????????",
        "4111 1111 1111 1111",
        "4111-1111-1111-1111",
        "٤١١١",  # Arabic-Indic digits are not ASCII
        "411111111111111¹",     # superscript one
    ],
)
def test_rejects_out_of_alphabet(value):
    assert not decimal.valid(value)
    assert decimal.checksum(value) is None


def test_rejects_non_ascii_bytes():
    assert not decimal.valid(b"41111111\xff1111111")
    assert decimal.checksum(b"\x00") is None


def test_bytearray_and_memoryview_inputs():
    body = bytearray(b"37828224631000")
    assert decimal.checksum(body) == b"5"
    assert decimal.checksum(memoryview(bytes(body))) == b"5"
    assert decimal.valid(body + b"5")


def test_round_trip_random_bodies():
    rng = random.Random(1234)
    for length in range(1, 40):
        body = "".join(rng.choice("0123456789") for _ in range(length))
        digit = decimal.checksum(body)
        assert digit is not None and len(digit) == 1
        assert decimal.valid(body + digit)
        assert decimal.valid((body + digit).encode())


def test_single_increment_always_detected():
    rng = random.Random(99)
    for _ in range(200):
        body = "".join(rng.choice("0123456789") for _ in range(rng.randint(1, 24)))
        full = body + decimal.checksum(body)
        i = rng.randrange(len(full))
        mutated = full[:i] + change_digit(full[i]) + full[i + 1:]
        assert not decimal.valid(mutated)


class TestRaisingChannel:
    def test_checksum_or_raise(self):
        assert decimal.checksum_or_raise("37828224631000") == "5"

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            decimal.checksum_or_raise("")

    def test_invalid_symbol_position(self):
        with pytest.raises(InvalidSymbolError) as exc:
            decimal.checksum_or_raise("12a")
        assert exc.value.position == 2
        assert exc.value.symbol == "a"

    def test_invalid_symbol_in_bytes(self):
        with pytest.raises(InvalidSymbolError) as exc:
            decimal.checksum_or_raise(b"1-2")
        assert exc.value.position == 1
        assert exc.value.code == ord("-")

    def test_ensure_valid(self):
        decimal.ensure_valid("4111111111111111")
        with pytest.raises(InvalidCheckDigitError):
            decimal.ensure_valid("4111111111111121")
        with pytest.raises(EmptyInputError):
            decimal.ensure_valid("")

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            decimal.ensure_valid("41x1")
