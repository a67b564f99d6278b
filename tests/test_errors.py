import pytest

from drillrunner.drills.errors import (
    CreationError,
    CreationErrorKind,
    ParseIntError,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    generate_nametag_text,
    parse_int,
    parse_pos_nonzero,
    remaining_tokens,
    total_cost,
)


def test_generates_nametag_text_for_a_nonempty_name():
    assert generate_nametag_text("Beyoncé") == "Hi! My name is Beyoncé"


def test_explains_why_generating_nametag_text_fails():
    with pytest.raises(ValueError) as info:
        generate_nametag_text("")
    assert str(info.value) == "`name` was empty; it must be nonempty."


def test_item_quantity_is_a_valid_number():
    assert total_cost("34") == 171


def test_item_quantity_is_an_invalid_number():
    with pytest.raises(ParseIntError) as info:
        total_cost("beep boop")
    assert str(info.value) == "invalid digit found in string"


def test_total_cost_overflow():
    with pytest.raises(OverflowError):
        total_cost("429496729")


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "cannot parse integer from empty string"),
        ("-", "invalid digit found in string"),
        ("12a", "invalid digit found in string"),
        ("2147483648", "number too large to fit in target type"),
        ("-2147483649", "number too small to fit in target type"),
    ],
)
def test_parse_int_errors(text, message):
    with pytest.raises(ParseIntError) as info:
        parse_int(text)
    assert str(info.value) == message


@pytest.mark.parametrize(
    "text, expected", [("+5", 5), ("-7", -7), ("2147483647", 2147483647), ("0", 0)]
)
def test_parse_int_values(text, expected):
    assert parse_int(text) == expected


def test_remaining_tokens_affordable():
    assert remaining_tokens(100, "8") == 59


def test_remaining_tokens_unaffordable():
    assert remaining_tokens(10, "8") == 10


def test_remaining_tokens_bad_input():
    with pytest.raises(ParseIntError):
        remaining_tokens(100, "eight")


def test_creation():
    assert PositiveNonzeroInteger(10).value == 10
    with pytest.raises(CreationError) as negative:
        PositiveNonzeroInteger(-10)
    assert negative.value.kind is CreationErrorKind.NEGATIVE
    with pytest.raises(CreationError) as zero:
        PositiveNonzeroInteger(0)
    assert zero.value.kind is CreationErrorKind.ZERO


def test_creation_error_messages():
    assert str(CreationError(CreationErrorKind.NEGATIVE)) == "number is negative"
    assert str(CreationError(CreationErrorKind.ZERO)) == "number is zero"


def test_parse_error():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("not a number")
    assert isinstance(info.value.error, ParseIntError)


def test_negative():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("-555")
    assert isinstance(info.value.error, CreationError)
    assert info.value.error.kind is CreationErrorKind.NEGATIVE


def test_zero():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("0")
    assert info.value.error.kind is CreationErrorKind.ZERO


def test_positive():
    assert parse_pos_nonzero("42") == PositiveNonzeroInteger(42)


def test_parse_pos_nonzero_accepts_64_bit():
    assert parse_pos_nonzero("4294967296").value == 4294967296