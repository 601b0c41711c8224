import pytest

from rustdrill.solutions.errors import (
    CreationError,
    NegativeError,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    ZeroError,
    generate_nametag_text,
    parse_pos_nonzero,
    spend_tokens,
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
    with pytest.raises(ValueError) as info:
        total_cost("beep boop")
    assert str(info.value) == "invalid digit found in string"


def test_total_cost_empty_quantity():
    with pytest.raises(ValueError, match="cannot parse integer from empty string"):
        total_cost("")


def test_total_cost_quantity_too_large():
    with pytest.raises(ValueError, match="number too large to fit in target type"):
        total_cost("2147483648")


def test_total_cost_accepts_plus_sign():
    assert total_cost("+2") == 11


def test_spend_tokens_leaves_remaining_tokens():
    assert spend_tokens(100, "8") == 59


def test_spend_tokens_cannot_afford():
    with pytest.raises(ValueError, match="afford"):
        spend_tokens(10, "8")


def test_spend_tokens_bad_quantity():
    with pytest.raises(ValueError, match="invalid digit"):
        spend_tokens(100, "eight")


def test_creation():
    assert PositiveNonzeroInteger.new(10).value == 10
    with pytest.raises(NegativeError):
        PositiveNonzeroInteger.new(-10)
    with pytest.raises(ZeroError):
        PositiveNonzeroInteger.new(0)


def test_creation_error_messages():
    with pytest.raises(CreationError, match="number is negative"):
        PositiveNonzeroInteger.new(-1)
    with pytest.raises(CreationError, match="number is zero"):
        PositiveNonzeroInteger.new(0)


def test_parse_error():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("not a number")
    assert not isinstance(info.value.cause, CreationError)
    assert str(info.value.cause) == "invalid digit found in string"


def test_negative():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("-555")
    assert isinstance(info.value.cause, NegativeError)


def test_zero():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("0")
    assert isinstance(info.value.cause, ZeroError)


def test_positive():
    expected = PositiveNonzeroInteger.new(42)
    assert parse_pos_nonzero("42") == expected