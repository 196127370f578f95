"""
Tests de eventos de botón y de la traducción de teclas.
"""

import pytest

from calculadora.core import (
    Clear,
    Digit,
    InvalidKeyError,
    Operator,
    OperatorPress,
    event_from_char,
    parse_sequence,
)


@pytest.mark.parametrize("value", [-1, 10, 2.5, True, "5"])
def test_digit_rejects_invalid_values(value):
    with pytest.raises(ValueError):
        Digit(value)


@pytest.mark.parametrize("char,event", [
    ("0", Digit(0)),
    ("9", Digit(9)),
    ("+", OperatorPress(Operator.ADD)),
    ("-", OperatorPress(Operator.SUBTRACT)),
    ("*", OperatorPress(Operator.MULTIPLY)),
    ("x", OperatorPress(Operator.MULTIPLY)),
    ("÷", OperatorPress(Operator.DIVIDE)),
    ("=", OperatorPress(Operator.EQUAL)),
    ("c", Clear()),
    ("C", Clear()),
])
def test_event_from_char(char, event):
    assert event_from_char(char) == event


@pytest.mark.parametrize("char", ["a", ".", "(", "", "12"])
def test_event_from_char_rejects_unknown(char):
    with pytest.raises(InvalidKeyError):
        event_from_char(char)


def test_invalid_key_error_is_value_error():
    with pytest.raises(ValueError, match="Tecla no reconocida"):
        event_from_char("?")


def test_parse_sequence_ignores_whitespace():
    assert parse_sequence(" 5 + 6 = ") == [
        Digit(5),
        OperatorPress(Operator.ADD),
        Digit(6),
        OperatorPress(Operator.EQUAL),
    ]
