"""
Tests del teclado en pantalla.
"""

import pytest

from calculadora.core import Clear, Digit, Operator, OperatorPress
from calculadora.ui.keypad import (
    KEYPAD_LAYOUT,
    build_keypad,
    event_from_key,
    hit_test,
    label_for,
)


@pytest.fixture
def buttons():
    """Teclado de 4x4 botones de 100x100 sin separación."""
    return build_keypad(0, 0, 400, 400, gap=0)


def test_build_keypad_layout(buttons):
    assert len(buttons) == 16
    assert [b.label for b in buttons] == [label for row in KEYPAD_LAYOUT for label in row]
    assert all((b.w, b.h) == (100, 100) for b in buttons)


def test_build_keypad_with_gap():
    buttons = build_keypad(10, 20, 430, 430, gap=10)
    assert (buttons[0].x, buttons[0].y) == (10, 20)
    assert (buttons[1].x, buttons[4].y) == (120, 130)


@pytest.mark.parametrize("point,label", [
    ((50, 50), "7"),
    ((150, 50), "8"),
    ((350, 150), "x"),
    ((150, 350), "C"),
    ((399, 399), "+"),
])
def test_hit_test(buttons, point, label):
    assert hit_test(buttons, *point).label == label


@pytest.mark.parametrize("point", [(400, 50), (-1, 10), (50, 400)])
def test_hit_test_outside(buttons, point):
    assert hit_test(buttons, *point) is None


def test_button_events_and_kinds(buttons):
    by_label = {b.label: b for b in buttons}
    assert by_label["5"].event == Digit(5)
    assert by_label["x"].event == OperatorPress(Operator.MULTIPLY)
    assert by_label["C"].event == Clear()
    assert by_label["5"].kind == "digit"
    assert by_label["/"].kind == "operator"
    assert by_label["="].kind == "equal"
    assert by_label["C"].kind == "clear"


@pytest.mark.parametrize("key,event", [
    (ord("5"), Digit(5)),
    (ord("+"), OperatorPress(Operator.ADD)),
    (ord("/"), OperatorPress(Operator.DIVIDE)),
    (13, OperatorPress(Operator.EQUAL)),
    (10, OperatorPress(Operator.EQUAL)),
    (ord("c"), Clear()),
    (ord("q"), None),
    (-1, None),
])
def test_event_from_key(key, event):
    assert event_from_key(key) == event


@pytest.mark.parametrize("event,label", [
    (Digit(0), "0"),
    (OperatorPress(Operator.MULTIPLY), "x"),
    (OperatorPress(Operator.SUBTRACT), "-"),
    (OperatorPress(Operator.EQUAL), "="),
    (Clear(), "C"),
])
def test_label_for(buttons, event, label):
    assert label_for(event) == label
    assert label in {b.label for b in buttons}
