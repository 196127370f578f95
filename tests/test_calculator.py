"""
Tests del motor de la calculadora (transiciones de estado).
"""

import logging

import pytest

from calculadora.core import (
    UNREACHABLE_MESSAGE,
    Calculator,
    CalculatorState,
    Clear,
    Digit,
    Operator,
    OperatorPress,
    Phase,
    click_number,
    click_operator,
    handle_event,
    render,
)


def primary(state):
    return render(state)[0]


# --- Entrada de dígitos ---

def test_digit_accumulation(press):
    """1, 2, 3 desde el estado inicial deja pending_value = 123."""
    state = press("123")
    assert state.pending_value == 123
    assert state.answer is None
    assert state.last_operator is None


def test_leading_zero_is_absorbed(press):
    assert press("007").pending_value == 7


def test_click_number_returns_same_state(state):
    assert click_number(state, 4) is state
    assert state.pending_value == 4


# --- Operaciones ---

def test_single_operation(press):
    assert primary(press("5+6=")) == "11"


def test_operator_replacement_before_operand(press):
    """El - reemplaza al + porque no se tecleó ningún dígito entre ambos."""
    state = press("5+-")
    assert state.last_operator is Operator.SUBTRACT
    assert state.answer == 5
    assert primary(press("3=", state)) == "2"


def test_chained_equals(press):
    state = press("5+6=")
    assert state.answer == 11
    assert state.last_operator is Operator.EQUAL
    assert primary(press("+5=", state)) == "16"


def test_chain_evaluates_left_to_right(press):
    """Sin precedencia: 2 + 3 × 4 = 20."""
    assert primary(press("2+3*4=")) == "20"


def test_operator_evaluates_pending_operation(press):
    state = press("2+3*")
    assert state.answer == 5
    assert state.pending_value is None
    assert state.last_operator is Operator.MULTIPLY


@pytest.mark.parametrize("sequence,expected", [
    ("9-4=", "5"),
    ("3-5=", "-2"),
    ("6*7=", "42"),
    ("8/2=", "4"),
    ("1/4=", "0.25"),
    ("1/3=", "0.3333333333333333"),
])
def test_basic_arithmetic(press, sequence, expected):
    assert primary(press(sequence)) == expected


def test_first_operator_moves_pending_to_answer(press):
    state = press("12+")
    assert state.answer == 12
    assert state.pending_value is None
    assert state.last_operator is Operator.ADD
    assert state.phase is Phase.OPERATOR_PENDING


# --- Igual repetido y números tras el igual ---

def test_repeated_equals_keeps_result(press):
    state = press("5+6==")
    assert state.answer == 11
    assert state.phase is Phase.EVALUATED
    assert primary(state) == "11"


def test_digit_after_equals_starts_new_calculation(press):
    assert primary(press("5+6=3+2=")) == "5"


def test_digit_after_equals_is_shown(press):
    state = press("5+6=7")
    assert primary(state) == "7"
    assert state.answer == 11


# --- Operador sin operandos ---

def test_operator_without_operands_is_noop(press):
    state = press("+")
    assert state == CalculatorState()


def test_operator_without_operands_does_not_affect_next_operation(press):
    assert primary(press("*5+3=")) == "8"


# --- División por cero ---

@pytest.mark.parametrize("sequence,expected", [
    ("5/0=", "inf"),
    ("0/0=", "NaN"),
    ("0-5/0=", "-inf"),
])
def test_division_by_zero_is_not_intercepted(press, sequence, expected):
    state = press(sequence)
    assert state.error_message is None
    assert primary(state) == expected


def test_infinity_propagates(press):
    assert primary(press("5/0=+1=")) == "inf"


# --- Clear ---

@pytest.mark.parametrize("fields", [
    {},
    {"pending_value": 3.0},
    {"answer": 2.0, "last_operator": Operator.ADD},
    {"answer": 2.0, "pending_value": 7.0, "last_operator": Operator.DIVIDE},
    {"answer": 1.0, "error_message": UNREACHABLE_MESSAGE},
])
def test_clear_always_restores_initial_state(fields):
    state = CalculatorState(**fields)
    handle_event(state, Clear())
    assert state == CalculatorState()


# --- Estados inalcanzables ---

@pytest.mark.parametrize("fields", [
    {"answer": 5.0},
    {"pending_value": 3.0, "last_operator": Operator.ADD},
    {"answer": 1.0, "pending_value": 2.0},
])
@pytest.mark.parametrize("operator", list(Operator))
def test_unreachable_state_sets_error_and_keeps_fields(fields, operator):
    state = CalculatorState(**fields)
    click_operator(state, operator)
    assert state.error_message == UNREACHABLE_MESSAGE
    assert state.phase is Phase.ERROR
    for name in ("answer", "pending_value", "last_operator"):
        assert getattr(state, name) == fields.get(name)


def test_unreachable_state_is_logged(caplog):
    state = CalculatorState(answer=5.0)
    with caplog.at_level(logging.ERROR, logger="calculadora.core.calculator"):
        click_operator(state, Operator.ADD)
    assert "inalcanzable" in caplog.text
    assert "answer=5.0" in caplog.text
    assert "ADD" in caplog.text


def test_unreachable_state_recovers_with_clear():
    state = CalculatorState(answer=5.0)
    handle_event(state, OperatorPress(Operator.SUBTRACT))
    assert primary(state) == UNREACHABLE_MESSAGE
    handle_event(state, Clear())
    assert state == CalculatorState()
    assert primary(state) == "0"


def test_error_state_ignores_digits_and_operators():
    state = CalculatorState(answer=5.0, error_message=UNREACHABLE_MESSAGE)
    handle_event(state, Digit(3))
    handle_event(state, OperatorPress(Operator.EQUAL))
    assert state == CalculatorState(answer=5.0, error_message=UNREACHABLE_MESSAGE)


# --- handle_event ---

def test_handle_event_mutates_and_returns_state(state):
    assert handle_event(state, Digit(9)) is state
    assert state.pending_value == 9


def test_handle_event_rejects_unknown_event(state):
    with pytest.raises(TypeError):
        handle_event(state, "5")


# --- Clase Calculator ---

def test_calculator_press_returns_display(calc):
    calc.press(Digit(5))
    assert calc.press(OperatorPress(Operator.ADD)) == ("5", "5 +")
    calc.press(Digit(6))
    assert calc.press(OperatorPress(Operator.EQUAL)) == ("11", "")
    assert calc.has_result


def test_calculator_clear(calc):
    calc.press(Digit(5))
    calc.press(Clear())
    assert calc.state == CalculatorState()
    assert calc.get_display() == "0"


def test_calculator_uses_given_state():
    state = CalculatorState(answer=4.0, last_operator=Operator.MULTIPLY)
    calc = Calculator(state)
    calc.press(Digit(2))
    calc.press(OperatorPress(Operator.EQUAL))
    assert calc.get_display() == "8"
    assert calc.state is state


def test_calculator_has_error():
    calc = Calculator(CalculatorState(answer=1.0))
    calc.press(OperatorPress(Operator.ADD))
    assert calc.has_error
    assert calc.get_display() == UNREACHABLE_MESSAGE
