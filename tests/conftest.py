"""
Fixtures compartidas por los tests.
"""

import pytest

from calculadora.core import Calculator, CalculatorState, handle_event, parse_sequence


@pytest.fixture
def state():
    """Estado inicial vacío."""
    return CalculatorState()


@pytest.fixture
def calc():
    """Calculadora con estado vacío."""
    return Calculator()


@pytest.fixture
def press():
    """Aplica una secuencia de teclas (ej: "5+6=") a un estado y lo devuelve."""
    def _press(sequence, state=None):
        state = state if state is not None else CalculatorState()
        for event in parse_sequence(sequence):
            handle_event(state, event)
        return state
    return _press
