"""
Módulo core con el motor de la calculadora.
Contiene el estado, los operadores, los eventos, las transiciones y el display.
"""

from .calculator import (
    UNREACHABLE_MESSAGE,
    Calculator,
    clear,
    click_number,
    click_operator,
    handle_event,
)
from .display import format_number, render
from .errors import CalculadoraError, InvalidKeyError, StateFormatError
from .events import ButtonEvent, Clear, Digit, OperatorPress, event_from_char, parse_sequence
from .operators import Operator
from .state import CalculatorState, Phase

__all__ = [
    'ButtonEvent', 'CalculadoraError', 'Calculator', 'CalculatorState', 'Clear',
    'Digit', 'InvalidKeyError', 'Operator', 'OperatorPress', 'Phase',
    'StateFormatError', 'UNREACHABLE_MESSAGE', 'clear', 'click_number',
    'click_operator', 'event_from_char', 'format_number', 'handle_event',
    'parse_sequence', 'render',
]
