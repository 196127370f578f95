"""
Formateo del display.

Proyecciones de solo lectura del CalculatorState: se pueden llamar en cada
frame sin efectos secundarios.
"""

import math

import numpy as np

from .operators import Operator


def format_number(value):
    """
    Convierte un número al texto del display.

    Args:
        value (float): Número a mostrar

    Returns:
        str: Representación decimal más corta que identifica al float

    Ejemplos:
        - 11.0 → "11" (enteros sin decimales)
        - 0.5 → "0.5"
        - 1e20 → "100000000000000000000" (nunca notación exponencial)
        - inf → "inf", nan → "NaN"
    """
    if math.isnan(value):
        return "NaN"
    return np.format_float_positional(value, trim="-")


def primary_display(state):
    """Texto del display principal: error, número en curso, resultado o 0."""
    if state.error_message is not None:
        return state.error_message
    if state.pending_value is not None:
        return format_number(state.pending_value)
    if state.answer is not None:
        return format_number(state.answer)
    return format_number(0.0)


def secondary_display(state):
    """
    Texto del display secundario (resultado parcial).

    Vacío tras "="; en otro caso "{answer} {símbolo}", dejando en blanco la
    parte que falte.
    """
    if state.last_operator is Operator.EQUAL:
        return ""
    answer = format_number(state.answer) if state.answer is not None else ""
    symbol = state.last_operator.symbol if state.last_operator is not None else ""
    return f"{answer} {symbol}"


def render(state):
    """Devuelve (principal, secundario) para el estado dado."""
    return primary_display(state), secondary_display(state)
