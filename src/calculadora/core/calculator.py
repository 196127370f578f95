"""
Motor de la calculadora.

Funciones de transición puras sobre CalculatorState (click_number,
click_operator, clear, handle_event) y la clase Calculator, que es la
dueña del estado dentro de la aplicación.
"""

import logging

from .display import primary_display, render, secondary_display
from .events import Clear, Digit, OperatorPress
from .state import CalculatorState, Phase

logger = logging.getLogger(__name__)

UNREACHABLE_MESSAGE = "Err: Unreachable"


# ============================================================================
# TRANSICIONES
# Cada función muta el estado recibido y lo devuelve. Ninguna lanza
# excepciones para una entrada válida.
# ============================================================================

def click_number(state, digit):
    """
    Añade un dígito al número en curso (1, 2, 3 → 123).

    En fase ERROR la pulsación se ignora para conservar el estado anómalo.
    """
    if state.phase is Phase.ERROR:
        logger.debug("Dígito %d ignorado en estado de error", digit)
        return state

    if state.pending_value is None:
        state.pending_value = float(digit)
    else:
        state.pending_value = state.pending_value * 10 + digit
    return state


def click_operator(state, operator):
    """
    Aplica la pulsación de un operador según la fase del estado.

    Args:
        state (CalculatorState): Estado a mutar
        operator (Operator): Operador pulsado (incluido EQUAL)

    Returns:
        CalculatorState: El mismo estado, actualizado

    Transiciones:
        - EMPTY: Sin operandos, no hace nada
        - FIRST_OPERAND: El número pasa a answer y se registra el operador
        - OPERATOR_PENDING / EVALUATED: Se reemplaza el operador, sin evaluar
        - SECOND_OPERAND: answer = last_operator(answer, pending_value) y se
          registra el operador pulsado (EQUAL incluido)
        - UNREACHABLE: Se registra el diagnóstico y se activa error_message
          sin tocar el resto de campos
        - ERROR: Se ignora hasta que se pulse C
    """
    phase = state.phase

    if phase is Phase.ERROR:
        logger.debug("Operador %s ignorado en estado de error", operator.name)
    elif phase is Phase.EMPTY:
        logger.debug("Operador %s sin operandos, se ignora", operator.name)
    elif phase is Phase.FIRST_OPERAND:
        state.answer = state.pending_value
        state.pending_value = None
        state.last_operator = operator
    elif phase in (Phase.OPERATOR_PENDING, Phase.EVALUATED):
        state.last_operator = operator
    elif phase is Phase.SECOND_OPERAND:
        result = state.last_operator.evaluate(state.answer, state.pending_value)
        logger.debug(
            "%r %s %r = %r",
            state.answer, state.last_operator.symbol, state.pending_value, result,
        )
        state.answer = result
        state.pending_value = None
        state.last_operator = operator
    else:
        logger.error(
            "Estado inalcanzable al pulsar %s: %s", operator.name, state.snapshot()
        )
        state.error_message = UNREACHABLE_MESSAGE
    return state


def clear(state):
    """Reinicia el estado. Siempre tiene éxito."""
    state.reset()
    return state


def handle_event(state, event):
    """
    Procesa un ButtonEvent sobre el estado.

    Raises:
        TypeError: Si event no es Digit, OperatorPress ni Clear
    """
    if isinstance(event, Digit):
        return click_number(state, event.value)
    if isinstance(event, OperatorPress):
        return click_operator(state, event.operator)
    if isinstance(event, Clear):
        return clear(state)
    raise TypeError(f"Evento de botón desconocido: {event!r}")


# ============================================================================
# CLASE: Calculator
# Propósito: Dueña del CalculatorState dentro de la aplicación
# Responsabilidades:
#   - Recibir eventos y delegar en las funciones de transición
#   - Exponer los textos del display principal y secundario
# ============================================================================
class Calculator:
    """
    Calculadora con estado propio.

    Modelo de operación:
        1. Usuario teclea dígitos → se acumulan en pending_value
        2. Usuario pulsa operador → pending_value pasa a answer (o se evalúa)
        3. Usuario pulsa = → se evalúa con el último operador registrado
        4. Usuario pulsa C → todo vuelve al estado inicial
    """

    def __init__(self, state=None):
        """
        Args:
            state (CalculatorState): Estado inicial (ej: cargado de disco).
                Si es None se crea uno vacío.
        """
        self.state = state if state is not None else CalculatorState()

    def press(self, event):
        """Procesa un evento y devuelve (principal, secundario)."""
        handle_event(self.state, event)
        return render(self.state)

    @property
    def has_error(self):
        return self.state.error_message is not None

    @property
    def has_result(self):
        """True si el display muestra un resultado recién evaluado."""
        return self.state.phase is Phase.EVALUATED

    def get_display(self):
        return primary_display(self.state)

    def get_expression(self):
        return secondary_display(self.state)
