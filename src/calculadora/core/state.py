"""
Estado de la calculadora y su clasificación en fases.

CalculatorState guarda los cuatro campos opcionales que el motor muta en
cada pulsación. Phase nombra las combinaciones válidas del triple
(answer, pending_value, last_operator) para que el motor despache sobre un
conjunto cerrado de casos.
"""

import enum
import math
from dataclasses import dataclass
from typing import Optional

from .errors import StateFormatError
from .operators import Operator


class Phase(enum.Enum):
    """Fase del motor derivada de los campos del estado."""

    EMPTY = "empty"                        # Sin operandos
    FIRST_OPERAND = "first_operand"        # Tecleando el primer número
    OPERATOR_PENDING = "operator_pending"  # Operador pulsado, falta el segundo número
    EVALUATED = "evaluated"                # Resultado tras "="
    SECOND_OPERAND = "second_operand"      # Tecleando el segundo número
    ERROR = "error"                        # error_message activo
    UNREACHABLE = "unreachable"            # Combinación inválida del triple


# Valores no finitos que JSON no puede representar como número
_NON_FINITE = {"inf": math.inf, "-inf": -math.inf, "nan": math.nan}


# ============================================================================
# CLASE: CalculatorState
# Propósito: Estado único de la calculadora, mutado en sitio por el motor
# Responsabilidades:
#   - Guardar número en curso, resultado acumulado, último operador y error
#   - Clasificar el estado en una Phase
#   - Serializar a dict con valores por defecto para campos ausentes
# ============================================================================
@dataclass
class CalculatorState:
    """
    Estado de la calculadora.

    Variables de estado:
        - pending_value: Número siendo tecleado dígito a dígito
        - answer: Resultado acumulado de las operaciones anteriores
        - last_operator: Último operador aceptado (incluido EQUAL)
        - error_message: Mensaje de error; tiene prioridad en el display
    """

    pending_value: Optional[float] = None
    answer: Optional[float] = None
    last_operator: Optional[Operator] = None
    error_message: Optional[str] = None

    def reset(self):
        """Vuelve al estado inicial (todos los campos ausentes)."""
        self.pending_value = None
        self.answer = None
        self.last_operator = None
        self.error_message = None

    @property
    def phase(self):
        """
        Clasifica el estado en una Phase.

        El error tiene prioridad sobre el triple. Sin operandos la fase es
        EMPTY sea cual sea last_operator.
        """
        if self.error_message is not None:
            return Phase.ERROR

        has_answer = self.answer is not None
        has_pending = self.pending_value is not None
        has_operator = self.last_operator is not None

        if not has_answer and not has_pending:
            return Phase.EMPTY
        if not has_answer:
            return Phase.UNREACHABLE if has_operator else Phase.FIRST_OPERAND
        if not has_operator:
            return Phase.UNREACHABLE
        if has_pending:
            return Phase.SECOND_OPERAND
        if self.last_operator is Operator.EQUAL:
            return Phase.EVALUATED
        return Phase.OPERATOR_PENDING

    def snapshot(self):
        """Representación legible para los logs de diagnóstico."""
        operator = self.last_operator.name if self.last_operator else None
        return (
            f"answer={self.answer!r} pending_value={self.pending_value!r} "
            f"last_operator={operator} error_message={self.error_message!r}"
        )

    # ========================================================================
    # SERIALIZACIÓN
    # ========================================================================

    def to_dict(self):
        """Convierte el estado a un dict apto para JSON."""
        return {
            "pending_value": _encode_number(self.pending_value),
            "answer": _encode_number(self.answer),
            "last_operator": self.last_operator.value if self.last_operator else None,
            "error_message": self.error_message,
        }

    @classmethod
    def from_dict(cls, data):
        """
        Reconstruye un estado a partir de un dict guardado.

        Args:
            data (dict): Datos producidos por to_dict (o por una versión anterior)

        Returns:
            CalculatorState: Estado con los campos ausentes a None

        Raises:
            StateFormatError: Si algún campo presente tiene un tipo o valor inválido

        Las claves desconocidas se ignoran, de modo que un archivo de una
        versión más nueva o más antigua se puede cargar sin fallar.
        Los campos no se validan entre sí: un archivo con answer pero sin
        last_operator carga un estado inalcanzable, que el motor reporta como
        error en la siguiente pulsación de operador.
        """
        if not isinstance(data, dict):
            raise StateFormatError(f"Se esperaba un objeto, no {type(data).__name__}")

        operator = data.get("last_operator")
        if operator is not None:
            try:
                operator = Operator(operator)
            except ValueError:
                raise StateFormatError(f"Operador desconocido: {operator!r}") from None

        error_message = data.get("error_message")
        if error_message is not None and not isinstance(error_message, str):
            raise StateFormatError(f"error_message inválido: {error_message!r}")

        return cls(
            pending_value=_decode_number(data.get("pending_value"), "pending_value"),
            answer=_decode_number(data.get("answer"), "answer"),
            last_operator=operator,
            error_message=error_message,
        )


def _encode_number(value):
    if value is None or math.isfinite(value):
        return value
    if math.isnan(value):
        return "nan"
    return "inf" if value > 0 else "-inf"


def _decode_number(value, field):
    if value is None:
        return None
    if isinstance(value, bool):
        raise StateFormatError(f"{field} inválido: {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str) and value in _NON_FINITE:
        return _NON_FINITE[value]
    raise StateFormatError(f"{field} inválido: {value!r}")
