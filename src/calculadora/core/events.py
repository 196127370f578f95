"""
Eventos de botón que recibe el motor.

Un ButtonEvent es uno de: Digit(d), OperatorPress(op) o Clear(). Este
módulo también traduce caracteres de teclado a eventos.
"""

from dataclasses import dataclass
from typing import Union

from .errors import InvalidKeyError
from .operators import Operator


@dataclass(frozen=True)
class Digit:
    """Pulsación de un dígito 0-9."""

    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"El dígito debe ser un entero, no {self.value!r}")
        if not 0 <= self.value <= 9:
            raise ValueError(f"Dígito fuera de rango 0-9: {self.value}")


@dataclass(frozen=True)
class OperatorPress:
    """Pulsación de un operador, incluido "="."""

    operator: Operator


@dataclass(frozen=True)
class Clear:
    """Pulsación de C: borra todo el estado."""


ButtonEvent = Union[Digit, OperatorPress, Clear]


# Caracteres aceptados para cada operador (teclado y secuencias de la CLI)
CHAR_OPERATORS = {
    "+": Operator.ADD,
    "-": Operator.SUBTRACT,
    "−": Operator.SUBTRACT,
    "*": Operator.MULTIPLY,
    "x": Operator.MULTIPLY,
    "X": Operator.MULTIPLY,
    "×": Operator.MULTIPLY,
    "/": Operator.DIVIDE,
    "÷": Operator.DIVIDE,
    "=": Operator.EQUAL,
}

CLEAR_CHARS = ("c", "C")


def event_from_char(char):
    """
    Convierte un carácter en el evento de botón correspondiente.

    Args:
        char (str): Un único carácter ("0"-"9", operador o "c")

    Returns:
        ButtonEvent: Evento equivalente

    Raises:
        InvalidKeyError: Si el carácter no corresponde a ningún botón
    """
    if len(char) == 1 and char in "0123456789":
        return Digit(int(char))
    if char in CHAR_OPERATORS:
        return OperatorPress(CHAR_OPERATORS[char])
    if char in CLEAR_CHARS:
        return Clear()
    raise InvalidKeyError(char)


def parse_sequence(text):
    """
    Convierte una secuencia de teclas (ej: "5+6=") en eventos.

    Los espacios se ignoran.
    """
    return [event_from_char(char) for char in text if not char.isspace()]
