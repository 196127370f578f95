"""
Operadores de la calculadora.

Cada operador binario tiene su regla de evaluación. EQUAL no tiene regla
propia: dispara la evaluación con el operador registrado anteriormente y,
si se teclea un número nuevo tras el igual, ese número inicia un cálculo
nuevo.
"""

import enum

import numpy as np


# ============================================================================
# ENUM: Operator
# Propósito: Conjunto cerrado de operadores (+, −, ×, ÷, =)
# Responsabilidades:
#   - Símbolos para el display (unicode) y para fuentes de mapa de bits (ASCII)
#   - Evaluación binaria con semántica IEEE float64 (x/0 -> inf/nan)
# ============================================================================
class Operator(enum.Enum):
    """Operador pulsado por el usuario. El valor es el nombre persistido."""

    ADD = "Add"
    SUBTRACT = "Subtract"
    MULTIPLY = "Multiply"
    DIVIDE = "Divide"
    EQUAL = "Equal"

    @property
    def symbol(self):
        """Símbolo mostrado en el display secundario."""
        return _SYMBOLS[self][0]

    @property
    def ascii_symbol(self):
        """Símbolo para cv2.putText (las fuentes Hershey solo tienen ASCII)."""
        return _SYMBOLS[self][1]

    @property
    def is_binary(self):
        return self is not Operator.EQUAL

    def evaluate(self, a, b):
        """
        Aplica la regla del operador a dos operandos.

        Args:
            a (float): Operando acumulado (answer)
            b (float): Operando tecleado (pending_value)

        Returns:
            float: Resultado. La división por cero no se intercepta y produce
            inf, -inf o nan como cualquier float64.
        """
        x, y = np.float64(a), np.float64(b)
        # numpy avisa con RuntimeWarning en x/0; el resultado IEEE es el esperado
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            if self is Operator.ADD:
                result = x + y
            elif self is Operator.SUBTRACT:
                result = x - y
            elif self is Operator.MULTIPLY:
                result = x * y
            elif self is Operator.DIVIDE:
                result = x / y
            else:
                # Número tecleado después de "=": empieza un cálculo nuevo
                result = y
        return float(result)


_SYMBOLS = {
    Operator.ADD: ("+", "+"),
    Operator.SUBTRACT: ("−", "-"),
    Operator.MULTIPLY: ("×", "x"),
    Operator.DIVIDE: ("÷", "/"),
    Operator.EQUAL: ("=", "="),
}
