"""
Excepciones del proyecto.

El motor nunca lanza excepciones por una secuencia de teclas: los estados
inalcanzables se reportan en el display. Estas clases cubren los errores
de la capa de entrada y de la persistencia.
"""


class CalculadoraError(Exception):
    """Base de todas las excepciones de la calculadora."""


class InvalidKeyError(CalculadoraError, ValueError):
    """Carácter o tecla que no corresponde a ningún botón."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"Tecla no reconocida: {key!r}")


class StateFormatError(CalculadoraError):
    """Datos de estado guardados que no se pueden interpretar."""
