"""
Persistencia del estado de la calculadora.

Guarda los cuatro campos de CalculatorState en un archivo JSON al salir y
los recupera al iniciar. Un archivo ausente, ilegible o de otra versión
nunca impide arrancar: los campos que falten quedan vacíos y, si el
archivo no se puede interpretar, se parte del estado inicial.
"""

import logging
from pathlib import Path

import orjson

from ..core.errors import StateFormatError
from ..core.state import CalculatorState

logger = logging.getLogger(__name__)


class StateStore:
    """Archivo JSON con el estado de la calculadora."""

    def __init__(self, path):
        self.path = Path(path)

    def save(self, state):
        """
        Escribe el estado en disco.

        Returns:
            Path: Ruta del archivo escrito
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "wb") as f:
            f.write(orjson.dumps(
                state.to_dict(),
                option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS
            ))
        logger.debug("Estado guardado en %s: %s", self.path, state.snapshot())
        return self.path

    def load(self):
        """
        Lee el estado guardado.

        Returns:
            CalculatorState: Estado leído, o uno vacío si no hay archivo o
            su contenido no es válido
        """
        if not self.path.exists():
            return CalculatorState()

        try:
            with open(self.path, "rb") as f:
                data = orjson.loads(f.read())
            state = CalculatorState.from_dict(data)
        except (OSError, orjson.JSONDecodeError, StateFormatError) as e:
            logger.warning("No se pudo cargar el estado de %s: %s", self.path, e)
            return CalculatorState()

        logger.debug("Estado cargado de %s: %s", self.path, state.snapshot())
        return state

    def delete(self):
        """Elimina el archivo de estado si existe."""
        if self.path.exists():
            self.path.unlink()
