"""
Módulo de configuración de la calculadora.
"""

from .settings import DEFAULT_STATE_FILE, AppConfig

__all__ = ['AppConfig', 'DEFAULT_STATE_FILE']
