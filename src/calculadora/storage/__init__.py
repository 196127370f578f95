"""
Módulo de persistencia del estado entre ejecuciones.
"""

from .state_store import StateStore

__all__ = ['StateStore']
