"""
Módulo de interfaz de usuario.
Contiene el teclado en pantalla y el renderizador de UI.
"""

from .keypad import KEYPAD_LAYOUT, Button, build_keypad, event_from_key, hit_test, label_for
from .renderer import UIRenderer

__all__ = ['Button', 'KEYPAD_LAYOUT', 'UIRenderer', 'build_keypad', 'event_from_key', 'hit_test', 'label_for']
