"""
Teclado en pantalla.

Geometría de los botones, detección de clics y traducción de teclas de
cv2.waitKey a eventos. No depende de OpenCV para poder probarse aislado.
"""

from dataclasses import dataclass

from ..core.errors import InvalidKeyError
from ..core.events import Clear, Digit, OperatorPress, event_from_char


# Distribución de botones por filas, de arriba abajo
KEYPAD_LAYOUT = (
    ("7", "8", "9", "/"),
    ("4", "5", "6", "x"),
    ("1", "2", "3", "-"),
    ("0", "C", "=", "+"),
)

KEY_ENTER = (10, 13)


@dataclass(frozen=True)
class Button:
    """Botón rectangular del teclado."""

    label: str
    x: int
    y: int
    w: int
    h: int

    @property
    def event(self):
        return event_from_char(self.label)

    @property
    def kind(self):
        """Tipo de botón para elegir color: "digit", "operator", "equal" o "clear"."""
        event = self.event
        if isinstance(event, Digit):
            return "digit"
        if isinstance(event, Clear):
            return "clear"
        if isinstance(event, OperatorPress) and not event.operator.is_binary:
            return "equal"
        return "operator"

    def contains(self, px, py):
        return self.x <= px < self.x + self.w and self.y <= py < self.y + self.h


def build_keypad(x, y, width, height, gap=10):
    """
    Calcula los rectángulos de los botones dentro de un área.

    Args:
        x, y (int): Esquina superior izquierda del área
        width, height (int): Tamaño del área en píxeles
        gap (int): Separación entre botones

    Returns:
        list[Button]: Botones en orden de lectura (fila a fila)
    """
    rows = len(KEYPAD_LAYOUT)
    cols = len(KEYPAD_LAYOUT[0])
    bw = (width - gap * (cols - 1)) // cols
    bh = (height - gap * (rows - 1)) // rows

    buttons = []
    for r, row in enumerate(KEYPAD_LAYOUT):
        for c, label in enumerate(row):
            buttons.append(Button(label, x + c * (bw + gap), y + r * (bh + gap), bw, bh))
    return buttons


def hit_test(buttons, px, py):
    """Devuelve el botón bajo el punto (px, py) o None si no hay ninguno."""
    for button in buttons:
        if button.contains(px, py):
            return button
    return None


def event_from_key(key):
    """
    Traduce un código de cv2.waitKey a un evento.

    Returns:
        ButtonEvent o None si la tecla no corresponde a ningún botón
    """
    if key < 0:
        return None
    if key in KEY_ENTER:
        return event_from_char("=")
    try:
        return event_from_char(chr(key))
    except InvalidKeyError:
        return None


def label_for(event):
    """Etiqueta del botón que corresponde a un evento (para resaltarlo)."""
    if isinstance(event, Digit):
        return str(event.value)
    if isinstance(event, OperatorPress):
        return event.operator.ascii_symbol
    return "C"
