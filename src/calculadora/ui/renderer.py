"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase UIRenderer que dibuja el display y el teclado
de la calculadora sobre frames de numpy con OpenCV.
"""

import cv2
import numpy as np

from ..config.settings import AppConfig
from ..core.operators import Operator


# Paletas BGR para cada tema
THEMES = {
    "dark": {
        "bg": (38, 30, 30),
        "display_bg": (28, 22, 22),
        "display_fg": (176, 221, 154),
        "secondary_fg": (150, 150, 150),
        "error_fg": (78, 90, 229),
        "border": (110, 100, 90),
        "digit_bg": (64, 52, 48),
        "operator_bg": (88, 110, 60),
        "equal_bg": (88, 138, 45),
        "clear_bg": (60, 60, 150),
        "button_fg": (240, 240, 240),
        "highlight": (0, 200, 255),
        "help_fg": (150, 150, 150),
    },
    "light": {
        "bg": (237, 230, 221),
        "display_bg": (223, 212, 200),
        "display_fg": (50, 35, 26),
        "secondary_fg": (110, 100, 90),
        "error_fg": (46, 58, 176),
        "border": (200, 191, 178),
        "digit_bg": (250, 245, 240),
        "operator_bg": (200, 230, 190),
        "equal_bg": (87, 139, 46),
        "clear_bg": (140, 150, 230),
        "button_fg": (40, 40, 40),
        "highlight": (0, 140, 255),
        "help_fg": (110, 100, 90),
    },
}

# Las fuentes Hershey solo dibujan ASCII
_ASCII = {op.symbol: op.ascii_symbol for op in Operator}

FONT = cv2.FONT_HERSHEY_DUPLEX
DISPLAY_HEIGHT = 150
MARGIN = 20


def to_ascii(text):
    """Sustituye los símbolos unicode de operador por su versión ASCII."""
    return "".join(_ASCII.get(char, char) for char in text)


# ============================================================================
class UIRenderer:
    """
    Renderizador de la calculadora.

    Componentes visuales:
        1. Display: resultado parcial arriba, número/resultado/error abajo
        2. Teclado: botones con color según tipo (dígito, operador, =, C)
        3. Feedback: mensajes temporales de confirmación
        4. Ayuda: línea con los atajos de teclado
    """

    def __init__(self, width, height, config=None):
        """
        Inicializa el renderizador con dimensiones de la ventana.

        Args:
            width (int): Ancho de la ventana en píxeles
            height (int): Alto de la ventana en píxeles
            config (AppConfig): Configuración (tema); opcional
        """
        self.width = width
        self.height = height
        self.config = config if config else AppConfig()
        self.feedback_msg = ""       # Mensaje de feedback actual
        self.feedback_timer = 0      # Frames restantes para mostrar feedback

    @property
    def theme(self):
        return THEMES["dark" if self.config.dark_mode else "light"]

    def keypad_area(self):
        """Rectángulo (x, y, w, h) reservado para el teclado."""
        top = MARGIN + DISPLAY_HEIGHT + MARGIN
        bottom = self.height - 80  # Espacio para feedback y ayuda
        return MARGIN, top, self.width - 2 * MARGIN, bottom - top

    def show_feedback(self, msg, duration=30):
        """
        Muestra mensaje de feedback temporal.

        Args:
            msg (str): Mensaje a mostrar
            duration (int): Duración en frames (~30 frames = 1 segundo)
        """
        self.feedback_msg = to_ascii(msg)
        self.feedback_timer = duration

    def new_frame(self):
        """Frame vacío con el color de fondo del tema."""
        img = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        img[:] = self.theme["bg"]
        return img

    def draw_display(self, img, primary, secondary, has_error=False):
        """
        Dibuja el display de la calculadora.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            primary (str): Número en curso, resultado o mensaje de error
            secondary (str): Resultado parcial con operador (ej: "5 +")
            has_error (bool): Dibuja el texto principal en color de error

        Ambos textos se alinean a la derecha. Si el texto principal no cabe
        se reduce la fuente.
        """
        theme = self.theme
        x, y = MARGIN, MARGIN
        w, h = self.width - 2 * MARGIN, DISPLAY_HEIGHT

        cv2.rectangle(img, (x, y), (x + w, y + h), theme["display_bg"], -1)
        cv2.rectangle(img, (x, y), (x + w, y + h), theme["border"], 2)

        secondary = to_ascii(secondary).strip()
        if secondary:
            self._put_right(img, secondary, x + w - 15, y + 45, 0.9,
                            theme["secondary_fg"], 2, w - 30)

        color = theme["error_fg"] if has_error else theme["display_fg"]
        self._put_right(img, to_ascii(primary), x + w - 15, y + h - 30, 2.2,
                        color, 3, w - 30)

    def draw_keypad(self, img, buttons, highlight=None):
        """
        Dibuja los botones del teclado.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            buttons (list[Button]): Botones generados por build_keypad
            highlight (str): Etiqueta del botón pulsado recientemente
        """
        theme = self.theme
        for button in buttons:
            p1 = (button.x, button.y)
            p2 = (button.x + button.w, button.y + button.h)
            cv2.rectangle(img, p1, p2, theme[f"{button.kind}_bg"], -1)
            border = theme["highlight"] if button.label == highlight else theme["border"]
            cv2.rectangle(img, p1, p2, border, 2)

            (tw, th), _ = cv2.getTextSize(button.label, FONT, 1.2, 2)
            tx = button.x + (button.w - tw) // 2
            ty = button.y + (button.h + th) // 2
            cv2.putText(img, button.label, (tx, ty), FONT, 1.2, theme["button_fg"], 2)

    def draw_feedback(self, img):
        """
        Dibuja el mensaje de feedback con fade-out.

        Cada llamada consume un frame del temporizador.
        """
        if self.feedback_timer <= 0:
            return
        self.feedback_timer -= 1
        alpha = min(self.feedback_timer / 10.0, 1.0)
        base = np.array(self.theme["bg"], dtype=np.float64)
        target = np.array(self.theme["highlight"], dtype=np.float64)
        color = tuple(int(c) for c in base + (target - base) * alpha)
        cv2.putText(img, self.feedback_msg, (MARGIN, self.height - 45),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.8, color, 2)

    def draw_help(self, img):
        cv2.putText(img, "ESC/q: salir | t: tema | v: voz", (MARGIN, self.height - 15),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.5, self.theme["help_fg"], 1)

    def render(self, calc, buttons, highlight=None):
        """
        Dibuja un frame completo para el estado actual de la calculadora.

        Args:
            calc (Calculator): Calculadora con el estado a mostrar
            buttons (list[Button]): Botones del teclado
            highlight (str): Etiqueta del botón a resaltar

        Returns:
            np.array: Frame BGR de height x width
        """
        img = self.new_frame()
        self.draw_display(img, calc.get_display(), calc.get_expression(), calc.has_error)
        self.draw_keypad(img, buttons, highlight)
        self.draw_feedback(img)
        self.draw_help(img)
        return img

    def _put_right(self, img, text, right, baseline, scale, color, thickness, max_width):
        """Escribe texto alineado a la derecha, reduciendo la escala si no cabe."""
        (tw, _), _ = cv2.getTextSize(text, FONT, scale, thickness)
        while tw > max_width and scale > 0.4:
            scale -= 0.1
            (tw, _), _ = cv2.getTextSize(text, FONT, scale, thickness)
        cv2.putText(img, text, (right - tw, baseline), FONT, scale, color, thickness)
