"""
Aplicación de escritorio que integra todos los componentes.

Este módulo contiene la clase CalculatorApp: ventana de OpenCV, entrada por
teclado y ratón, feedback por voz y persistencia del estado.
"""

import logging

import cv2

from ..config.settings import AppConfig
from ..core.calculator import Calculator
from ..core.events import Clear, Digit, OperatorPress
from ..core.operators import Operator
from ..ui.keypad import build_keypad, event_from_key, hit_test, label_for
from ..ui.renderer import UIRenderer
from ..voice.feedback import VoiceFeedback
from ..storage.state_store import StateStore

logger = logging.getLogger(__name__)

KEY_ESC = 27
HIGHLIGHT_FRAMES = 8

OPERATION_FEEDBACK = {
    Operator.ADD: "+ SUMA",
    Operator.SUBTRACT: "- RESTA",
    Operator.MULTIPLY: "x MULTIPLICAR",
    Operator.DIVIDE: "/ DIVIDIR",
}


# ============================================================================
class CalculatorApp:
    """
    Aplicación principal de la calculadora.

    Arquitectura:
        - Calculator: Motor y dueño del estado
        - UIRenderer: Renderizado del display y el teclado
        - VoiceFeedback: Anuncios por voz (opcional)
        - StateStore: Carga y guardado del estado (opcional)
        - CalculatorApp: Coordinador y bucle principal

    La ventana solo se crea en run(), de modo que process(), handle_key()
    y handle_click() se pueden usar sin pantalla.
    """

    def __init__(self, config=None, store=None):
        """
        Args:
            config (AppConfig): Configuración (opcional)
            store (StateStore): Persistencia. Si es None y la configuración
                lo permite, se usa config.state_file.
        """
        self.config = config if config else AppConfig()
        if store is None and self.config.persist_state:
            store = StateStore(self.config.state_file)
        self.store = store

        state = self.store.load() if self.store else None
        self.calc = Calculator(state)
        self.ui = UIRenderer(self.config.width, self.config.height, self.config)
        self.voice = VoiceFeedback(self.config)
        self.buttons = build_keypad(*self.ui.keypad_area())

        self.highlight = None      # Etiqueta del último botón pulsado
        self.highlight_timer = 0   # Frames restantes de resaltado

    def process(self, event):
        """
        Envía un evento a la calculadora y actualiza el feedback.

        Feedback:
            - Dígito: "OK 5"
            - Operador: nombre de la operación, o "= resultado" tras evaluar
            - C: "TODO BORRADO"
            - Error: el mensaje de error
        """
        primary, _ = self.calc.press(event)
        self.highlight = label_for(event)
        self.highlight_timer = HIGHLIGHT_FRAMES

        if self.calc.has_error:
            self.ui.show_feedback(primary)
        elif isinstance(event, Digit):
            self.ui.show_feedback(f"OK {event.value}")
        elif isinstance(event, Clear):
            self.ui.show_feedback("TODO BORRADO")
        elif isinstance(event, OperatorPress):
            if self.calc.has_result:
                self.ui.show_feedback(f"= {primary}", duration=60)
            else:
                self.ui.show_feedback(OPERATION_FEEDBACK.get(event.operator, "="))

        self.voice.announce(event, self.calc)

    def handle_key(self, key):
        """
        Procesa una tecla de cv2.waitKey.

        Controles:
            - 0-9, + - * x / = Enter, c: botones de la calculadora
            - t: alternar tema claro/oscuro
            - v: activar/desactivar voz
            - ESC o q: salir

        Returns:
            bool: False si la aplicación debe terminar
        """
        if key in (KEY_ESC, ord('q')):
            return False

        if key == ord('t'):
            dark = self.config.toggle_theme()
            self.ui.show_feedback("TEMA OSCURO" if dark else "TEMA CLARO")
        elif key == ord('v'):
            self.toggle_voice()
        else:
            event = event_from_key(key)
            if event is not None:
                self.process(event)
        return True

    def handle_click(self, x, y):
        """Pulsa el botón bajo (x, y), si lo hay."""
        button = hit_test(self.buttons, x, y)
        if button is not None:
            self.process(button.event)

    def toggle_voice(self):
        """Activa o desactiva la voz; devuelve el nuevo estado."""
        enabled = not self.config.voice_enabled
        self.config.voice_enabled = enabled
        if enabled and not self.voice.ensure_engine():
            self.ui.show_feedback("VOZ NO DISPONIBLE")
            return False
        self.ui.show_feedback("VOZ ACTIVADA" if enabled else "VOZ DESACTIVADA")
        if enabled:
            self.voice.speak("voz activada")
        return enabled

    def frame(self):
        """Dibuja el frame actual y avanza el temporizador de resaltado."""
        highlight = self.highlight if self.highlight_timer > 0 else None
        if self.highlight_timer > 0:
            self.highlight_timer -= 1
        return self.ui.render(self.calc, self.buttons, highlight)

    def save_state(self):
        if self.store is None:
            return
        try:
            self.store.save(self.calc.state)
        except OSError as e:
            logger.error("No se pudo guardar el estado en %s: %s", self.store.path, e)

    def _on_mouse(self, event, x, y, flags, param):
        if event == cv2.EVENT_LBUTTONDOWN:
            self.handle_click(x, y)

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Dibujar frame con el estado actual
            2. Mostrar frame y esperar tecla (los clics llegan por callback)
            3. Procesar tecla
            4. Repetir hasta ESC, 'q' o cierre de la ventana

        Al salir guarda el estado si la persistencia está activa.
        """
        title = self.config.window_title
        cv2.namedWindow(title, cv2.WINDOW_AUTOSIZE)
        cv2.setMouseCallback(title, self._on_mouse)
        logger.info("Calculadora iniciada (%dx%d)", self.config.width, self.config.height)

        try:
            while True:
                cv2.imshow(title, self.frame())
                key = cv2.waitKey(self.config.frame_delay_ms) & 0xFF
                if key != 0xFF and not self.handle_key(key):
                    break
                # Ventana cerrada con el botón del gestor de ventanas
                if cv2.getWindowProperty(title, cv2.WND_PROP_VISIBLE) < 1:
                    break
        finally:
            self.save_state()
            cv2.destroyAllWindows()
            logger.info("Aplicación cerrada")
