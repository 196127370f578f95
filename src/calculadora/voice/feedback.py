"""
Sistema de feedback por voz usando pyttsx3.

Anuncia los botones pulsados y los resultados. La síntesis se ejecuta en
un hilo aparte para no bloquear el bucle de la ventana.
"""

import logging
import threading
from collections import deque

import pyttsx3

from ..core.display import format_number
from ..core.events import Clear, Digit, OperatorPress
from ..core.operators import Operator

logger = logging.getLogger(__name__)

NUMBERS_ES = {
    0: "cero", 1: "uno", 2: "dos", 3: "tres", 4: "cuatro",
    5: "cinco", 6: "seis", 7: "siete", 8: "ocho", 9: "nueve",
}

OPERATIONS_ES = {
    Operator.ADD: "más",
    Operator.SUBTRACT: "menos",
    Operator.MULTIPLY: "por",
    Operator.DIVIDE: "dividido",
}


def describe_result(value):
    """Texto hablado para un resultado (ej: 2.5 → "igual a 2 coma 5")."""
    return "igual a " + format_number(value).replace(".", " coma ").replace("-", "menos ")


# ============================================================================
# CLASE: VoiceFeedback
# Propósito: Síntesis de voz para feedback auditivo
# Responsabilidades:
#   - Traducir eventos de botón y resultados a frases en español
#   - Ejecutar en hilo separado para no bloquear la UI
#   - Gestionar cola de mensajes para evitar solapamiento
# ============================================================================
class VoiceFeedback:
    """
    Feedback por voz con cola de mensajes.

    Si pyttsx3 no encuentra un motor de voz en el sistema, la voz queda
    desactivada en la configuración y la aplicación sigue funcionando.
    """

    def __init__(self, config):
        """
        Args:
            config (AppConfig): Configuración (voice_enabled, volumen, velocidad)
        """
        self.config = config
        self.engine = None
        self.is_speaking = False
        self.message_queue = deque(maxlen=5)  # Cola de máximo 5 mensajes
        self._lock = threading.Lock()

        if self.config.voice_enabled:
            self.ensure_engine()

    def ensure_engine(self):
        """
        Inicializa el motor de voz si aún no existe.

        Returns:
            bool: True si hay motor disponible. Si falla, desactiva la voz.
        """
        if self.engine is not None:
            return True
        try:
            self.engine = pyttsx3.init()
            self.engine.setProperty('volume', self.config.voice_volume)
            self.engine.setProperty('rate', self.config.voice_rate)
            logger.info("Sistema de voz inicializado")
        except Exception as e:
            logger.warning("No se pudo inicializar el sistema de voz: %s", e)
            self.engine = None
            self.config.voice_enabled = False
        return self.engine is not None

    def speak(self, text):
        """
        Encola un mensaje y arranca el hilo de reproducción si está parado.
        """
        if not text or not self.config.voice_enabled or not self.engine:
            return

        self.message_queue.append(text)
        with self._lock:
            if self.is_speaking:
                return
            self.is_speaking = True
        threading.Thread(target=self._process_queue, daemon=True).start()

    def _process_queue(self):
        """Procesa la cola de mensajes uno por uno."""
        while True:
            with self._lock:
                if not self.message_queue:
                    self.is_speaking = False
                    return
                message = self.message_queue.popleft()
            try:
                self.engine.say(message)
                self.engine.runAndWait()
            except Exception as e:
                logger.warning("Error al reproducir voz: %s", e)

    def announce(self, event, calc):
        """
        Anuncia una pulsación ya procesada por la calculadora.

        Args:
            event (ButtonEvent): Evento pulsado
            calc (Calculator): Calculadora tras procesar el evento
        """
        self.speak(self.phrase_for(event, calc))

    @staticmethod
    def phrase_for(event, calc):
        """Frase en español para un evento y el estado resultante."""
        if calc.has_error:
            return "error"
        if isinstance(event, Digit):
            return NUMBERS_ES[event.value]
        if isinstance(event, Clear):
            return "todo borrado"
        if isinstance(event, OperatorPress):
            if calc.has_result:
                return describe_result(calc.state.answer)
            return OPERATIONS_ES.get(event.operator, "igual")
        return ""
