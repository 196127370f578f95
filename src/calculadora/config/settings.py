"""
Configuración de la aplicación.

Este módulo centraliza las preferencias de ventana, tema, voz y
persistencia. La CLI sobrescribe los valores por defecto.
"""

from pathlib import Path


DEFAULT_STATE_FILE = Path.home() / ".calculadora" / "state.json"


# ============================================================================
# CLASE: AppConfig
# Propósito: Preferencias de la aplicación de escritorio
# Responsabilidades:
#   - Dimensiones y título de la ventana
#   - Tema claro/oscuro
#   - Feedback por voz (volumen, velocidad)
#   - Persistencia del estado entre ejecuciones
# ============================================================================
class AppConfig:
    """Configuración con valores por defecto."""

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # VENTANA
        # ====================================================================
        self.window_title = "Calculadora"
        self.width = 420                # Ancho de la ventana en píxeles
        self.height = 560               # Alto de la ventana en píxeles
        self.dark_mode = True           # Tema oscuro (t para alternar)
        self.frame_delay_ms = 30        # Espera de cv2.waitKey por frame

        # ====================================================================
        # CONFIGURACIÓN DE VOZ
        # ====================================================================
        self.voice_enabled = False      # Activar/desactivar feedback por voz
        self.voice_volume = 0.8         # Volumen (0.0-1.0)
        self.voice_rate = 150           # Velocidad de habla (palabras por minuto)

        # ====================================================================
        # PERSISTENCIA
        # ====================================================================
        self.persist_state = True       # Cargar al iniciar y guardar al salir
        self.state_file = DEFAULT_STATE_FILE

    def toggle_theme(self):
        """Alterna tema claro/oscuro y devuelve el nuevo valor de dark_mode."""
        self.dark_mode = not self.dark_mode
        return self.dark_mode
