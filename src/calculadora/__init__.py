"""
Calculadora aritmética básica dirigida por una máquina de estados.

Paquetes:
    - core: Motor de la calculadora (estado, operadores, transiciones, display)
    - ui: Teclado en pantalla y renderizado con OpenCV
    - voice: Feedback por voz opcional
    - app: Aplicación de escritorio
    - storage: Persistencia del estado entre ejecuciones
    - config: Configuración de la aplicación
"""

__version__ = "1.0.0"
