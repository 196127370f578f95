"""
CLI de la calculadora.

Comandos:
    calculadora run            Abre la ventana con el teclado en pantalla
    calculadora press "5+6="   Procesa una secuencia de teclas sin ventana
    calculadora reset          Borra el estado guardado
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from calculadora.storage.state_store import StateStore
from calculadora.config.settings import AppConfig
from calculadora.core.calculator import Calculator
from calculadora.core.errors import InvalidKeyError
from calculadora.core.events import parse_sequence

app = typer.Typer(
    name="calculadora",
    help="Calculadora aritmética básica con teclado en pantalla",
    no_args_is_help=True,
)

console = Console()


def configure_logging(verbose: bool):
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=log_level, format="%(name)s: %(message)s")


@app.command()
def run(
    dark: bool = typer.Option(True, "--dark/--light", help="Tema inicial"),
    voice: bool = typer.Option(False, "--voice/--no-voice", help="Feedback por voz"),
    persist: bool = typer.Option(True, "--persist/--no-persist", help="Guardar el estado al salir"),
    state_file: Optional[Path] = typer.Option(None, "--state-file", help="Archivo de estado"),
    width: int = typer.Option(420, "--width", min=320, help="Ancho de la ventana"),
    height: int = typer.Option(560, "--height", min=480, help="Alto de la ventana"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Logs de depuración"),
):
    """
    Abre la calculadora en una ventana de OpenCV.

    Controles: 0-9 + - * x / = Enter c | t: tema | v: voz | ESC/q: salir
    """
    configure_logging(verbose)
    # Importación diferida: press no necesita OpenCV
    from calculadora.app.calculator_app import CalculatorApp

    config = AppConfig()
    config.dark_mode = dark
    config.voice_enabled = voice
    config.persist_state = persist
    config.width = width
    config.height = height
    if state_file is not None:
        config.state_file = state_file

    try:
        CalculatorApp(config).run()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrumpido por el usuario[/yellow]")


@app.command()
def press(
    sequence: str = typer.Argument(..., help='Teclas a pulsar, ej: "5+6=" (c borra)'),
    state_file: Optional[Path] = typer.Option(
        None, "--state-file", help="Cargar el estado antes y guardarlo después"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Logs de depuración"),
):
    """
    Pulsa una secuencia de teclas y muestra el display resultante.

    Sale con código 1 si la calculadora termina en estado de error.
    """
    configure_logging(verbose)
    try:
        events = parse_sequence(sequence)
    except InvalidKeyError as e:
        raise typer.BadParameter(str(e), param_hint="SEQUENCE")

    store = StateStore(state_file) if state_file is not None else None
    calc = Calculator(store.load() if store else None)
    for event in events:
        calc.press(event)

    secondary = calc.get_expression().strip()
    if secondary:
        console.print(secondary, style="dim", markup=False, soft_wrap=True)
    # soft_wrap: el display sale en una sola línea aunque supere el ancho
    console.print(
        calc.get_display(),
        style="bold red" if calc.has_error else "bold",
        markup=False,
        soft_wrap=True,
    )

    if store is not None:
        store.save(calc.state)
    if calc.has_error:
        raise typer.Exit(code=1)


@app.command()
def reset(
    state_file: Optional[Path] = typer.Option(None, "--state-file", help="Archivo de estado"),
):
    """Borra el estado guardado; la próxima ejecución empieza en 0."""
    store = StateStore(state_file if state_file is not None else AppConfig().state_file)
    store.delete()
    console.print(f"Estado borrado: {store.path}", markup=False, soft_wrap=True)


def main():
    app()


if __name__ == "__main__":
    main()
