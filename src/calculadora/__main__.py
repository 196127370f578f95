"""Permite ejecutar `python -m calculadora`."""

from calculadora.cli import main

main()
