"""
Módulo de la aplicación principal.
Contiene la clase que conecta el acumulador, el reloj y el menú con la ventana.
"""

from .calculator_app import CalculatorApp

__all__ = ['CalculatorApp']
