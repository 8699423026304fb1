"""
Módulo core con la lógica principal de la aplicación.
Contiene el acumulador de la calculadora, el reloj digital y el menú lateral.
"""

from .calculator import Accumulator, Operator, apply_operation, format_result
from .clock import DigitalClock
from .menu import SlideMenu

__all__ = ['Accumulator', 'Operator', 'apply_operation', 'format_result',
           'DigitalClock', 'SlideMenu']
