"""
Módulo de interfaz de usuario.
Contiene el renderizador OpenCV de la calculadora, el reloj y el menú.
"""

from .renderer import UIRenderer

__all__ = ['UIRenderer']
