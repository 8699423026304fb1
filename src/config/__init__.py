"""
Módulo de configuración de la calculadora.
Contiene la clase de configuración de ventana, voz y preferencias.
"""

from .settings import AppConfig

__all__ = ['AppConfig']
