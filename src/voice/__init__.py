"""
Módulo de síntesis de voz.
Lee en voz alta las teclas pulsadas y los resultados.
"""

from .feedback import VoiceFeedback

__all__ = ['VoiceFeedback']
