"""
Módulo de feedback por voz.
"""

from .feedback import VoiceFeedback

__all__ = ['VoiceFeedback']
