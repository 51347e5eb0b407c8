"""
Narration module for MoodTunes.
"""

from .messages import MotivationalMessages, MOTIVATIONAL_MESSAGES, DEFAULT_MESSAGE

__all__ = ['MotivationalMessages', 'MOTIVATIONAL_MESSAGES', 'DEFAULT_MESSAGE']
