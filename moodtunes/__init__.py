"""
MoodTunes: pick a track from a fixed catalog for a free-text mood.
"""

__version__ = "1.0.0"
