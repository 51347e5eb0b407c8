"""
Mood synonym table.

Each canonical mood maps to the words treated as equivalent to it when
matching a track's mood tag against free text.
"""
from types import MappingProxyType
from typing import Mapping, Tuple

MOOD_SYNONYMS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    'anxious': ('worried', 'nervous', 'stressed', 'tense', 'uneasy', 'restless'),
    'calm': ('peaceful', 'relaxed', 'serene', 'tranquil', 'quiet', 'still'),
    'happy': ('joyful', 'cheerful', 'upbeat', 'positive', 'excited', 'elated'),
    'sad': ('melancholy', 'down', 'blue', 'depressed', 'gloomy', 'sorrowful'),
    'energetic': ('active', 'dynamic', 'vibrant', 'lively', 'pumped', 'vigorous'),
    'tired': ('exhausted', 'weary', 'sleepy', 'drained', 'fatigued', 'worn'),
    'hopeful': ('optimistic', 'positive', 'encouraging', 'uplifting', 'inspiring'),
    'romantic': ('loving', 'passionate', 'intimate', 'tender', 'affectionate'),
    'focused': ('concentrated', 'determined', 'motivated', 'driven', 'productive'),
    'nostalgic': ('reminiscent', 'wistful', 'sentimental', 'reflective', 'longing'),
})
