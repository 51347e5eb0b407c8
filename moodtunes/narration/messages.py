"""
Motivational messages for MoodTunes narration.
"""
from types import MappingProxyType
from typing import Mapping, Optional

DEFAULT_MESSAGE = (
    "You are exactly where you need to be. Trust your journey, embrace your growth, "
    "and believe in your infinite potential."
)

# Checked in order; the first key found in the mood text wins.
MOTIVATIONAL_MESSAGES: Mapping[str, str] = MappingProxyType({
    'sad': "Every storm runs out of rain. Your brighter days are coming, and you have "
           "the strength to weather this moment.",
    'anxious': "You are braver than you believe, stronger than you seem, and more capable "
               "than you imagine. Take it one breath at a time.",
    'stressed': "In the midst of chaos, find your calm. You've overcome challenges before, "
                "and you will overcome this too.",
    'tired': "Rest is not a luxury, it's a necessity. Give yourself permission to pause, "
             "recharge, and rise again.",
    'angry': "Your emotions are valid, but they don't define you. Channel this energy into "
             "positive change and growth.",
    'lonely': "You are never truly alone. Your worth isn't measured by others' presence, "
              "but by the light you carry within.",
    'hopeful': "Hope is the thing with feathers that perches in your soul. Keep nurturing "
               "that beautiful optimism within you.",
    'happy': "Your joy is contagious and your light brightens the world. Embrace this "
             "beautiful moment and let it fuel your dreams.",
})


class MotivationalMessages:
    """Picks a canned motivational message for a mood description."""

    def __init__(self, messages: Optional[Mapping[str, str]] = None,
                 default: str = DEFAULT_MESSAGE):
        self.messages = messages if messages is not None else MOTIVATIONAL_MESSAGES
        self.default = default

    def for_mood(self, mood: str) -> str:
        mood_lower = mood.lower()
        for key, message in self.messages.items():
            if key in mood_lower:
                return message
        return self.default
