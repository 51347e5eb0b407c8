"""
Data schemas for the MoodTunes system.

This module contains dataclasses that define the structure of catalog
records and validation results used throughout the system.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, Any, Optional, List


class EnergyLevel(Enum):
    VERY_LOW = 1
    LOW = 2
    MEDIUM = 3
    HIGH = 4
    VERY_HIGH = 5

    @property
    def label(self) -> str:
        return self.name.lower().replace('_', ' ')

    @classmethod
    def from_label(cls, label: Optional[str]) -> 'EnergyLevel':
        """Map an energy label to its level. Unknown or missing labels are MEDIUM."""
        if label:
            key = label.strip().lower()
            for level in cls:
                if level.label == key:
                    return level
        return cls.MEDIUM


ENERGY_LABELS = tuple(level.label for level in EnergyLevel)


@dataclass(frozen=True)
class Track:
    """A catalog track. Immutable once loaded."""
    id: str
    title: str
    mood: str
    genre: str
    energy: str
    duration: str = ""
    description: str = ""
    audio_url: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the catalog file's field names."""
        data = asdict(self)
        data['audioUrl'] = data.pop('audio_url')
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Track':
        """
        Create a Track from a catalog record.

        Accepts both ``audioUrl`` and ``audio_url``.

        Raises:
            KeyError: If a required field is missing
        """
        audio_url = data.get('audioUrl', data.get('audio_url', ''))
        return cls(
            id=str(data['id']),
            title=str(data['title']),
            mood=str(data['mood']),
            genre=str(data.get('genre') or ''),
            energy=str(data['energy']),
            duration=str(data.get('duration') or ''),
            description=str(data.get('description') or ''),
            audio_url=str(audio_url or '')
        )


@dataclass
class ValidationResult:
    """Result of data validation operations"""
    is_valid: bool
    errors: List[str]
    warnings: List[str]
    metadata: Optional[Dict[str, Any]] = None

    def add_error(self, error: str) -> None:
        """Add an error to the validation result"""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        self.warnings.append(warning)

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        return len(self.warnings) > 0
