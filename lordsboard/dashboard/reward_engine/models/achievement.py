"""Data model for achievement points entries."""

import math
from dataclasses import dataclass, field
from typing import List, Optional

from lordsboard.dashboard.utils.error_handling import ErrorMessages


@dataclass
class AchievementEntry:
    """Earned achievement points for one address."""
    address: str
    earnings: float
    completed: List[str] = field(default_factory=list)
    timestamp: Optional[int] = None

    def __post_init__(self):
        """Validation after initialization."""
        if not self.address:
            raise ValueError("Achievement entry address cannot be empty")

        if not math.isfinite(self.earnings) or self.earnings < 0:
            raise ValueError(f"{ErrorMessages.NON_FINITE_EARNINGS}, got {self.earnings!r} for {self.address}")

    def has_completed(self, achievement_id: str) -> bool:
        return achievement_id in self.completed

    @classmethod
    def from_dict(cls, data: dict) -> 'AchievementEntry':
        """
        Create AchievementEntry from a points export record.

        Accepts both the ``{address, earnings, completeds}`` layout and the
        legacy ``{player_id, total_points}`` layout.
        """
        address = data.get('address', data.get('player_id'))
        earnings = data.get('earnings', data.get('total_points'))

        if address is None:
            raise ValueError("Achievement entry missing 'address'")
        if earnings is None:
            raise ValueError(f"Achievement entry {address} missing 'earnings'")

        return cls(
            address=address,
            earnings=float(earnings),
            completed=list(data.get('completeds') or []),
            timestamp=data.get('timestamp'),
        )

    def to_dict(self) -> dict:
        return {
            'address': self.address,
            'earnings': self.earnings,
            'completeds': self.completed,
            'timestamp': self.timestamp,
        }
