"""Data model for the tribe roster export."""

from dataclasses import dataclass, field
from typing import List, Optional

from .tribe import Tribe


@dataclass
class SocialExport:
    """Parsed tribe roster export."""
    timestamp: Optional[str] = None
    total_players: int = 0
    total_tribes: int = 0
    tribes: List[Tribe] = field(default_factory=list)

    @property
    def total_prize_lords(self) -> float:
        return sum(tribe.prize.lords for tribe in self.tribes)

    @property
    def total_prize_strk(self) -> float:
        return sum(tribe.prize.strk for tribe in self.tribes)
