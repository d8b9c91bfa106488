"""Tribe roster models parsed from the social export."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class TribePrize:
    """LORDS/STRK allotment a tribe won for its final rank."""
    lords: float = 0.0
    strk: float = 0.0

    def __post_init__(self):
        if self.lords < 0 or self.strk < 0:
            raise ValueError(f"Prize amounts must be non-negative, got {self.lords}/{self.strk}")

    @classmethod
    def from_dict(cls, data: dict) -> 'TribePrize':
        return cls(lords=float(data.get('lords', 0.0)), strk=float(data.get('strk', 0.0)))

    def to_dict(self) -> dict:
        return {'lords': self.lords, 'strk': self.strk}


@dataclass
class Player:
    """
    Tribe member with season points.

    Building counts are carried through for display only and never enter
    the reward computation.
    """
    address: str
    name: str
    points: float
    is_owner: bool = False
    realms: int = 0
    mines: int = 0
    hyperstructures: int = 0
    villages: int = 0
    banks: int = 0

    def __post_init__(self):
        """Validation after initialization."""
        if not self.address:
            raise ValueError("Player address cannot be empty")

        if self.points < 0:
            raise ValueError(f"Points must be non-negative, got {self.points}")

    @classmethod
    def from_dict(cls, data: dict) -> 'Player':
        """
        Create Player from a social export member entry.

        Raises:
            ValueError: If required fields are missing or invalid
        """
        if 'address' not in data:
            raise ValueError("Member entry missing 'address'")

        return cls(
            address=data['address'],
            name=data.get('name') or '',
            points=float(data.get('points', 0)),
            is_owner=bool(data.get('isOwner', False)),
            realms=int(data.get('realms', 0)),
            mines=int(data.get('mines', 0)),
            hyperstructures=int(data.get('hyperstructures', 0)),
            villages=int(data.get('villages', 0)),
            banks=int(data.get('banks', 0)),
        )

    def to_dict(self) -> dict:
        return {
            'address': self.address,
            'name': self.name,
            'isOwner': self.is_owner,
            'points': self.points,
            'realms': self.realms,
            'mines': self.mines,
            'hyperstructures': self.hyperstructures,
            'villages': self.villages,
            'banks': self.banks,
        }


@dataclass
class Tribe:
    """Ranked team of players sharing one prize."""
    name: str
    rank: int
    prize: TribePrize = field(default_factory=TribePrize)
    members: List[Player] = field(default_factory=list)
    entity_id: str = ""
    is_public: bool = False

    def __post_init__(self):
        if self.rank < 1:
            raise ValueError(f"Tribe rank must be positive, got {self.rank}")

    @property
    def total_points(self) -> float:
        """Sum of member points, the denominator for member shares."""
        return sum(member.points for member in self.members)

    @property
    def owners(self) -> List[Player]:
        """Members flagged as owner, in roster order."""
        return [m for m in self.members if m.is_owner]

    @property
    def owner(self) -> Optional[Player]:
        """First flagged owner, the one paid the owner bonus; None if nobody is flagged."""
        owners = self.owners
        return owners[0] if owners else None

    @classmethod
    def from_dict(cls, data: dict, members: List[Player] = None) -> 'Tribe':
        """
        Create Tribe from a social export entry.

        ``members`` may be passed pre-parsed so the caller can skip malformed
        member entries individually.
        """
        if 'rank' not in data:
            raise ValueError("Tribe entry missing 'rank'")

        if members is None:
            members = [Player.from_dict(m) for m in data.get('members', [])]

        return cls(
            name=data.get('name') or '',
            rank=int(data['rank']),
            prize=TribePrize.from_dict(data.get('prize') or {}),
            members=members,
            entity_id=str(data.get('entityId', '')),
            is_public=bool(data.get('isPublic', False)),
        )

    def to_dict(self) -> dict:
        return {
            'entityId': self.entity_id,
            'name': self.name,
            'rank': self.rank,
            'isPublic': self.is_public,
            'totalPoints': self.total_points,
            'memberCount': len(self.members),
            'prize': self.prize.to_dict(),
            'members': [m.to_dict() for m in self.members],
        }
