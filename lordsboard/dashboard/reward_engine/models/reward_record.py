"""Data models for computed reward records."""

from typing import Dict, Any
from dataclasses import dataclass


@dataclass
class PlayerRewardRecord:
    """
    Victory prize owed to one tribe member.

    ``points_share`` is the member's fraction of the tribe's total points.
    Member share and owner bonus are tracked separately per currency so the
    breakdown can be displayed alongside the totals.
    """
    address: str
    name: str
    tribe_name: str
    tribe_rank: int
    is_owner: bool
    points: float
    points_share: float
    member_share_lords: float
    member_share_strk: float
    owner_bonus_lords: float
    owner_bonus_strk: float
    total_lords_reward: float
    total_strk_reward: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "address": self.address,
            "name": self.name,
            "tribeName": self.tribe_name,
            "tribeRank": self.tribe_rank,
            "isOwner": self.is_owner,
            "points": self.points,
            "pointsShare": self.points_share,
            "rewards": {
                "memberShare": self.member_share_lords,
                "memberShareStrk": self.member_share_strk,
                "ownerBonus": self.owner_bonus_lords,
                "ownerBonusStrk": self.owner_bonus_strk,
            },
            "totalLordsReward": self.total_lords_reward,
            "totalStrkReward": self.total_strk_reward,
        }


@dataclass
class AchievementRewardRecord:
    """Proportional share of the achievement pool."""
    address: str
    earnings: float
    percentage: float
    lords_reward: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "address": self.address,
            "earnings": self.earnings,
            "percentage": self.percentage,
            "lordsReward": self.lords_reward,
        }


@dataclass
class EqualSplitRewardRecord:
    """Fixed per-capita reward from an equally split pool."""
    address: str
    reward: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "address": self.address,
            "reward": self.reward,
        }
