"""Data models for the reward calculation system."""

from .tribe import Player, Tribe, TribePrize
from .achievement import AchievementEntry
from .reward_record import PlayerRewardRecord, AchievementRewardRecord, EqualSplitRewardRecord
from .reward_config import RewardConfig
from .social_export import SocialExport

__all__ = [
    "Player",
    "Tribe",
    "TribePrize",
    "AchievementEntry",
    "PlayerRewardRecord",
    "AchievementRewardRecord",
    "EqualSplitRewardRecord",
    "RewardConfig",
    "SocialExport",
]
