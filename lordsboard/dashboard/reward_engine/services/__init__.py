"""Core services for the reward calculation system."""

from .member_reward_service import MemberRewardService, compute_member_rewards
from .achievement_reward_service import (
    AchievementRewardService,
    compute_proportional_rewards,
    compute_equal_split_rewards,
    select_qualifying_addresses,
)
from .prize_allocation import allocate_tribe_prize, allocate_tribe_prizes

__all__ = [
    "MemberRewardService",
    "compute_member_rewards",
    "AchievementRewardService",
    "compute_proportional_rewards",
    "compute_equal_split_rewards",
    "select_qualifying_addresses",
    "allocate_tribe_prize",
    "allocate_tribe_prizes",
]
