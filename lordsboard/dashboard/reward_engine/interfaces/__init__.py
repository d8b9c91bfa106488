"""Core interfaces for the reward calculation system."""

from .member_reward_calculator import MemberRewardCalculator
from .pool_splitter import PoolSplitter

__all__ = [
    "MemberRewardCalculator",
    "PoolSplitter",
]
