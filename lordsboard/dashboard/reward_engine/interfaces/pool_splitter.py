"""Abstract interface for fixed prize pool splitting strategies."""

from abc import ABC, abstractmethod
from typing import List


class PoolSplitter(ABC):
    """Abstract interface for distributing a fixed pool across players."""

    @abstractmethod
    def compute_proportional_rewards(
        self,
        entries: List["AchievementEntry"],
        pool: float
    ) -> List["AchievementRewardRecord"]:
        """Split the pool in proportion to each entry's earnings."""
        pass

    @abstractmethod
    def compute_equal_split_rewards(
        self,
        qualifying_addresses: List[str],
        pool: float
    ) -> List["EqualSplitRewardRecord"]:
        """Split the pool evenly across qualifying addresses."""
        pass
