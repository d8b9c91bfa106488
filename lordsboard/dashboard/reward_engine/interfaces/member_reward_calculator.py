"""Abstract interface for tribe member reward strategies."""

from abc import ABC, abstractmethod
from typing import List


class MemberRewardCalculator(ABC):
    """Abstract interface for splitting tribe prizes among members."""

    @abstractmethod
    def compute_member_rewards(
        self,
        tribes: List["Tribe"]
    ) -> List["PlayerRewardRecord"]:
        """Compute one reward record per tribe member."""
        pass
