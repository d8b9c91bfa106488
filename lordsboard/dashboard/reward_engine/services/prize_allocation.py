"""Rank-based allocation of the season prize pool to tribes."""

from typing import List, Optional
import bittensor as bt

from ..models.reward_config import RewardConfig
from ..models.tribe import Tribe, TribePrize


def allocate_tribe_prize(
    rank: int,
    total_lords: float,
    total_strk: float,
    config: Optional[RewardConfig] = None
) -> TribePrize:
    """
    Allocate a tribe's share of the season pool from its final rank.

    Args:
        rank: Final tribe rank (1 = best)
        total_lords: Season LORDS pool
        total_strk: Season STRK pool
        config: Policy holding the rank -> percent table (default RewardConfig())

    Returns:
        TribePrize; zero for ranks outside the table
    """
    percentage = (config or RewardConfig()).rank_percentage(rank)

    return TribePrize(
        lords=total_lords * percentage / 100,
        strk=total_strk * percentage / 100,
    )


def allocate_tribe_prizes(
    tribes: List[Tribe],
    total_lords: float,
    total_strk: float,
    config: Optional[RewardConfig] = None
) -> List[Tribe]:
    """
    Assign each tribe its rank-based prize in place.

    Returns the same list for chaining.
    """
    config = config or RewardConfig()
    allocated_lords = 0.0
    for tribe in tribes:
        tribe.prize = allocate_tribe_prize(tribe.rank, total_lords, total_strk, config)
        allocated_lords += tribe.prize.lords

    prized = sum(1 for t in tribes if t.prize.lords > 0 or t.prize.strk > 0)
    bt.logging.info(
        f"Allocated {allocated_lords:.2f}/{total_lords:.2f} LORDS to {prized} of {len(tribes)} tribes"
    )
    return tribes
