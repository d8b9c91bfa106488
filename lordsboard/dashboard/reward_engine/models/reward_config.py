"""Policy constants for a reward season."""

from dataclasses import dataclass, field
from typing import Dict

from lordsboard.dashboard.utils.config import (
    RANK_PRIZE_PERCENTAGES,
    MEMBER_POOL_SHARE,
    OWNER_BONUS_SHARE,
    CARTRIDGE_LORDS_POOL,
    DAYDREAMS_STRK_POOL,
    DAYDREAMS_ACHIEVEMENT_ID,
)
from lordsboard.dashboard.utils.error_handling import log_and_raise_config_error


@dataclass(frozen=True)
class RewardConfig:
    """
    Split ratios, rank prize table and pool sizes for one season or event.

    Defaults come from the environment-driven config module; pass an explicit
    instance to compute rewards for a different season.
    """
    member_pool_share: float = MEMBER_POOL_SHARE
    owner_bonus_share: float = OWNER_BONUS_SHARE
    rank_prize_percentages: Dict[int, float] = field(
        default_factory=lambda: dict(RANK_PRIZE_PERCENTAGES)
    )
    cartridge_lords_pool: float = CARTRIDGE_LORDS_POOL
    daydreams_strk_pool: float = DAYDREAMS_STRK_POOL
    daydreams_achievement_id: str = DAYDREAMS_ACHIEVEMENT_ID

    def __post_init__(self):
        """Validation after initialization."""
        for key in ('member_pool_share', 'owner_bonus_share', 'cartridge_lords_pool', 'daydreams_strk_pool'):
            if getattr(self, key) < 0:
                log_and_raise_config_error(f"{key} must be non-negative", key.upper(), getattr(self, key))

        if self.member_pool_share + self.owner_bonus_share > 1.0 + 1e-9:
            log_and_raise_config_error(
                f"Member share ({self.member_pool_share}) and owner bonus "
                f"({self.owner_bonus_share}) exceed the tribe prize",
                "MEMBER_POOL_SHARE",
                self.member_pool_share,
            )

        if any(pct < 0 for pct in self.rank_prize_percentages.values()):
            log_and_raise_config_error(
                "Rank prize percentages must be non-negative",
                "RANK_PRIZE_PERCENTAGES",
                self.rank_prize_percentages,
            )

        if sum(self.rank_prize_percentages.values()) > 100.0 + 1e-9:
            log_and_raise_config_error(
                "Rank prize percentages exceed 100%",
                "RANK_PRIZE_PERCENTAGES",
                self.rank_prize_percentages,
            )

    def rank_percentage(self, rank: int) -> float:
        """Percent of the season pool for ``rank``; 0 outside the table."""
        return self.rank_prize_percentages.get(rank, 0.0)
