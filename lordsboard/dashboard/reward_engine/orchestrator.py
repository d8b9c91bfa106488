"""Runs the reward pipelines over loaded datasets."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import bittensor as bt

from lordsboard.dashboard.utils.error_handling import safe_operation
from .services.member_reward_service import MemberRewardService
from .services.achievement_reward_service import AchievementRewardService, select_qualifying_addresses
from .services.prize_allocation import allocate_tribe_prizes
from .models.reward_config import RewardConfig
from .models.social_export import SocialExport
from .models.achievement import AchievementEntry
from .models.reward_record import (
    PlayerRewardRecord,
    AchievementRewardRecord,
    EqualSplitRewardRecord,
)


@dataclass
class RewardsReport:
    """All reward records for one season, plus pool totals."""
    victory: List[PlayerRewardRecord] = field(default_factory=list)
    cartridge: List[AchievementRewardRecord] = field(default_factory=list)
    daydreams: List[EqualSplitRewardRecord] = field(default_factory=list)
    total_prize_lords: float = 0.0
    total_prize_strk: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totals": {
                "totalLords": self.total_prize_lords,
                "totalStrk": self.total_prize_strk,
                "victoryLords": sum(r.total_lords_reward for r in self.victory),
                "victoryStrk": sum(r.total_strk_reward for r in self.victory),
                "cartridgeLords": sum(r.lords_reward for r in self.cartridge),
                "daydreamsStrk": sum(r.reward for r in self.daydreams),
            },
            "victory": [r.to_dict() for r in self.victory],
            "cartridge": [r.to_dict() for r in self.cartridge],
            "daydreams": [r.to_dict() for r in self.daydreams],
        }


class RewardsOrchestrator:
    """
    Coordinates the victory, cartridge and daydreams reward pipelines.

    The pipelines are independent: a failure in one is logged and yields an
    empty list for that pipeline without affecting the others.
    """

    def __init__(
        self,
        config: RewardConfig = None,
        member_rewards: MemberRewardService = None,
        pool_splitter: AchievementRewardService = None
    ):
        self.config = config or RewardConfig()
        self.member_rewards = member_rewards or MemberRewardService(self.config)
        self.pool_splitter = pool_splitter or AchievementRewardService()

    @safe_operation("Victory reward calculation", default_factory=list)
    def victory_rewards(self, export: SocialExport) -> List[PlayerRewardRecord]:
        return self.member_rewards.compute_member_rewards(export.tribes)

    @safe_operation("Cartridge reward calculation", default_factory=list)
    def cartridge_rewards(self, entries: List[AchievementEntry]) -> List[AchievementRewardRecord]:
        return self.pool_splitter.compute_proportional_rewards(
            entries, self.config.cartridge_lords_pool
        )

    @safe_operation("Daydreams reward calculation", default_factory=list)
    def daydreams_rewards(
        self,
        qualifying_addresses: Optional[List[str]] = None,
        entries: Optional[List[AchievementEntry]] = None
    ) -> List[EqualSplitRewardRecord]:
        """
        Equal split of the daydreams pool.

        Without an explicit qualifier list, qualifiers are the entries that
        completed the configured daydreams achievement.
        """
        if qualifying_addresses is None:
            qualifying_addresses = select_qualifying_addresses(
                entries or [], self.config.daydreams_achievement_id
            )
        return self.pool_splitter.compute_equal_split_rewards(
            qualifying_addresses, self.config.daydreams_strk_pool
        )

    def allocate_prizes(self, export: SocialExport, total_lords: float, total_strk: float) -> SocialExport:
        """Assign every tribe in ``export`` its rank prize under this orchestrator's config."""
        allocate_tribe_prizes(export.tribes, total_lords, total_strk, self.config)
        return export

    def build_report(
        self,
        export: Optional[SocialExport] = None,
        entries: Optional[List[AchievementEntry]] = None,
        qualifying_addresses: Optional[List[str]] = None
    ) -> RewardsReport:
        """Run every pipeline whose input is available."""
        report = RewardsReport()

        if export is not None:
            report.victory = self.victory_rewards(export)
            report.total_prize_lords = export.total_prize_lords
            report.total_prize_strk = export.total_prize_strk

        if entries is not None:
            report.cartridge = self.cartridge_rewards(entries)

        if entries is not None or qualifying_addresses is not None:
            report.daydreams = self.daydreams_rewards(qualifying_addresses, entries)

        bt.logging.info(
            f"✅ Rewards report: {len(report.victory)} victory, "
            f"{len(report.cartridge)} cartridge, {len(report.daydreams)} daydreams"
        )
        return report
