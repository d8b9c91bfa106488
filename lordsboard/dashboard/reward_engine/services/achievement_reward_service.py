"""Distributes the fixed achievement prize pools."""

import math
from typing import Iterable, List

import numpy as np
import bittensor as bt

from ..interfaces.pool_splitter import PoolSplitter
from ..models.achievement import AchievementEntry
from ..models.reward_record import AchievementRewardRecord, EqualSplitRewardRecord


class AchievementRewardService(PoolSplitter):
    """Proportional and equal splits of a fixed pool."""

    def compute_proportional_rewards(
        self,
        entries: List[AchievementEntry],
        pool: float
    ) -> List[AchievementRewardRecord]:
        """
        Split ``pool`` in proportion to each entry's earnings.

        Entries with non-finite or negative earnings are skipped. Returns an
        empty list when no usable entries remain or total earnings is 0.
        """
        entries = self._usable_entries(entries)
        if not entries:
            bt.logging.warning("No achievement entries - returning empty rewards")
            return []

        earnings = np.array([entry.earnings for entry in entries], dtype=np.float64)
        total_earnings = float(np.sum(earnings))

        if total_earnings <= 0:
            bt.logging.warning("Total achievement earnings is 0 - returning empty rewards")
            return []

        fractions = earnings / total_earnings

        records = [
            AchievementRewardRecord(
                address=entry.address,
                earnings=entry.earnings,
                percentage=float(fraction * 100),
                lords_reward=float(fraction * pool),
            )
            for entry, fraction in zip(entries, fractions)
        ]

        bt.logging.info(
            f"🎮 Proportional rewards: {len(records)} players sharing {pool:.2f} "
            f"over {total_earnings:.2f} earned points"
        )
        return records

    def _usable_entries(self, entries: List[AchievementEntry]) -> List[AchievementEntry]:
        usable = []
        for entry in entries:
            try:
                earnings = float(entry.earnings)
            except (TypeError, ValueError):
                earnings = float('nan')
            if math.isfinite(earnings) and earnings >= 0:
                usable.append(entry)
            else:
                bt.logging.warning(f"Skipping {entry.address}: unusable earnings {entry.earnings!r}")
        return usable

    def compute_equal_split_rewards(
        self,
        qualifying_addresses: List[str],
        pool: float
    ) -> List[EqualSplitRewardRecord]:
        """Give every qualifying address ``pool / count``; empty when nobody qualifies."""
        if not qualifying_addresses:
            bt.logging.warning("No qualifying addresses - returning empty rewards")
            return []

        reward_per_entry = pool / len(qualifying_addresses)

        bt.logging.info(
            f"🤖 Equal split: {len(qualifying_addresses)} players x {reward_per_entry:.2f}"
        )
        return [
            EqualSplitRewardRecord(address=address, reward=reward_per_entry)
            for address in qualifying_addresses
        ]


def select_qualifying_addresses(entries: Iterable[AchievementEntry], achievement_id: str) -> List[str]:
    """Addresses that completed ``achievement_id``, in input order."""
    return [entry.address for entry in entries if entry.has_completed(achievement_id)]


def compute_proportional_rewards(
    entries: List[AchievementEntry],
    pool: float
) -> List[AchievementRewardRecord]:
    return AchievementRewardService().compute_proportional_rewards(entries, pool)


def compute_equal_split_rewards(
    qualifying_addresses: List[str],
    pool: float
) -> List[EqualSplitRewardRecord]:
    return AchievementRewardService().compute_equal_split_rewards(qualifying_addresses, pool)
