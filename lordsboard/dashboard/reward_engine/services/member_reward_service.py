"""Splits each tribe's victory prize between its members and its owner."""

import math
from typing import List, Optional, Tuple

import numpy as np
import bittensor as bt

from ..interfaces.member_reward_calculator import MemberRewardCalculator
from ..models.tribe import Tribe, Player
from ..models.reward_record import PlayerRewardRecord
from ..models.reward_config import RewardConfig


class MemberRewardService(MemberRewardCalculator):
    """
    Default victory prize split.

    ``member_pool_share`` of the tribe prize is divided among all members in
    proportion to their points; ``owner_bonus_share`` goes to the owner on
    top of their own member share. LORDS and STRK are split independently.
    """

    def __init__(self, config: Optional[RewardConfig] = None):
        self.config = config or RewardConfig()

    def compute_member_rewards(self, tribes: List[Tribe]) -> List[PlayerRewardRecord]:
        """Compute reward records for every member of every tribe."""
        records: List[PlayerRewardRecord] = []

        for tribe in tribes:
            tribe_records = self._compute_tribe_rewards(tribe)
            records.extend(tribe_records)

            bt.logging.debug(
                f"Tribe '{tribe.name}' (rank {tribe.rank}): {len(tribe_records)} members, "
                f"prize {tribe.prize.lords:.2f} LORDS / {tribe.prize.strk:.2f} STRK"
            )

        total_lords = sum(r.total_lords_reward for r in records)
        total_strk = sum(r.total_strk_reward for r in records)
        bt.logging.info(
            f"🏆 Victory rewards: {len(records)} players across {len(tribes)} tribes, "
            f"{total_lords:.2f} LORDS / {total_strk:.2f} STRK"
        )
        return records

    def _compute_tribe_rewards(self, tribe: Tribe) -> List[PlayerRewardRecord]:
        members, points = self._valid_member_points(tribe)
        if not members:
            return []

        points_array = np.array(points, dtype=np.float64)
        total_tribe_points = float(np.sum(points_array))

        if total_tribe_points > 0:
            shares = points_array / total_tribe_points
        else:
            bt.logging.warning(f"Tribe '{tribe.name}' has zero total points - member shares set to 0")
            shares = np.zeros_like(points_array)

        member_pool_lords = self.config.member_pool_share * tribe.prize.lords
        member_pool_strk = self.config.member_pool_share * tribe.prize.strk
        owner = self._bonus_owner(tribe, members)

        records = []
        for member, member_points, share in zip(members, points, shares):
            try:
                records.append(self._build_record(
                    tribe, member, member_points, float(share),
                    member_pool_lords, member_pool_strk,
                    is_bonus_owner=member is owner,
                ))
            except Exception as e:
                bt.logging.warning(f"Skipping reward for {member.address} in '{tribe.name}': {e}")

        return records

    def _build_record(
        self,
        tribe: Tribe,
        member: Player,
        member_points: float,
        points_share: float,
        member_pool_lords: float,
        member_pool_strk: float,
        is_bonus_owner: bool,
    ) -> PlayerRewardRecord:
        member_share_lords = points_share * member_pool_lords
        member_share_strk = points_share * member_pool_strk

        if is_bonus_owner:
            owner_bonus_lords = self.config.owner_bonus_share * tribe.prize.lords
            owner_bonus_strk = self.config.owner_bonus_share * tribe.prize.strk
        else:
            owner_bonus_lords = 0.0
            owner_bonus_strk = 0.0

        return PlayerRewardRecord(
            address=member.address,
            name=member.name,
            tribe_name=tribe.name,
            tribe_rank=tribe.rank,
            is_owner=member.is_owner,
            points=member_points,
            points_share=points_share,
            member_share_lords=member_share_lords,
            member_share_strk=member_share_strk,
            owner_bonus_lords=owner_bonus_lords,
            owner_bonus_strk=owner_bonus_strk,
            total_lords_reward=member_share_lords + owner_bonus_lords,
            total_strk_reward=member_share_strk + owner_bonus_strk,
        )

    def _valid_member_points(self, tribe: Tribe) -> Tuple[List[Player], List[float]]:
        """Members whose points are usable, paired with their points as floats."""
        members, points = [], []
        for member in tribe.members:
            try:
                member_points = float(member.points)
                if member_points < 0 or not math.isfinite(member_points):
                    raise ValueError(f"invalid points {member.points!r}")
            except (TypeError, ValueError) as e:
                bt.logging.warning(f"Skipping member {member.address} in '{tribe.name}': {e}")
                continue
            members.append(member)
            points.append(member_points)
        return members, points

    def _bonus_owner(self, tribe: Tribe, members: List[Player]) -> Optional[Player]:
        """``tribe.owner`` if it survived point validation; the bonus is paid once per tribe."""
        if len(tribe.owners) > 1:
            bt.logging.warning(
                f"Tribe '{tribe.name}' has {len(tribe.owners)} owners - bonus paid to {tribe.owner.address} only"
            )

        owner = tribe.owner
        if owner is not None and not any(m is owner for m in members):
            bt.logging.warning(f"Owner {owner.address} of '{tribe.name}' was skipped - no owner bonus paid")
            return None
        return owner


def compute_member_rewards(
    tribes: List[Tribe],
    config: Optional[RewardConfig] = None
) -> List[PlayerRewardRecord]:
    """Compute victory rewards for all tribe members."""
    return MemberRewardService(config).compute_member_rewards(tribes)
