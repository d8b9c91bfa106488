"""Search, sort and row formatting for the victory prize table."""

from typing import Any, Dict, List, Optional

from lordsboard.dashboard.reward_engine.models.reward_record import PlayerRewardRecord
from lordsboard.dashboard.utils.address_utils import KnownAddressRegistry, shorten_address
from .formatting import format_token, format_usd, format_percentage

SORT_KEYS = {
    "lords": lambda r: r.total_lords_reward,
    "strk": lambda r: r.total_strk_reward,
    "points": lambda r: r.points,
    "name": lambda r: r.name.lower(),
}
DEFAULT_SORT_KEY = "lords"


def filter_players(records: List[PlayerRewardRecord], search: Optional[str]) -> List[PlayerRewardRecord]:
    """Case-insensitive substring match on player name, address or tribe name."""
    if not search:
        return list(records)

    term = search.lower()
    return [
        r for r in records
        if term in r.name.lower() or term in r.address.lower() or term in r.tribe_name.lower()
    ]


def sort_players(
    records: List[PlayerRewardRecord],
    sort_by: str = DEFAULT_SORT_KEY,
    order: str = "desc"
) -> List[PlayerRewardRecord]:
    """Sort by lords, strk, points or name; unknown keys fall back to lords."""
    key = SORT_KEYS.get(sort_by, SORT_KEYS[DEFAULT_SORT_KEY])
    return sorted(records, key=key, reverse=(order != "asc"))


def build_player_rows(
    records: List[PlayerRewardRecord],
    lords_price: float,
    registry: Optional[KnownAddressRegistry] = None
) -> List[Dict[str, Any]]:
    """Formatted display rows, one per record."""
    rows = []
    for r in records:
        display_name = r.name
        if not display_name:
            display_name = registry.display_name(r.address) if registry else shorten_address(r.address)

        row = {
            "player": display_name,
            "address": shorten_address(r.address),
            "tribe": r.tribe_name,
            "rank": f"#{r.tribe_rank}",
            "owner": r.is_owner,
            "points": f"{r.points:,.0f}",
            "lords": f"{format_token(r.total_lords_reward)} LORDS",
            "lordsUsd": format_usd(r.total_lords_reward, lords_price),
            "strk": f"{format_token(r.total_strk_reward)} STRK",
            "memberShare": (
                f"{format_token(r.member_share_lords)} LORDS / {format_token(r.member_share_strk)} STRK"
            ),
            "pointsShare": format_percentage(r.points_share),
        }
        if r.owner_bonus_lords or r.owner_bonus_strk:
            row["ownerBonus"] = (
                f"{format_token(r.owner_bonus_lords)} LORDS / {format_token(r.owner_bonus_strk)} STRK"
            )
        rows.append(row)
    return rows
