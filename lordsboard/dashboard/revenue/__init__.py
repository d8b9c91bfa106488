"""Revenue and season pass analytics."""

from .revenue_breakdown import RevenueEntry, default_revenue_entries, total_lords, lords_to_usd, revenue_share
from .season_pass import SeasonPassStats, ValueScenario, hex_to_lords, calculate_season_pass_stats

__all__ = [
    "RevenueEntry",
    "default_revenue_entries",
    "total_lords",
    "lords_to_usd",
    "revenue_share",
    "SeasonPassStats",
    "ValueScenario",
    "hex_to_lords",
    "calculate_season_pass_stats",
]
