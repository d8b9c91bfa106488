"""Display helpers for reward and revenue records."""

from .formatting import format_token, format_usd, format_percentage
from .player_table import filter_players, sort_players, build_player_rows

__all__ = [
    "format_token",
    "format_usd",
    "format_percentage",
    "filter_players",
    "sort_players",
    "build_player_rows",
]
