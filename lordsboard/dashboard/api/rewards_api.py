"""
Read-only API exposing reward distributions and revenue analytics.
Includes rate limiting for protection against abuse.

Handlers that read datasets or may call the price API are plain ``def`` so
FastAPI runs them in its threadpool instead of on the event loop.
"""
from fastapi import FastAPI, HTTPException, Request
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from pathlib import Path
from typing import Dict, List, Optional
import bittensor as bt
import uvicorn

from lordsboard.dashboard.utils.config import (
    DATA_DIR,
    SOCIAL_EXPORT_FILE,
    CARTRIDGE_POINTS_FILE,
    DAYDREAMS_QUALIFIERS_FILE,
    KNOWN_ADDRESSES_FILE,
    MARKETPLACE_SALES_FILE,
    API_HOST,
    API_PORT,
)
from lordsboard.dashboard.utils.data_loader import (
    load_social_export,
    load_achievement_entries,
    load_qualifying_addresses,
    load_known_addresses,
    load_marketplace_sales,
)
from lordsboard.dashboard.utils.address_utils import KnownAddressRegistry
from lordsboard.dashboard.utils.token_pricing import get_token_prices_or_fallback
from lordsboard.dashboard.reward_engine import RewardsOrchestrator
from lordsboard.dashboard.reward_engine.models.achievement import AchievementEntry
from lordsboard.dashboard.presentation.player_table import filter_players, sort_players, build_player_rows
from lordsboard.dashboard.revenue.revenue_breakdown import default_revenue_entries, total_lords, lords_to_usd
from lordsboard.dashboard.revenue.season_pass import calculate_season_pass_stats


# Initialize rate limiter
limiter = Limiter(key_func=get_remote_address)
app = FastAPI(title="LORDS Rewards API", version="1.0.0")
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

orchestrator = RewardsOrchestrator()


def get_data_path(file_name: str) -> Path:
    return Path(DATA_DIR) / file_name


def load_entries() -> List[AchievementEntry]:
    return load_achievement_entries(get_data_path(CARTRIDGE_POINTS_FILE))


def load_qualifiers() -> Optional[List[str]]:
    """Explicit qualifier list if published, else None (derived from achievements)."""
    path = get_data_path(DAYDREAMS_QUALIFIERS_FILE)
    if not path.exists():
        return None
    return load_qualifying_addresses(path)


def load_registry() -> KnownAddressRegistry:
    path = get_data_path(KNOWN_ADDRESSES_FILE)
    if not path.exists():
        return KnownAddressRegistry()
    return load_known_addresses(path)


def _data_error(e: Exception, what: str) -> HTTPException:
    if isinstance(e, FileNotFoundError):
        return HTTPException(status_code=404, detail=str(e))
    bt.logging.error(f"Error loading {what}: {e}")
    return HTTPException(status_code=500, detail=f"Error loading {what}: {str(e)}")


@app.get("/health")
@limiter.limit("60/minute")
async def health_check(request: Request):
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/prices")
@limiter.limit("30/minute")
def get_prices(request: Request) -> Dict:
    """Current LORDS/STRK prices (fallback values if the price API is down)."""
    return get_token_prices_or_fallback().to_dict()


@app.get("/rewards/victory")
@limiter.limit("20/minute")
def get_victory_rewards(
    request: Request,
    search: Optional[str] = None,
    sort_by: str = "lords",
    order: str = "desc"
) -> Dict:
    """
    Victory prize per tribe member.
    Supports search on player/tribe/address and sorting by lords, strk, points or name.
    """
    try:
        export = load_social_export(get_data_path(SOCIAL_EXPORT_FILE))
        registry = load_registry()
    except Exception as e:
        raise _data_error(e, "victory rewards")

    records = orchestrator.victory_rewards(export)
    players = sort_players(filter_players(records, search), sort_by, order)
    prices = get_token_prices_or_fallback()

    return {
        "timestamp": export.timestamp,
        "totalPlayers": export.total_players,
        "totalTribes": export.total_tribes,
        "totalLords": export.total_prize_lords,
        "totalStrk": export.total_prize_strk,
        "totalLordsUsd": lords_to_usd(export.total_prize_lords, prices.lords_usd),
        "players": [r.to_dict() for r in players],
        "rows": build_player_rows(players, prices.lords_usd, registry),
    }


@app.get("/rewards/cartridge")
@limiter.limit("20/minute")
def get_cartridge_rewards(request: Request) -> Dict:
    """Achievement pool split in proportion to earned points."""
    try:
        entries = load_entries()
        registry = load_registry()
    except Exception as e:
        raise _data_error(e, "cartridge rewards")

    records = orchestrator.cartridge_rewards(entries)
    return {
        "pool": orchestrator.config.cartridge_lords_pool,
        "rewards": [
            {**r.to_dict(), "displayName": registry.display_name(r.address)}
            for r in records
        ],
    }


@app.get("/rewards/daydreams")
@limiter.limit("20/minute")
def get_daydreams_rewards(request: Request) -> Dict:
    """Agent pool split equally among qualifying players."""
    try:
        qualifiers = load_qualifiers()
        entries = load_entries() if qualifiers is None else None
        registry = load_registry()
    except Exception as e:
        raise _data_error(e, "daydreams rewards")

    records = orchestrator.daydreams_rewards(qualifiers, entries)
    return {
        "pool": orchestrator.config.daydreams_strk_pool,
        "rewards": [
            {**r.to_dict(), "displayName": registry.display_name(r.address)}
            for r in records
        ],
    }


@app.get("/revenue")
@limiter.limit("20/minute")
def get_revenue(request: Request) -> Dict:
    """Season revenue breakdown with USD values at the current LORDS price."""
    entries = default_revenue_entries()
    prices = get_token_prices_or_fallback()
    total = total_lords(entries)

    return {
        "lordsPrice": prices.lords_usd,
        "totalLords": total,
        "totalUsd": lords_to_usd(total, prices.lords_usd),
        "entries": [
            {**entry.to_dict(), "amountUsd": lords_to_usd(entry.amount, prices.lords_usd)}
            for entry in entries
        ],
    }


@app.get("/season-pass")
@limiter.limit("20/minute")
def get_season_pass(request: Request) -> Dict:
    """Marketplace statistics and value scenarios for season passes."""
    try:
        hex_prices = load_marketplace_sales(get_data_path(MARKETPLACE_SALES_FILE))
    except Exception as e:
        raise _data_error(e, "marketplace data")

    stats = calculate_season_pass_stats(hex_prices)
    prices = get_token_prices_or_fallback()
    return {**stats.to_dict(), "lordsPrice": prices.lords_usd}


def run_api(host: str = API_HOST, port: int = API_PORT):
    """Run the rewards API server."""
    uvicorn.run(app, host=host, port=port, log_level="info")


if __name__ == "__main__":
    run_api()
