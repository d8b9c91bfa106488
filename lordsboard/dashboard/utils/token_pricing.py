from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

import requests
import bittensor as bt
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from lordsboard.utils.misc import ttl_cache
from lordsboard.dashboard.utils.error_handling import log_and_raise_api_error, ErrorMessages
from lordsboard.dashboard.utils.config import (
    COINGECKO_PRICE_URL,
    PRICE_REFRESH_SECONDS,
    FALLBACK_LORDS_PRICE_USD,
    FALLBACK_STRK_PRICE_USD,
)


@dataclass(frozen=True)
class TokenPrices:
    """USD prices for LORDS and STRK."""
    lords_usd: float
    strk_usd: float
    lords_24h_change: Optional[float] = None
    last_updated: Optional[datetime] = None
    is_fallback: bool = False

    def to_dict(self) -> dict:
        return {
            "lordsPrice": self.lords_usd,
            "strkPrice": self.strk_usd,
            "priceChange": self.lords_24h_change,
            "lastUpdated": self.last_updated.isoformat() if self.last_updated else None,
            "isFallback": self.is_fallback,
        }


def _validate_price(value, token: str) -> float:
    if not isinstance(value, (int, float)) or value <= 0:
        raise ValueError(f"Invalid {token} price value: {value}")
    return float(value)


@retry(
    stop=stop_after_attempt(5),
    wait=wait_exponential(multiplier=1, min=1, max=10),
    retry=retry_if_exception_type((requests.exceptions.RequestException, KeyError)),
    reraise=True
)
def _fetch_price_data() -> dict:
    response = requests.get(COINGECKO_PRICE_URL, timeout=10)
    response.raise_for_status()

    data = response.json()

    # Validate response structure
    if 'lords' not in data or 'starknet' not in data:
        raise KeyError(ErrorMessages.PRICE_DATA_NOT_FOUND)
    if 'usd' not in data['lords'] or 'usd' not in data['starknet']:
        raise KeyError("USD price not found in token data")
    return data


@ttl_cache(ttl=PRICE_REFRESH_SECONDS)
def get_token_prices() -> TokenPrices:
    """
    Get current LORDS and STRK prices in USD from CoinGecko API.

    Returns:
        TokenPrices with the LORDS 24h change and last update time

    Raises:
        ExternalApiError: If the API stays unreachable or malformed after all retries
        ValueError: If a returned price is not a positive number
    """
    try:
        data = _fetch_price_data()
    except (requests.exceptions.RequestException, KeyError) as e:
        log_and_raise_api_error(e, endpoint=COINGECKO_PRICE_URL, context="Token price fetch")

    lords = data['lords']
    last_updated_at = lords.get('last_updated_at')

    return TokenPrices(
        lords_usd=_validate_price(lords['usd'], 'LORDS'),
        strk_usd=_validate_price(data['starknet']['usd'], 'STRK'),
        lords_24h_change=lords.get('usd_24h_change'),
        last_updated=(
            datetime.fromtimestamp(last_updated_at, tz=timezone.utc)
            if last_updated_at else None
        ),
    )


@ttl_cache(ttl=PRICE_REFRESH_SECONDS)
def get_token_prices_or_fallback() -> TokenPrices:
    """
    Get current prices, falling back to fixed prices if the API is unavailable.

    The result, fallback included, is cached for PRICE_REFRESH_SECONDS so an
    outage costs one round of retries per refresh window.
    """
    try:
        return get_token_prices()
    except Exception as e:
        bt.logging.error(f"Error fetching prices, using fallback: {e}")
        return TokenPrices(
            lords_usd=FALLBACK_LORDS_PRICE_USD,
            strk_usd=FALLBACK_STRK_PRICE_USD,
            is_fallback=True,
        )
