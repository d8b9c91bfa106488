"""Essential tests for token pricing."""

import pytest
import requests
from unittest.mock import Mock, patch

from lordsboard.dashboard.utils.token_pricing import (
    TokenPrices,
    get_token_prices,
    get_token_prices_or_fallback,
)
from lordsboard.dashboard.utils.config import FALLBACK_LORDS_PRICE_USD, FALLBACK_STRK_PRICE_USD
from lordsboard.dashboard.utils.error_handling import ExternalApiError


def _price_response(payload):
    mock_response = Mock()
    mock_response.json.return_value = payload
    mock_response.raise_for_status.return_value = None
    return mock_response


VALID_PAYLOAD = {
    'lords': {'usd': 0.025, 'usd_24h_change': -3.5, 'last_updated_at': 1700000000},
    'starknet': {'usd': 0.61, 'usd_24h_change': 1.2, 'last_updated_at': 1700000000},
}


class TestGetTokenPrices:
    """Test price fetching from CoinGecko."""

    def test_fetches_prices_from_api(self):
        """Should parse LORDS and STRK prices."""
        with patch('lordsboard.dashboard.utils.token_pricing.requests.get') as mock_get:
            mock_get.return_value = _price_response(VALID_PAYLOAD)

            prices = get_token_prices()

            assert prices.lords_usd == 0.025
            assert prices.strk_usd == 0.61
            assert prices.lords_24h_change == -3.5
            assert prices.last_updated.year == 2023
            assert prices.is_fallback is False

    def test_result_is_cached(self):
        """Second call within the TTL should not hit the API."""
        with patch('lordsboard.dashboard.utils.token_pricing.requests.get') as mock_get:
            mock_get.return_value = _price_response(VALID_PAYLOAD)

            get_token_prices()
            get_token_prices()

            assert mock_get.call_count == 1

    def test_invalid_price_raises(self):
        """Non-positive prices are rejected without retrying."""
        payload = {'lords': {'usd': 0}, 'starknet': {'usd': 1.0}}
        with patch('lordsboard.dashboard.utils.token_pricing.requests.get') as mock_get:
            mock_get.return_value = _price_response(payload)

            with pytest.raises(ValueError, match="Invalid LORDS price"):
                get_token_prices()


    def test_unreachable_api_raises_after_retries(self):
        """Connection failures are retried, then surface as ExternalApiError."""
        with patch('lordsboard.dashboard.utils.token_pricing.requests.get') as mock_get:
            mock_get.side_effect = requests.exceptions.ConnectionError("refused")

            with pytest.raises(ExternalApiError, match="refused"):
                get_token_prices()

            assert mock_get.call_count == 5

    def test_missing_token_raises_api_error(self):
        with patch('lordsboard.dashboard.utils.token_pricing.requests.get') as mock_get:
            mock_get.return_value = _price_response({'lords': {'usd': 0.02}})

            with pytest.raises(ExternalApiError, match="Price data not found"):
                get_token_prices()


class TestFallbackPrices:
    """Test fallback when the price API is unavailable."""

    def test_returns_fallback_on_error(self):
        with patch('lordsboard.dashboard.utils.token_pricing.get_token_prices',
                   side_effect=RuntimeError("API down")):
            prices = get_token_prices_or_fallback()

        assert prices.is_fallback is True
        assert prices.lords_usd == FALLBACK_LORDS_PRICE_USD
        assert prices.strk_usd == FALLBACK_STRK_PRICE_USD

    def test_fallback_is_cached(self):
        """An outage costs one fetch attempt per refresh window."""
        with patch('lordsboard.dashboard.utils.token_pricing.get_token_prices',
                   side_effect=RuntimeError("API down")) as mock_prices:
            first = get_token_prices_or_fallback()
            second = get_token_prices_or_fallback()

        assert first is second
        assert mock_prices.call_count == 1

    def test_passes_through_live_prices(self):
        live = TokenPrices(lords_usd=0.03, strk_usd=0.5)
        with patch('lordsboard.dashboard.utils.token_pricing.get_token_prices', return_value=live):
            assert get_token_prices_or_fallback() is live

    def test_to_dict(self):
        data = TokenPrices(lords_usd=0.03, strk_usd=0.5, is_fallback=True).to_dict()

        assert data["lordsPrice"] == 0.03
        assert data["lastUpdated"] is None
        assert data["isFallback"] is True
