"""
Global pytest configuration and fixtures for fast test execution.

This file provides mocking of external API calls to prevent
slow network requests during testing.
"""

import pytest
from unittest.mock import patch, Mock

from lordsboard.dashboard.reward_engine.models import Player, Tribe, TribePrize, AchievementEntry


@pytest.fixture(autouse=True)
def mock_external_apis():
    """
    Auto-use fixture that mocks all external API calls to speed up tests.
    This prevents real network requests during testing.
    """
    with patch('requests.get') as mock_requests_get:

        mock_response = Mock()
        mock_response.status_code = 200
        mock_response.json.return_value = {"success": True}
        mock_response.raise_for_status.return_value = None
        mock_requests_get.return_value = mock_response

        yield {
            'requests': mock_requests_get
        }


@pytest.fixture(autouse=True)
def disable_delays():
    """
    Auto-use fixture that disables sleep calls during testing.
    """
    with patch('time.sleep') as mock_sleep:
        mock_sleep.return_value = None
        yield


@pytest.fixture(autouse=True)
def clear_price_cache():
    """Price lookups are TTL-cached; start every test with an empty cache."""
    from lordsboard.dashboard.utils.token_pricing import get_token_prices, get_token_prices_or_fallback

    get_token_prices.cache_clear()
    get_token_prices_or_fallback.cache_clear()
    yield
    get_token_prices.cache_clear()
    get_token_prices_or_fallback.cache_clear()


@pytest.fixture
def scenario_tribe():
    """Rank 1 tribe: a 500k-point member and a 9.5M-point owner."""
    return Tribe(
        name="Iron Legion",
        rank=1,
        prize=TribePrize(lords=90000, strk=15000),
        members=[
            Player(address="0xa11ce", name="alice", points=500000),
            Player(address="0xb0b", name="bob", points=9500000, is_owner=True),
        ],
    )


@pytest.fixture
def achievement_entries():
    return [
        AchievementEntry(address="0xa", earnings=100, completed=["DAYDREAMS_AGENT"]),
        AchievementEntry(address="0xb", earnings=300),
    ]


@pytest.fixture
def social_export_data():
    """Raw social export document as published by the game indexer."""
    return {
        "timestamp": "2025-06-01T00:00:00Z",
        "gameInfo": {"totalPlayers": 3, "totalTribes": 2},
        "tribes": [
            {
                "entityId": "101",
                "name": "Iron Legion",
                "rank": 1,
                "isPublic": True,
                "prize": {"lords": 90000, "strk": 15000},
                "owner": {"address": "0xb0b", "name": "bob"},
                "members": [
                    {"address": "0xa11ce", "name": "alice", "isOwner": False, "points": 500000, "realms": 2},
                    {"address": "0xb0b", "name": "bob", "isOwner": True, "points": 9500000, "realms": 9},
                ],
            },
            {
                "entityId": "102",
                "name": "Ashen Court",
                "rank": 2,
                "isPublic": False,
                "prize": {"lords": 54000, "strk": 9000},
                "members": [
                    {"address": "0xc4a1", "name": "carol", "isOwner": True, "points": 1200},
                ],
            },
        ],
    }


# Performance optimization: disable logging during tests unless explicitly enabled
@pytest.fixture(autouse=True)
def fast_logging():
    """
    Reduce logging verbosity during tests for better performance.
    """
    import logging
    import bittensor as bt

    logging.getLogger().setLevel(logging.WARNING)
    bt.logging.set_debug(False)

    yield

    logging.getLogger().setLevel(logging.INFO)
