"""
Loaders for the static JSON datasets behind the dashboard.

Each loader validates the document's top-level structure and raises on a
broken file, but skips individual malformed records with a warning so one bad
entry never hides the rest of the dataset.
"""

import json
from pathlib import Path
from typing import Any, List, Union
import bittensor as bt

from lordsboard.dashboard.reward_engine.models.tribe import Tribe, Player
from lordsboard.dashboard.reward_engine.models.achievement import AchievementEntry
from lordsboard.dashboard.reward_engine.models.social_export import SocialExport
from .address_utils import KnownAddressRegistry
from .error_handling import log_and_raise_validation_error

PathLike = Union[str, Path]


def load_json(path: PathLike) -> Any:
    """
    Load a JSON document from disk.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Dataset file not found: {path}")

    try:
        with open(path, 'r') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Failed to parse JSON from {path}: {e}")


def _require_list(data: Any, name: str) -> list:
    if not isinstance(data, list):
        log_and_raise_validation_error(f"{name} must be a list", data=data)
    return data


def parse_tribe(data: dict) -> Tribe:
    """Parse one tribe, dropping malformed members individually."""
    members = []
    for member_data in data.get('members') or []:
        try:
            members.append(Player.from_dict(member_data))
        except (KeyError, TypeError, ValueError) as e:
            bt.logging.warning(f"Skipping malformed member in tribe '{data.get('name')}': {e}")
    return Tribe.from_dict(data, members=members)


def parse_social_export(data: Any) -> SocialExport:
    """Parse a social export document into tribes."""
    if not isinstance(data, dict):
        log_and_raise_validation_error("Social export must be an object", data=data)
    if 'tribes' not in data:
        log_and_raise_validation_error("Social export missing 'tribes'", data=data)

    tribes = []
    for tribe_data in _require_list(data['tribes'], "tribes"):
        try:
            tribes.append(parse_tribe(tribe_data))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            bt.logging.warning(f"Skipping malformed tribe: {e}")

    game_info = data.get('gameInfo') or {}
    return SocialExport(
        timestamp=data.get('timestamp'),
        total_players=int(game_info.get('totalPlayers', sum(len(t.members) for t in tribes))),
        total_tribes=int(game_info.get('totalTribes', len(tribes))),
        tribes=tribes,
    )


def parse_achievement_entries(data: Any) -> List[AchievementEntry]:
    entries = []
    for record in _require_list(data, "Achievement points"):
        try:
            entries.append(AchievementEntry.from_dict(record))
        except (AttributeError, TypeError, ValueError) as e:
            bt.logging.warning(f"Skipping malformed achievement entry: {e}")
    return entries


def parse_qualifying_addresses(data: Any) -> List[str]:
    """Accepts either ``[{"address": ...}]`` or a plain list of strings."""
    addresses = []
    for record in _require_list(data, "Qualifying addresses"):
        address = record.get('address') if isinstance(record, dict) else record
        if isinstance(address, str) and address:
            addresses.append(address)
        else:
            bt.logging.warning(f"Skipping malformed qualifying entry: {record!r}")
    return addresses


def load_social_export(path: PathLike) -> SocialExport:
    export = parse_social_export(load_json(path))
    bt.logging.info(f"📥 Loaded {len(export.tribes)} tribes from {path}")
    return export


def load_achievement_entries(path: PathLike) -> List[AchievementEntry]:
    entries = parse_achievement_entries(load_json(path))
    bt.logging.info(f"📥 Loaded {len(entries)} achievement entries from {path}")
    return entries


def load_qualifying_addresses(path: PathLike) -> List[str]:
    return parse_qualifying_addresses(load_json(path))


def load_known_addresses(path: PathLike) -> KnownAddressRegistry:
    data = load_json(path)
    if not isinstance(data, dict):
        log_and_raise_validation_error("Known addresses must be an object", data=data, source=str(path))
    return KnownAddressRegistry(data)


def load_marketplace_sales(path: PathLike) -> List[str]:
    """Hex-encoded sale prices (wei) from the marketplace export."""
    prices = []
    for sale in _require_list(load_json(path), "Marketplace sales"):
        hex_price = sale.get('hex_price') if isinstance(sale, dict) else None
        if isinstance(hex_price, str):
            prices.append(hex_price)
        else:
            bt.logging.warning(f"Skipping marketplace sale without hex_price: {sale!r}")
    return prices
