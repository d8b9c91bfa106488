"""
Address helpers for joining datasets that spell the same Starknet address
differently (short hex vs. 64-digit zero-padded hex).
"""

import re
from typing import Dict, Optional
import bittensor as bt

from .error_handling import InvalidAddressError, ErrorMessages

ADDRESS_HEX_LENGTH = 64
HEX_DIGITS_PATTERN = re.compile(r'[0-9a-f]+')


def normalize_address(address: str) -> str:
    """
    Map any hex spelling of an address to the canonical ``0x`` + 64 digit form.

    Examples:
        >>> normalize_address("0x1")
        '0x0000000000000000000000000000000000000000000000000000000000000001'
        >>> normalize_address("ABC") == normalize_address("0x0abc")
        True

    Raises:
        InvalidAddressError: If the input is not a hex string of at most 64 digits
    """
    if not isinstance(address, str):
        raise InvalidAddressError(f"{ErrorMessages.INVALID_ADDRESS}: {address!r}")

    digits = address.strip().lower()
    if digits.startswith("0x"):
        digits = digits[2:]

    if not digits or not HEX_DIGITS_PATTERN.fullmatch(digits):
        raise InvalidAddressError(f"{ErrorMessages.INVALID_ADDRESS}: {address!r}")
    if len(digits) > ADDRESS_HEX_LENGTH:
        raise InvalidAddressError(
            f"Address has {len(digits)} hex digits, maximum is {ADDRESS_HEX_LENGTH}: {address!r}"
        )

    return "0x" + digits.zfill(ADDRESS_HEX_LENGTH)


def shorten_address(address: str) -> str:
    """Shorten an address for display, e.g. ``0x04cd...c553``."""
    if len(address) <= 10:
        return address
    return f"{address[:6]}...{address[-4:]}"


class KnownAddressRegistry:
    """Read-only lookup of display names keyed by normalized address."""

    def __init__(self, names: Optional[Dict[str, str]] = None):
        self._names: Dict[str, str] = {}
        for address, name in (names or {}).items():
            try:
                self._names[normalize_address(address)] = name
            except InvalidAddressError as e:
                bt.logging.warning(f"Skipping known address entry: {e}")

    def get(self, address: str) -> Optional[str]:
        """Return the registered name, or None if unknown or unparseable."""
        try:
            return self._names.get(normalize_address(address))
        except InvalidAddressError as e:
            bt.logging.warning(f"Cannot look up address: {e}")
            return None

    def display_name(self, address: str) -> str:
        """Registered name, falling back to the shortened raw address."""
        name = self.get(address)
        return name if name is not None else shorten_address(address)

    def __contains__(self, address: str) -> bool:
        return self.get(address) is not None

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"KnownAddressRegistry({len(self._names)} addresses)"
