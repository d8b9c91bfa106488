"""Season revenue by fee category."""

from dataclasses import dataclass
from typing import Dict, Any, List

from lordsboard.dashboard.utils.config import (
    VILLAGE_PASSES_SOLD,
    VILLAGE_PASS_PRICE_USD,
    DONKEY_NETWORK_ADDRESS,
    VELORDS_ADDRESS,
    SEASON_POOL_ADDRESS,
    CLIENT_INTEGRATION_ADDRESS,
)

NO_SPECIFIC_ADDRESS = "No specific address"
MULTIPLE_WALLETS = "Multiple wallets"


@dataclass
class RevenueEntry:
    """LORDS collected by one fee category."""
    category: str
    description: str
    amount: float
    percentage: float
    address: str
    source: str
    breakdown: str

    @property
    def has_contract_address(self) -> bool:
        return self.address not in (NO_SPECIFIC_ADDRESS, MULTIPLE_WALLETS)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category,
            "description": self.description,
            "amount": self.amount,
            "percentage": self.percentage,
            "address": self.address,
            "source": self.source,
            "breakdown": self.breakdown,
        }


def default_revenue_entries() -> List[RevenueEntry]:
    """Season 1 revenue as published on the dashboard."""
    village_usd = VILLAGE_PASSES_SOLD * VILLAGE_PASS_PRICE_USD
    return [
        RevenueEntry(
            category="Village Passes",
            description="Direct village NFT sales revenue",
            amount=316000,
            percentage=56.8,
            address=NO_SPECIFIC_ADDRESS,
            source=(
                f"Paid in USD: ${village_usd:,} "
                f"({VILLAGE_PASSES_SOLD:,} villages × ${VILLAGE_PASS_PRICE_USD} each)"
            ),
            breakdown="Equivalent to 316,000 LORDS at the season average price",
        ),
        RevenueEntry(
            category="Donkey Network Fees",
            description="Main bridge infrastructure operations",
            amount=162482,
            percentage=29.2,
            address=DONKEY_NETWORK_ADDRESS,
            source="Bridge operations + remaining LORDS tokens",
            breakdown="Core bridge infrastructure fees",
        ),
        RevenueEntry(
            category="Daydreams Agent Prize Pool",
            description="Portion of the prize pool planned for AI agent rewards",
            amount=250000,
            percentage=31.2,
            address=VELORDS_ADDRESS,
            source="Portion of the prize pool planned for AI agent rewards",
            breakdown="Distributed to veLORDS stakers",
        ),
        RevenueEntry(
            category="Bridge Fees",
            description="Bridge commissions and distributions",
            amount=55282,
            percentage=9.9,
            address=MULTIPLE_WALLETS,
            source="7.5% commission distributed across multiple wallets",
            breakdown=(
                f"• Season Pool: 18,637 LORDS ({SEASON_POOL_ADDRESS})\n"
                f"• VeLords Bridge Fees: 18,637 LORDS ({VELORDS_ADDRESS})\n"
                f"• Client Integration: 18,008 LORDS ({CLIENT_INTEGRATION_ADDRESS})"
            ),
        ),
        RevenueEntry(
            category="Marketplace Fees",
            description="Trading volume commissions",
            amount=22487,
            percentage=4.0,
            address=VELORDS_ADDRESS,
            source="5% commission on marketplace trading volume",
            breakdown="Distributed to VeLords stakers",
        ),
    ]


def total_lords(entries: List[RevenueEntry]) -> float:
    return sum(entry.amount for entry in entries)


def lords_to_usd(amount: float, lords_price: float) -> float:
    return amount * lords_price


def revenue_share(entries: List[RevenueEntry]) -> Dict[str, float]:
    """Each category's share of total revenue in percent; empty when the total is 0."""
    total = total_lords(entries)
    if total <= 0:
        return {}
    return {entry.category: entry.amount / total * 100 for entry in entries}
