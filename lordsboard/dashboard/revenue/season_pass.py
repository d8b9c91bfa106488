"""Season pass marketplace statistics and value-creation scenarios."""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional

import numpy as np
import bittensor as bt

from lordsboard.dashboard.utils.config import (
    TOTAL_REALMS_NFTS,
    REALMS_BRIDGED_TO_STARKNET,
    SEASON_PASSES_MINTED,
    SEASON_PASSES_USED,
    WEI_PER_LORDS,
)


@dataclass
class ValueScenario:
    """Estimated value of ``count`` passes at the average sale price."""
    id: str
    title: str
    description: str
    count: int
    value: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "count": self.count,
            "value": self.value,
        }


@dataclass
class SeasonPassStats:
    total_sold: int = 0
    total_revenue: float = 0.0
    average_price: float = 0.0
    scenarios: List[ValueScenario] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalSoldOnMarketplace": self.total_sold,
            "totalRevenue": self.total_revenue,
            "averagePrice": self.average_price,
            "scenarios": [s.to_dict() for s in self.scenarios],
        }


DEFAULT_PASS_COUNTS = {
    "used": SEASON_PASSES_USED,
    "minted": SEASON_PASSES_MINTED,
    "bridged": REALMS_BRIDGED_TO_STARKNET,
    "total": TOTAL_REALMS_NFTS,
}

SCENARIO_LABELS = {
    "used": ("Season Passes Used in Game", "Value of season passes actually used during the season"),
    "minted": ("Season Passes Minted", "Value of all season passes minted for Realms holders"),
    "bridged": ("Realms Bridged to Starknet", "Potential value if all bridged Realms got season passes"),
    "total": ("All Realms NFTs", "Maximum theoretical value across all Realms"),
}


def hex_to_lords(hex_price: str) -> float:
    """
    Convert a hex-encoded wei amount to LORDS.

    Raises:
        ValueError: If ``hex_price`` is not valid hex
    """
    return int(hex_price, 16) / WEI_PER_LORDS


def calculate_season_pass_stats(
    hex_prices: List[str],
    counts: Optional[Dict[str, int]] = None
) -> SeasonPassStats:
    """Average sale price and scenario values; unparseable prices are skipped."""
    counts = DEFAULT_PASS_COUNTS if counts is None else counts

    amounts = []
    for hex_price in hex_prices:
        try:
            amounts.append(hex_to_lords(hex_price))
        except (TypeError, ValueError) as e:
            bt.logging.warning(f"Skipping marketplace sale with bad price {hex_price!r}: {e}")

    if not amounts:
        return SeasonPassStats()

    lords_amounts = np.array(amounts, dtype=np.float64)
    total_revenue = float(np.sum(lords_amounts))
    average_price = total_revenue / len(lords_amounts)

    scenarios = []
    for scenario_id, count in counts.items():
        title, description = SCENARIO_LABELS.get(scenario_id, (scenario_id, ""))
        scenarios.append(ValueScenario(
            id=scenario_id,
            title=title,
            description=description,
            count=count,
            value=count * average_price,
        ))

    return SeasonPassStats(
        total_sold=len(lords_amounts),
        total_revenue=total_revenue,
        average_price=average_price,
        scenarios=scenarios,
    )
