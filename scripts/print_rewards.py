#!/usr/bin/env python3
"""
Print victory, cartridge and daydreams reward summaries for a data directory.

Usage:
    python scripts/print_rewards.py --data-dir data --sort-by points --limit 20
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(project_root))

import bittensor as bt
from lordsboard.dashboard.utils.config import (
    DATA_DIR,
    SOCIAL_EXPORT_FILE,
    CARTRIDGE_POINTS_FILE,
    DAYDREAMS_QUALIFIERS_FILE,
    KNOWN_ADDRESSES_FILE,
)
from lordsboard.dashboard.utils.data_loader import (
    load_social_export,
    load_achievement_entries,
    load_qualifying_addresses,
    load_known_addresses,
)
from lordsboard.dashboard.utils.address_utils import KnownAddressRegistry
from lordsboard.dashboard.reward_engine import RewardsOrchestrator
from lordsboard.dashboard.presentation.formatting import format_token
from lordsboard.dashboard.presentation.player_table import sort_players


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print season reward summaries")
    parser.add_argument("--data-dir", default=str(DATA_DIR), help="Directory holding the JSON datasets")
    parser.add_argument("--sort-by", default="lords", choices=["lords", "strk", "points", "name"])
    parser.add_argument("--order", default="desc", choices=["asc", "desc"])
    parser.add_argument("--limit", type=int, default=25, help="Rows to print per table")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    data_dir = Path(args.data_dir)
    bt.logging.set_info()

    orchestrator = RewardsOrchestrator()

    registry = KnownAddressRegistry()
    if (data_dir / KNOWN_ADDRESSES_FILE).exists():
        registry = load_known_addresses(data_dir / KNOWN_ADDRESSES_FILE)

    try:
        export = load_social_export(data_dir / SOCIAL_EXPORT_FILE)
        entries = load_achievement_entries(data_dir / CARTRIDGE_POINTS_FILE)
    except (FileNotFoundError, ValueError) as e:
        print(f"\n❌ {e}")
        return 1

    qualifiers = None
    if (data_dir / DAYDREAMS_QUALIFIERS_FILE).exists():
        qualifiers = load_qualifying_addresses(data_dir / DAYDREAMS_QUALIFIERS_FILE)

    report = orchestrator.build_report(export, entries, qualifiers)

    print("\n" + "=" * 80)
    print("🏆 VICTORY PRIZES")
    print("=" * 80)
    print(f"Total pool: {format_token(report.total_prize_lords)} LORDS / "
          f"{format_token(report.total_prize_strk)} STRK")
    for record in sort_players(report.victory, args.sort_by, args.order)[:args.limit]:
        owner = " 👑" if record.is_owner else ""
        name = record.name or registry.display_name(record.address)
        print(f"  {name:<24} {record.tribe_name:<20}{owner:<3} "
              f"{format_token(record.total_lords_reward):>14} LORDS "
              f"{format_token(record.total_strk_reward):>12} STRK")

    print("\n" + "=" * 80)
    print("🎮 CARTRIDGE ACHIEVEMENTS")
    print("=" * 80)
    for record in sorted(report.cartridge, key=lambda r: r.lords_reward, reverse=True)[:args.limit]:
        print(f"  {registry.display_name(record.address):<24} {record.percentage:>8.2f}% "
              f"{format_token(record.lords_reward):>14} LORDS")

    print("\n" + "=" * 80)
    print("🤖 DAYDREAMS AGENTS")
    print("=" * 80)
    for record in report.daydreams[:args.limit]:
        print(f"  {registry.display_name(record.address):<24} {format_token(record.reward):>14} STRK")

    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
