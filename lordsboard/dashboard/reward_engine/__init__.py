"""
Reward calculation system for the lordsboard dashboard.

This module splits tribe victory prizes and achievement pools into
per-player reward records.
"""

from .orchestrator import RewardsOrchestrator, RewardsReport

__all__ = [
    "RewardsOrchestrator",
    "RewardsReport",
]

__version__ = "1.0.0"
