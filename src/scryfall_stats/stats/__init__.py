"""Frequency statistics over a list of cards."""

from .aggregate import (
    CountEntry,
    StatsResult,
    StatsSummary,
    mana_curve,
    process_cards,
    summarize,
    top_counts,
)

__all__ = [
    "CountEntry",
    "StatsResult",
    "StatsSummary",
    "mana_curve",
    "process_cards",
    "summarize",
    "top_counts",
]
