"""Single-pass tallies over fetched cards and top-N selection.

process_cards() folds every card into one Counter per dimension.
summarize() turns those tables into sorted, truncated entries with
percentages ready for display.
"""

from collections import Counter
from dataclasses import asdict, dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Hashable, Iterable, Union

from ..cards import CardLike, as_card
from ..core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_TOP_N = 5


@dataclass
class StatsResult:
    """Raw frequency tables, one per dimension."""

    identity_counts: Counter = field(default_factory=Counter)
    cmc_counts: Counter = field(default_factory=Counter)
    type_counts: Counter = field(default_factory=Counter)
    rarity_counts: Counter = field(default_factory=Counter)
    creature_type_counts: Counter = field(default_factory=Counter)
    keyword_counts: Counter = field(default_factory=Counter)
    total: int = 0


@dataclass
class CountEntry:
    """One row of a ranked section."""

    key: Union[str, int, float]
    count: int
    percent: float


@dataclass
class StatsSummary:
    """Sorted and truncated view of a StatsResult."""

    total: int
    was_limited: bool
    limit: int
    identities: list[CountEntry]
    types: list[CountEntry]
    mana_curve: list[CountEntry]
    rarities: list[CountEntry]
    creature_types: list[CountEntry]
    keywords: list[CountEntry]

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def process_cards(cards: Iterable[CardLike]) -> StatsResult:
    """Tally color identity, mana value, types, rarity, subtypes and keywords.

    Args:
        cards: Card objects or raw Scryfall card dicts

    Returns:
        StatsResult with one Counter per dimension
    """
    result = StatsResult()

    for raw in cards:
        card = as_card(raw)
        result.total += 1

        result.identity_counts[card.identity_key] += 1
        result.cmc_counts[card.mana_value] += 1
        result.rarity_counts[card.rarity] += 1

        for card_type in card.main_types:
            result.type_counts[card_type] += 1

        for subtype in card.creature_subtypes:
            result.creature_type_counts[subtype] += 1

        for keyword in card.keywords:
            result.keyword_counts[keyword] += 1

    logger.debug(
        "Processed {} cards ({} identities, {} types, {} keywords)",
        result.total,
        len(result.identity_counts),
        len(result.type_counts),
        len(result.keyword_counts),
    )
    return result


def top_counts(
    counts: dict[Hashable, int], limit: int = DEFAULT_TOP_N
) -> list[tuple[Hashable, int]]:
    """Return the `limit` most frequent entries, ties kept in first-seen order."""
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return ranked[:limit]


def mana_curve(cmc_counts: dict[Union[int, float], int]) -> list[tuple[Any, int]]:
    """Every mana value with its count, ascending by mana value."""
    return sorted(cmc_counts.items(), key=lambda item: float(item[0]))


def _percent(count: int, total: int) -> float:
    """Share of `total` in percent, halves rounded up to one decimal."""
    if total <= 0:
        return 0.0
    share = Decimal(count) * 100 / Decimal(total)
    return float(share.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _entries(pairs: list[tuple[Any, int]], total: int) -> list[CountEntry]:
    return [CountEntry(key, count, _percent(count, total)) for key, count in pairs]


def summarize(
    cards: Union[Iterable[CardLike], StatsResult],
    *,
    was_limited: bool = False,
    limit: int = DEFAULT_TOP_N,
) -> StatsSummary:
    """Build the display summary for a card list (or precomputed tables)."""
    stats = cards if isinstance(cards, StatsResult) else process_cards(cards)
    total = stats.total

    return StatsSummary(
        total=total,
        was_limited=was_limited,
        limit=limit,
        identities=_entries(top_counts(stats.identity_counts, limit), total),
        types=_entries(top_counts(stats.type_counts, limit), total),
        mana_curve=_entries(mana_curve(stats.cmc_counts), total),
        rarities=_entries(top_counts(stats.rarity_counts, limit), total),
        creature_types=_entries(top_counts(stats.creature_type_counts, limit), total),
        keywords=_entries(top_counts(stats.keyword_counts, limit), total),
    )
