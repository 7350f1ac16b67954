"""Plain-text and JSON renderings of a StatsSummary."""

from typing import Any, Callable, Optional

from .stats.aggregate import CountEntry, StatsSummary

TITLE = "Scryfall Search Stats"
NO_CARDS_MESSAGE = "No cards found."


def _section(
    title: str,
    entries: list[CountEntry],
    formatter: Optional[Callable[[Any], str]] = None,
) -> list[str]:
    if not entries:
        return []
    lines = ["", title]
    for entry in entries:
        label = formatter(entry.key) if formatter else str(entry.key)
        lines.append(f"  {label}: {entry.count} ({entry.percent:.1f}%)")
    return lines


def render_text(summary: StatsSummary, max_pages: int) -> str:
    """Render the summary the way the search page popup lays it out."""
    if summary.total == 0:
        return NO_CARDS_MESSAGE

    top = summary.limit
    lines = [TITLE, f"Total Cards Found: {summary.total}"]
    if summary.was_limited:
        lines.append(f"Note: Results capped at {max_pages} pages.")

    lines += _section(f"Top {top} Color Identities", summary.identities)
    lines += _section(f"Top {top} Card Types", summary.types)
    lines += _section("Mana Curve", summary.mana_curve, lambda cmc: f"CMC {cmc}")
    lines += _section(f"Top {top} Rarities", summary.rarities)
    lines += _section(f"Top {top} Creature Types", summary.creature_types)
    lines += _section(f"Top {top} Keywords", summary.keywords)
    return "\n".join(lines)


def summary_payload(
    summary: StatsSummary, *, query: Optional[str] = None
) -> dict[str, Any]:
    """JSON-serializable form of the summary."""
    payload = summary.to_dict()
    for section in (
        "identities",
        "types",
        "mana_curve",
        "rarities",
        "creature_types",
        "keywords",
    ):
        for entry in payload[section]:
            entry["key"] = str(entry["key"])
    if query is not None:
        payload["query"] = query
    return payload
