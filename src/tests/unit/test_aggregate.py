"""Unit tests for stats/aggregate.py"""

from collections import Counter

import pytest

from scryfall_stats.cards import Card
from scryfall_stats.stats import (
    StatsResult,
    mana_curve,
    process_cards,
    summarize,
    top_counts,
)

CARDS = [
    {
        "name": "Llanowar Elves",
        "color_identity": ["G"],
        "cmc": 1.0,
        "type_line": "Creature — Elf Druid",
        "rarity": "common",
        "keywords": [],
    },
    {
        "name": "Serra Angel",
        "color_identity": ["W"],
        "cmc": 5.0,
        "type_line": "Creature — Angel",
        "rarity": "uncommon",
        "keywords": ["Flying", "Vigilance"],
    },
    {
        "name": "Lightning Bolt",
        "color_identity": ["R"],
        "cmc": 1.0,
        "type_line": "Instant",
        "rarity": "common",
        "keywords": [],
    },
    {
        "name": "Sol Ring",
        "color_identity": [],
        "cmc": 1.0,
        "type_line": "Artifact",
        "rarity": "uncommon",
    },
    {
        "name": "Elvish Archdruid",
        "color_identity": ["G"],
        "cmc": 3.0,
        "type_line": "Creature — Elf Druid",
        "rarity": "rare",
        "keywords": [],
    },
    {
        "name": "Little Girl",
        "color_identity": ["W"],
        "cmc": 0.5,
        "type_line": "Creature — Human Child",
        "rarity": "common",
        "keywords": [],
    },
]


class TestProcessCards:
    def test_counts_every_dimension(self):
        stats = process_cards(CARDS)

        assert stats.total == 6
        assert stats.identity_counts == Counter({"G": 2, "W": 2, "R": 1, "C": 1})
        assert stats.cmc_counts == Counter({1: 3, 5: 1, 3: 1, 0.5: 1})
        assert stats.type_counts == Counter(
            {"Creature": 4, "Instant": 1, "Artifact": 1}
        )
        assert stats.rarity_counts == Counter(
            {"common": 3, "uncommon": 2, "rare": 1}
        )
        assert stats.creature_type_counts == Counter(
            {"Elf": 2, "Druid": 2, "Angel": 1, "Human": 1, "Child": 1}
        )
        assert stats.keyword_counts == Counter({"Flying": 1, "Vigilance": 1})

    def test_accepts_card_objects(self):
        cards = [Card.from_json(data) for data in CARDS]

        assert process_cards(cards) == process_cards(CARDS)

    def test_empty_input(self):
        stats = process_cards([])

        assert stats == StatsResult()
        assert stats.total == 0

    def test_identity_order_does_not_matter(self):
        stats = process_cards(
            [
                {**CARDS[0], "color_identity": ["W", "U"]},
                {**CARDS[0], "color_identity": ["U", "W"]},
            ]
        )

        assert stats.identity_counts == Counter({"UW": 2})

    def test_does_not_mutate_input(self):
        card = {**CARDS[0], "color_identity": ["W", "B"]}
        process_cards([card])

        assert card["color_identity"] == ["W", "B"]


class TestTopCounts:
    def test_sorted_descending_and_truncated(self):
        counts = {"a": 1, "b": 5, "c": 3, "d": 4, "e": 2, "f": 6}

        assert top_counts(counts, limit=3) == [("f", 6), ("b", 5), ("d", 4)]

    def test_ties_keep_first_seen_order(self):
        counts = Counter()
        for key in ["x", "y", "z", "y", "x", "z"]:
            counts[key] += 1

        assert top_counts(counts) == [("x", 2), ("y", 2), ("z", 2)]

    def test_default_limit_is_five(self):
        counts = {str(i): i for i in range(10)}

        assert len(top_counts(counts)) == 5


def test_mana_curve_sorted_numerically_and_complete():
    curve = mana_curve({10: 1, 2: 4, 0.5: 1, 1: 3, 16: 1, 3: 2, 4: 1, 5: 1})

    assert [cmc for cmc, _ in curve] == [0.5, 1, 2, 3, 4, 5, 10, 16]


class TestSummarize:
    def test_percentages_and_sections(self):
        summary = summarize(CARDS, was_limited=True, limit=2)

        assert summary.total == 6
        assert summary.was_limited is True
        assert [(e.key, e.count) for e in summary.identities] == [
            ("G", 2),
            ("W", 2),
        ]
        assert summary.identities[0].percent == pytest.approx(33.3)
        assert [e.key for e in summary.mana_curve] == [0.5, 1, 3, 5]
        assert summary.mana_curve[1].percent == pytest.approx(50.0)
        assert [e.key for e in summary.types] == ["Creature", "Instant"]
        assert [e.key for e in summary.keywords] == ["Flying", "Vigilance"]

    def test_accepts_precomputed_tables(self):
        stats = process_cards(CARDS)

        assert summarize(stats) == summarize(CARDS)

    def test_empty_summary_has_no_entries(self):
        summary = summarize([])

        assert summary.total == 0
        assert summary.identities == []
        assert summary.mana_curve == []


class TestPercentRounding:
    def test_exact_halves_round_up(self):
        cards = [{**CARDS[0], "rarity": "mythic"}] + [CARDS[0]] * 15

        summary = summarize(cards)
        mythic = next(e for e in summary.rarities if e.key == "mythic")

        assert mythic.count == 1
        assert mythic.percent == 6.3

    @pytest.mark.parametrize(
        "count, total, expected",
        [(1, 3, 33.3), (2, 3, 66.7), (1, 8, 12.5), (3, 16, 18.8), (7, 7, 100.0)],
    )
    def test_one_decimal(self, count, total, expected):
        cards = [CARDS[2]] * count + [CARDS[3]] * (total - count)

        summary = summarize(cards)
        bolt = next(e for e in summary.types if e.key == "Instant")

        assert bolt.percent == expected
