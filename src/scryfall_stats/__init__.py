"""
Scryfall Search Stats.

Fetches every page of a Scryfall search and tallies color identity,
mana value, card type, rarity, creature subtype and keyword frequencies.
"""

__version__ = "1.0.0"
