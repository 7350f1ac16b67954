"""Card records as returned by the Scryfall search API.

Only the fields the aggregation reads are kept. Field names are
centralized in CardFields to prevent typos in dictionary lookups.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from .errors import CardDataError

# Separator between supertypes/types and subtypes on a type line
TYPE_LINE_SEPARATOR = " — "
CREATURE_MARKER = "Creature —"
COLORLESS = "C"


class CardFields:
    """Scryfall card object keys read by this package."""

    NAME = "name"
    COLOR_IDENTITY = "color_identity"
    CMC = "cmc"
    TYPE_LINE = "type_line"
    CARD_FACES = "card_faces"
    RARITY = "rarity"
    KEYWORDS = "keywords"


@dataclass(frozen=True)
class Card:
    """A read-only card record."""

    name: str
    color_identity: tuple[str, ...]
    cmc: float
    type_line: Optional[str]
    rarity: str
    keywords: tuple[str, ...] = ()
    face_type_lines: tuple[str, ...] = field(default=())

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Card":
        """Build a Card from a Scryfall card object.

        Raises:
            CardDataError: If no usable type line is present
        """
        faces = data.get(CardFields.CARD_FACES) or []
        face_type_lines = tuple(
            face.get(CardFields.TYPE_LINE) or "" for face in faces
        )
        type_line = data.get(CardFields.TYPE_LINE)

        if not type_line and not (face_type_lines and face_type_lines[0]):
            raise CardDataError(
                f"Card {data.get(CardFields.NAME, '<unnamed>')!r} has no type line"
            )

        try:
            cmc = float(data.get(CardFields.CMC) or 0)
        except (TypeError, ValueError) as exc:
            raise CardDataError(
                f"Card {data.get(CardFields.NAME, '<unnamed>')!r} has invalid cmc "
                f"{data.get(CardFields.CMC)!r}"
            ) from exc

        return cls(
            name=data.get(CardFields.NAME, ""),
            color_identity=tuple(data.get(CardFields.COLOR_IDENTITY) or ()),
            cmc=cmc,
            type_line=type_line,
            rarity=data.get(CardFields.RARITY, ""),
            keywords=tuple(data.get(CardFields.KEYWORDS) or ()),
            face_type_lines=face_type_lines,
        )

    @property
    def primary_type_line(self) -> str:
        """Type line of the front face for multi-face cards, else the card's own."""
        if self.face_type_lines and self.face_type_lines[0]:
            return self.face_type_lines[0]
        return self.type_line or ""

    @property
    def identity_key(self) -> str:
        """Sorted color symbols joined together, "C" when colorless."""
        return "".join(sorted(self.color_identity)) or COLORLESS

    @property
    def mana_value(self) -> Union[int, float]:
        if float(self.cmc).is_integer():
            return int(self.cmc)
        return self.cmc

    @property
    def main_types(self) -> list[str]:
        """Supertypes and card types, e.g. ["Legendary", "Creature"]."""
        head = self.primary_type_line.split(TYPE_LINE_SEPARATOR)[0]
        return [word for word in head.split(" ") if word]

    @property
    def creature_subtypes(self) -> list[str]:
        type_line = self.primary_type_line
        if CREATURE_MARKER not in type_line:
            return []
        parts = type_line.split(TYPE_LINE_SEPARATOR)
        if len(parts) < 2:
            return []
        return [word for word in parts[1].split(" ") if word]


CardLike = Union[Card, dict[str, Any]]


def as_card(value: CardLike) -> Card:
    """Accept either a Card or a raw Scryfall card dict."""
    if isinstance(value, Card):
        return value
    return Card.from_json(value)
