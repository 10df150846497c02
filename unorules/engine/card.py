"""Card, Color and Value types for UNO."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class Color(str, Enum):
    """Card colors. BLACK marks a wild card whose color is not chosen yet."""

    RED = "RED"
    GREEN = "GREEN"
    BLUE = "BLUE"
    YELLOW = "YELLOW"
    BLACK = "BLACK"

    def is_wild(self) -> bool:
        return self is Color.BLACK

    def __str__(self) -> str:
        return self.value

    def to_json(self) -> str:
        return self.value

    @classmethod
    def from_json(cls, data: str) -> "Color":
        return cls(data)


class Value(str, Enum):
    """Card values."""

    ZERO = "ZERO"
    ONE = "ONE"
    TWO = "TWO"
    THREE = "THREE"
    FOUR = "FOUR"
    FIVE = "FIVE"
    SIX = "SIX"
    SEVEN = "SEVEN"
    EIGHT = "EIGHT"
    NINE = "NINE"
    SKIP = "SKIP"
    REVERSE = "REVERSE"
    DRAW_TWO = "DRAW_TWO"
    WILD = "WILD"
    WILD_DRAW_FOUR = "WILD_DRAW_FOUR"

    def is_wild(self) -> bool:
        return self in (Value.WILD, Value.WILD_DRAW_FOUR)

    def __str__(self) -> str:
        return self.value

    def to_json(self) -> str:
        return self.value

    @classmethod
    def from_json(cls, data: str) -> "Value":
        return cls(data)


# Values that may be stacked on a card of the same value
STACKABLE_VALUES = (Value.DRAW_TWO, Value.WILD_DRAW_FOUR)

# Concrete colors a wild card can take
PLAYABLE_COLORS = (Color.RED, Color.GREEN, Color.BLUE, Color.YELLOW)


@dataclass(eq=False)
class Card:
    """A UNO card.

    Cards compare by identity: two RED FIVEs in a hand are distinct cards.
    Wild cards start with ``wild_picked_color`` BLACK; the player picks a color
    before committing the card, and ``commit_wild_color`` turns the card into
    that color once it is played.
    """

    color: Color
    value: Value
    wild: bool = False
    wild_picked_color: Optional[Color] = None

    def __post_init__(self) -> None:
        self.color = Color(self.color)
        self.value = Value(self.value)
        self.wild = bool(self.wild) or (self.color.is_wild() and self.value.is_wild())
        if self.wild_picked_color is not None:
            self.wild_picked_color = Color(self.wild_picked_color)
        elif self.wild:
            self.wild_picked_color = Color.BLACK

    def is_valid_on(
        self,
        card: Optional["Card"],
        to_play: bool = False,
        is_stacking: bool = False,
    ) -> bool:
        """Check whether this card can be played on top of ``card``.

        Args:
            card: The top card of the discard pile.
            to_play: The card is about to be committed, so a wild card must
                already carry a chosen color.
            is_stacking: A draw stack is pending; only the same draw card may
                be stacked.
        """
        if card is None:
            return False

        if is_stacking:
            if self.value in STACKABLE_VALUES:
                return card.value == self.value
            return False

        if self.wild and card.wild:
            return False

        if self.wild and not to_play:
            return True

        if self.wild:
            return self.wild_picked_color is not None and not self.wild_picked_color.is_wild()

        return self.color == card.color or self.value == card.value

    def set_color(self, color: Union[Color, str]) -> None:
        self.color = Color(color)

    def set_value(self, value: Union[Value, str]) -> None:
        self.value = Value(value)

    def pick_color(self, color: Union[Color, str, None]) -> None:
        """Declare the color a wild card will take when played."""
        self.wild_picked_color = Color(color) if color is not None else None

    def commit_wild_color(self) -> None:
        """Fix a played wild card to its picked color."""
        if self.wild and self.wild_picked_color is not None:
            self.color = self.wild_picked_color

    def reset_wild(self) -> None:
        """Return a wild card to its unplayed, colorless state."""
        if self.wild:
            self.color = Color.BLACK
            self.wild_picked_color = Color.BLACK

    def __str__(self) -> str:
        return f"{self.color} {self.value}"

    def to_json(self) -> dict[str, Any]:
        return {
            "color": self.color.to_json(),
            "value": self.value.to_json(),
            "wild": self.wild,
            "wild_picked_color": self.wild_picked_color.to_json() if self.wild_picked_color else None,
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Card":
        return cls(
            color=Color.from_json(data["color"]),
            value=Value.from_json(data["value"]),
            wild=bool(data.get("wild", False)),
            wild_picked_color=Color.from_json(data["wild_picked_color"]) if data.get("wild_picked_color") else None,
        )
