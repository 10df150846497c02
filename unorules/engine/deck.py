"""Deck of cards: draw pile, discard pile or hand."""

from __future__ import annotations

import random
from typing import Any, Iterator, List, Optional, Union

from unorules.engine.card import Card, Color, Value

# Copies of each card in one standard 108-card deck
CARD_COUNTS: dict[Color, dict[Value, int]] = {
    **{
        color: {
            Value.ZERO: 1,
            Value.ONE: 2,
            Value.TWO: 2,
            Value.THREE: 2,
            Value.FOUR: 2,
            Value.FIVE: 2,
            Value.SIX: 2,
            Value.SEVEN: 2,
            Value.EIGHT: 2,
            Value.NINE: 2,
            Value.SKIP: 2,
            Value.REVERSE: 2,
            Value.DRAW_TWO: 2,
        }
        for color in (Color.RED, Color.GREEN, Color.BLUE, Color.YELLOW)
    },
    Color.BLACK: {
        Value.WILD: 4,
        Value.WILD_DRAW_FOUR: 4,
    },
}

DEFAULT_DECK_SIZE = sum(sum(counts.values()) for counts in CARD_COUNTS.values())


class Deck:
    """Ordered container of cards. Index 0 is the top of the deck."""

    def __init__(self, cards: Optional[List[Card]] = None):
        self.cards: List[Card] = list(cards) if cards is not None else []

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def get_top_card(self, remove: bool = False) -> Optional[Card]:
        """Peek at the top card, or pop it when ``remove`` is set."""
        if not self.cards:
            return None
        if remove:
            return self.cards.pop(0)
        return self.cards[0]

    def get_card(
        self,
        color: Union[Color, str, None] = None,
        value: Union[Value, str, None] = None,
    ) -> Optional[Card]:
        """Find the first card matching ``color`` and/or ``value``.

        Wild cards are nominally BLACK, so when searching for a wild value the
        color is not matched; instead the found card takes ``color`` as its
        picked color.
        """
        if color is None and value is None:
            return None

        color = Color(color) if color is not None else None
        value = Value(value) if value is not None else None
        wild_search = value is not None and value.is_wild()

        for card in self.cards:
            color_matches = wild_search or color is None or card.color == color
            value_matches = value is None or card.value == value
            if color_matches and value_matches:
                if card.wild and color is not None:
                    card.pick_color(color)
                return card
        return None

    def get_color_counts(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for card in self.cards:
            counts[card.color.value] = counts.get(card.color.value, 0) + 1
        return counts

    def remove_card(self, card: Card) -> bool:
        """Remove ``card`` by identity, falling back to the first color+value match."""
        for i, c in enumerate(self.cards):
            if c is card:
                del self.cards[i]
                return True
        for i, c in enumerate(self.cards):
            if c.color == card.color and c.value == card.value:
                del self.cards[i]
                return True
        return False

    def add_card(self, card: Card) -> None:
        """Put a card on top of the deck."""
        self.cards.insert(0, card)

    def insert_default_cards(self, rng: Optional[random.Random] = None) -> "Deck":
        """Replace the contents with a freshly shuffled standard deck."""
        self.cards = []
        for color, counts in CARD_COUNTS.items():
            for value, count in counts.items():
                for _ in range(count):
                    self.add_card(Card(color, value, wild=color is Color.BLACK))
        return self.shuffle(rng)

    def shuffle(self, rng: Optional[random.Random] = None) -> "Deck":
        """Fisher-Yates shuffle in place."""
        rand = rng or random
        for i in range(len(self.cards) - 1, 0, -1):
            j = rand.randint(0, i)
            self.cards[i], self.cards[j] = self.cards[j], self.cards[i]
        return self

    def to_json(self) -> list[dict[str, Any]]:
        return [card.to_json() for card in self.cards]

    @classmethod
    def from_json(cls, data: list[dict[str, Any]]) -> "Deck":
        return cls([Card.from_json(c) for c in data])

    def __str__(self) -> str:
        return ", ".join(str(c) for c in self.cards)


def create_deck(seed: int | None = None) -> Deck:
    """Create a shuffled standard 108-card UNO deck.

    - 4 colors x (one 0, two each of 1-9, Skip, Reverse, Draw Two): 100 cards
    - 4 Wild, 4 Wild Draw Four: 8 cards
    """
    rng = random.Random(seed) if seed is not None else None
    return Deck().insert_default_cards(rng)
