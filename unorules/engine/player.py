"""UNO player holding a hand of cards."""

from __future__ import annotations

from typing import Any, List, Optional

from unorules.engine.card import Card
from unorules.engine.deck import Deck


class Player:
    """A seat at the table: name, numeric id and a hand."""

    def __init__(self, name: str, id: int = -1, hand: Optional[Deck] = None):
        self.name = name
        self.id = id
        self.hand = hand if hand is not None else Deck()

    def get_playable_cards(
        self,
        card: Optional[Card],
        to_play: bool = False,
        is_stacking: bool = False,
    ) -> List[Card]:
        """Cards from the hand that are valid on ``card``."""
        return [c for c in self.hand.cards if c.is_valid_on(card, to_play, is_stacking)]

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, id={self.id}, cards={len(self.hand)})"

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "hand": self.hand.to_json(),
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Player":
        player = cls(data["name"], data.get("id", -1))
        player.hand = Deck.from_json(data.get("hand", []))
        return player
