"""Capability interfaces the game depends on.

``Game`` only talks to decks and players through these protocols, so a caller
may plug in its own implementations via ``Config.overrides``.
"""

from __future__ import annotations

import random
from typing import Any, List, Optional, Protocol, Union, runtime_checkable

from unorules.engine.card import Card, Color, Value


@runtime_checkable
class DeckProtocol(Protocol):
    """Ordered card container; index 0 is the top."""

    cards: List[Card]

    def get_top_card(self, remove: bool = False) -> Optional[Card]: ...

    def get_card(
        self,
        color: Union[Color, str, None] = None,
        value: Union[Value, str, None] = None,
    ) -> Optional[Card]: ...

    def get_color_counts(self) -> dict[str, int]: ...

    def remove_card(self, card: Card) -> bool: ...

    def add_card(self, card: Card) -> None: ...

    def insert_default_cards(self, rng: Optional[random.Random] = None) -> "DeckProtocol": ...

    def shuffle(self, rng: Optional[random.Random] = None) -> "DeckProtocol": ...

    def to_json(self) -> list[dict[str, Any]]: ...


@runtime_checkable
class PlayerProtocol(Protocol):
    """A player: identity plus a hand."""

    name: str
    id: int
    hand: DeckProtocol

    def get_playable_cards(
        self,
        card: Optional[Card],
        to_play: bool = False,
        is_stacking: bool = False,
    ) -> List[Card]: ...

    def to_json(self) -> dict[str, Any]: ...


# Entry of the player list handed to ``Game``: a bare name, resolved into a
# player at start, or an already constructed player.
PlayerSpec = Union[str, PlayerProtocol]
