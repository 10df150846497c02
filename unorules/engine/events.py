"""Game events and a synchronous observer registry."""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, ClassVar, Optional, Union

from unorules.engine.card import Card

if TYPE_CHECKING:
    from unorules.engine.protocol import PlayerProtocol

logger = logging.getLogger(__name__)


class EventKind(str, Enum):
    """Kinds of events fired by the game."""

    PLAYER_PLAY = "player_play"
    PLAYER_DRAW = "player_draw"
    PLAYER_CHANGE = "player_change"


@dataclass(frozen=True)
class PlayerPlayEvent:
    """A player put a card on the discard pile."""

    kind: ClassVar[EventKind] = EventKind.PLAYER_PLAY

    player: "PlayerProtocol"
    card: Card
    next_player: "PlayerProtocol"

    @classmethod
    def fire(cls, player: "PlayerProtocol", card: Card, next_player: "PlayerProtocol") -> "PlayerPlayEvent":
        return cls(player=player, card=card, next_player=next_player)


@dataclass(frozen=True)
class PlayerDrawEvent:
    """A player took cards from the draw deck."""

    kind: ClassVar[EventKind] = EventKind.PLAYER_DRAW

    player: "PlayerProtocol"
    cards: tuple[Card, ...]

    @classmethod
    def fire(cls, player: "PlayerProtocol", cards: list[Card]) -> "PlayerDrawEvent":
        return cls(player=player, cards=tuple(cards))


@dataclass(frozen=True)
class PlayerChangeEvent:
    """The turn passed from ``previous_player`` to ``player``."""

    kind: ClassVar[EventKind] = EventKind.PLAYER_CHANGE

    previous_player: Optional["PlayerProtocol"]
    player: "PlayerProtocol"

    @classmethod
    def fire(cls, previous_player: Optional["PlayerProtocol"], player: "PlayerProtocol") -> "PlayerChangeEvent":
        return cls(previous_player=previous_player, player=player)


Event = Union[PlayerPlayEvent, PlayerDrawEvent, PlayerChangeEvent]
Listener = Callable[[Event], None]


class EventManager:
    """Observer lists per event kind.

    Listeners run synchronously, in registration order, once per fired event.
    They are expected to observe only; calling back into the game from a
    listener is not supported.
    """

    def __init__(self) -> None:
        self._listeners: dict[EventKind, list[Listener]] = defaultdict(list)

    def subscribe(self, kind: Union[EventKind, str], listener: Listener) -> Listener:
        self._listeners[EventKind(kind)].append(listener)
        return listener

    def unsubscribe(self, kind: Union[EventKind, str], listener: Listener) -> bool:
        listeners = self._listeners[EventKind(kind)]
        if listener in listeners:
            listeners.remove(listener)
            return True
        return False

    def on(self, kind: Union[EventKind, str]) -> Callable[[Listener], Listener]:
        """Decorator form of ``subscribe``."""

        def register(listener: Listener) -> Listener:
            return self.subscribe(kind, listener)

        return register

    def listeners(self, kind: Union[EventKind, str]) -> list[Listener]:
        return list(self._listeners[EventKind(kind)])

    def fire_event(self, event: Event) -> None:
        listeners = list(self._listeners[event.kind])
        logger.debug("Firing %s to %d listener(s)", event.kind.value, len(listeners))
        for listener in listeners:
            listener(event)
