"""Game engine for UNO."""

from unorules.engine.actions import (
    Action,
    DrawCard,
    PlayCard,
    apply_action,
    get_legal_actions,
)
from unorules.engine.card import PLAYABLE_COLORS, STACKABLE_VALUES, Card, Color, Value
from unorules.engine.config import Config, Overrides, Rotation
from unorules.engine.deck import CARD_COUNTS, DEFAULT_DECK_SIZE, Deck, create_deck
from unorules.engine.errors import (
    GameAlreadyStartedError,
    InvalidSnapshotError,
    NoOpeningCardError,
    NotEnoughPlayersError,
    UnoError,
)
from unorules.engine.events import (
    EventKind,
    EventManager,
    PlayerChangeEvent,
    PlayerDrawEvent,
    PlayerPlayEvent,
)
from unorules.engine.game import Game, GameState
from unorules.engine.player import Player
from unorules.engine.protocol import DeckProtocol, PlayerProtocol, PlayerSpec
from unorules.engine.view import PlayerView

__all__ = [
    "Action",
    "CARD_COUNTS",
    "Card",
    "Color",
    "Config",
    "DEFAULT_DECK_SIZE",
    "Deck",
    "DeckProtocol",
    "DrawCard",
    "EventKind",
    "EventManager",
    "Game",
    "GameAlreadyStartedError",
    "GameState",
    "InvalidSnapshotError",
    "NoOpeningCardError",
    "NotEnoughPlayersError",
    "Overrides",
    "PLAYABLE_COLORS",
    "PlayCard",
    "Player",
    "PlayerChangeEvent",
    "PlayerDrawEvent",
    "PlayerPlayEvent",
    "PlayerProtocol",
    "PlayerSpec",
    "PlayerView",
    "Rotation",
    "STACKABLE_VALUES",
    "UnoError",
    "Value",
    "apply_action",
    "create_deck",
    "get_legal_actions",
]
