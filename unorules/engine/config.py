"""Game configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional

from unorules.engine.deck import Deck
from unorules.engine.player import Player

if TYPE_CHECKING:
    from unorules.engine.card import Card
    from unorules.engine.game import Game
    from unorules.engine.protocol import PlayerProtocol

ENV_PREFIX = "UNO_"

_TRUTHY = ("1", "true", "yes", "on")


class Rotation(str, Enum):
    """Direction in which turns move around the player list."""

    CW = "CW"
    CCW = "CCW"

    def flipped(self) -> "Rotation":
        return Rotation.CCW if self is Rotation.CW else Rotation.CW


@dataclass
class Overrides:
    """Caller supplied implementations.

    ``deck_class`` and ``player_class`` must satisfy ``DeckProtocol`` and
    ``PlayerProtocol``. ``game_logic``, when set, replaces the built-in
    special card handling and is called as ``game_logic(game, player, card)``.
    """

    deck_class: type = Deck
    player_class: type = Player
    game_logic: Optional[Callable[["Game", "PlayerProtocol", "Card"], None]] = None


@dataclass
class Config:
    """Rules and setup options, read when the game is built and started."""

    default_rotation: Rotation = Rotation.CW
    players_per_deck: int = 10
    initial_cards: int = 7
    stack_cards: bool = False
    overrides: Overrides = field(default_factory=Overrides)

    def __post_init__(self) -> None:
        self.default_rotation = Rotation(self.default_rotation)
        if not isinstance(self.players_per_deck, int) or self.players_per_deck < 1:
            raise ValueError(f"players_per_deck must be a positive integer, got {self.players_per_deck!r}")
        if not isinstance(self.initial_cards, int) or self.initial_cards < 0:
            raise ValueError(f"initial_cards must be a non-negative integer, got {self.initial_cards!r}")
        self.stack_cards = bool(self.stack_cards)

    def to_json(self) -> dict[str, Any]:
        return {
            "default_rotation": self.default_rotation.value,
            "players_per_deck": self.players_per_deck,
            "initial_cards": self.initial_cards,
            "stack_cards": self.stack_cards,
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any], overrides: Optional[Overrides] = None) -> "Config":
        defaults = cls()
        return cls(
            default_rotation=data.get("default_rotation", defaults.default_rotation),
            players_per_deck=int(data.get("players_per_deck", defaults.players_per_deck)),
            initial_cards=int(data.get("initial_cards", defaults.initial_cards)),
            stack_cards=bool(data.get("stack_cards", defaults.stack_cards)),
            overrides=overrides or Overrides(),
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Build a config from ``UNO_*`` environment variables.

        Recognised: UNO_DEFAULT_ROTATION, UNO_PLAYERS_PER_DECK,
        UNO_INITIAL_CARDS, UNO_STACK_CARDS. Unset variables keep defaults.
        """
        env = os.environ if environ is None else environ
        data: dict[str, Any] = {}
        if f"{ENV_PREFIX}DEFAULT_ROTATION" in env:
            data["default_rotation"] = env[f"{ENV_PREFIX}DEFAULT_ROTATION"].strip().upper()
        if f"{ENV_PREFIX}PLAYERS_PER_DECK" in env:
            data["players_per_deck"] = int(env[f"{ENV_PREFIX}PLAYERS_PER_DECK"])
        if f"{ENV_PREFIX}INITIAL_CARDS" in env:
            data["initial_cards"] = int(env[f"{ENV_PREFIX}INITIAL_CARDS"])
        if f"{ENV_PREFIX}STACK_CARDS" in env:
            data["stack_cards"] = env[f"{ENV_PREFIX}STACK_CARDS"].strip().lower() in _TRUTHY
        return cls.from_json(data)
