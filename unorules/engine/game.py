"""UNO game: turn order, special cards and draw stacking."""

from __future__ import annotations

import logging
import math
import random
from enum import Enum
from typing import Any, List, Optional, Sequence, TypeVar, Union

from unorules.engine.card import Card, Value
from unorules.engine.config import Config, Rotation
from unorules.engine.errors import (
    GameAlreadyStartedError,
    InvalidSnapshotError,
    NoOpeningCardError,
    NotEnoughPlayersError,
)
from unorules.engine.events import (
    EventManager,
    PlayerChangeEvent,
    PlayerDrawEvent,
    PlayerPlayEvent,
)
from unorules.engine.protocol import DeckProtocol, PlayerProtocol, PlayerSpec

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Values that may not open the discard pile
_BAD_OPENING_VALUES = (Value.DRAW_TWO, Value.REVERSE, Value.SKIP)

# How many cards each draw card hands to the next player
_DRAW_AMOUNTS = {Value.DRAW_TWO: 2, Value.WILD_DRAW_FOUR: 4}

# Default for get_next_player's current_player; None has its own meaning there
_CURRENT = object()


class GameState(str, Enum):
    """Game lifecycle states. CONTEST is reserved and never entered."""

    NOT_STARTED = "NOT_STARTED"
    PLAYING = "PLAYING"
    STACK_DRAW = "STACK_DRAW"
    CONTEST = "CONTEST"


class Game:
    """A single UNO game.

    Players are given as names or player objects; names become players when
    the game starts. ``play`` and ``draw`` return ``False`` on rule violations
    (wrong turn, unplayable card, ...) without changing the game.
    """

    def __init__(
        self,
        players: Optional[Sequence[PlayerSpec]] = None,
        config: Optional[Config] = None,
        rng: Optional[random.Random] = None,
    ):
        players = [] if players is None else players
        if not isinstance(players, (list, tuple)):
            raise TypeError("Players must be a list")
        for player in players:
            if not isinstance(player, (str, PlayerProtocol)):
                raise TypeError("Players must be a list of names or player instances")

        config = Config() if config is None else config
        if not isinstance(config, Config):
            raise TypeError("Config must be an instance of Config")

        self.config = config
        self._deck_class = config.overrides.deck_class
        self._player_class = config.overrides.player_class
        self._rng = rng or random.Random()

        self.init_players: List[PlayerSpec] = list(players)
        self.rotation: Rotation = config.default_rotation
        self.current_player: Optional[PlayerProtocol] = None
        self.state = GameState.NOT_STARTED
        self.stack_draw_amount = 0
        self.discarded_cards: DeckProtocol = self._deck_class()
        self.decks: List[DeckProtocol] = []
        self.players: List[PlayerProtocol] = []
        self.event_manager = EventManager()

    # ------------------------------------------------------------------ #
    # Queries

    @property
    def is_stacking(self) -> bool:
        return self.config.stack_cards and self.state is GameState.STACK_DRAW

    @property
    def top_card(self) -> Optional[Card]:
        return self.discarded_cards.get_top_card()

    @property
    def winner(self) -> Optional[PlayerProtocol]:
        if self.state is GameState.NOT_STARTED:
            return None
        for player in self.players:
            if not player.hand.cards:
                return player
        return None

    @property
    def is_finished(self) -> bool:
        return self.winner is not None

    @property
    def cards_available(self) -> int:
        """Cards that can still be drawn, counting a reshuffle of the discard pile."""
        in_decks = sum(len(deck.cards) for deck in self.decks)
        return in_decks + max(len(self.discarded_cards.cards) - 1, 0)

    @property
    def is_exhausted(self) -> bool:
        return self.cards_available == 0

    # ------------------------------------------------------------------ #
    # Commands

    def start(self) -> None:
        """Build the decks, deal, pick the first player and the opening card."""
        if len(self.init_players) < 2:
            raise NotEnoughPlayersError("Not enough players")
        if self.state is not GameState.NOT_STARTED:
            raise GameAlreadyStartedError("Game already started")

        decks_needed = math.ceil(len(self.init_players) / self.config.players_per_deck)
        self.decks = [self._deck_class().insert_default_cards(self._rng) for _ in range(decks_needed)]

        for index, spec in enumerate(self.init_players):
            player = self._resolve_player(spec, index)
            if self.config.initial_cards > 0:
                self.draw(player, self.config.initial_cards, False, True, True, True)
            self.players.append(player)

        self.current_player = self._random_choice(self.players)

        deck = self._get_deck()
        candidates = [
            c for c in deck.cards
            if not c.color.is_wild() and c.value not in _BAD_OPENING_VALUES
        ]
        card = self._random_choice(candidates)
        if card is None:
            raise NoOpeningCardError("No valid opening card left in the draw deck")
        deck.remove_card(card)
        self.discarded_cards.add_card(card)

        self.state = GameState.PLAYING
        logger.info(
            "Started game: %d players, %d deck(s), opening card %s, %s to play",
            len(self.players), decks_needed, card, self.current_player.name,
        )

    def draw(
        self,
        player: PlayerProtocol,
        count: int = 1,
        advance_turn: bool = True,
        silent_draw: bool = False,
        silent_advance: bool = False,
        force: bool = False,
    ) -> bool:
        """Draw cards for ``player``.

        Args:
            player: The player drawing.
            count: Number of cards; replaced by the pending amount when a draw
                stack is in progress.
            advance_turn: Pass the turn afterwards.
            silent_draw: Do not fire a draw event.
            silent_advance: Do not fire a player change event.
            force: Skip the turn check.

        Returns:
            Whether the requested number of cards was drawn.
        """
        if player is None:
            raise TypeError("No player provided")
        if not isinstance(player, PlayerProtocol):
            raise TypeError("Player must implement PlayerProtocol")
        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeError("Count must be an integer")
        if count < 1:
            return False
        if not force and player is not self.current_player:
            return False

        if self.state is GameState.STACK_DRAW:
            count = self.stack_draw_amount
            self.stack_draw_amount = 0
            self.state = GameState.PLAYING
            logger.debug("%s absorbs a stack of %d cards", player.name, count)

        deck = self._get_deck()
        drawn: List[Card] = []
        while len(drawn) < count:
            if not deck.cards:
                deck = self._get_deck()
                if not deck.cards:
                    break
                continue
            card = deck.get_top_card(remove=True)
            player.hand.add_card(card)
            drawn.append(card)

        if len(drawn) < count:
            logger.warning("%s could only draw %d of %d cards", player.name, len(drawn), count)
        else:
            logger.debug("%s drew %d card(s)", player.name, len(drawn))

        if not silent_draw:
            self.event_manager.fire_event(PlayerDrawEvent.fire(player, drawn))

        if advance_turn:
            self.set_next_player(silent_advance)

        return len(drawn) == count

    def play(self, player: PlayerProtocol, card: Card) -> bool:
        """Play ``card`` from ``player``'s hand. Returns False if not allowed."""
        if player is None:
            raise TypeError("No player provided")
        if not isinstance(player, PlayerProtocol):
            raise TypeError("Player must implement PlayerProtocol")
        if card is None:
            raise TypeError("No card provided")
        if not isinstance(card, Card):
            raise TypeError("Card must be an instance of Card")

        if not any(c is card for c in player.hand.cards):
            logger.debug("%s does not hold %s", player.name, card)
            return False
        if player is not self.current_player:
            logger.debug("%s tried to play out of turn", player.name)
            return False
        if not card.is_valid_on(self.top_card, True, self.is_stacking):
            logger.debug("%s cannot be played on %s", card, self.top_card)
            return False

        if card.wild:
            card.commit_wild_color()

        game_logic = self.config.overrides.game_logic
        if callable(game_logic):
            game_logic(self, player, card)
        else:
            self._apply_card_effect(player, card)

        player.hand.remove_card(card)
        self.discarded_cards.add_card(card)
        logger.debug("%s played %s", player.name, card)
        self.event_manager.fire_event(PlayerPlayEvent.fire(player, card, self.get_next_player()))
        self.set_next_player()
        return True

    def get_next_player(
        self,
        rotation: Union[Rotation, str, None] = None,
        current_player: Any = _CURRENT,
    ) -> Optional[PlayerProtocol]:
        """Player one seat away from ``current_player`` in ``rotation``.

        With ``current_player=None`` a random player is returned.
        """
        rotation = self.rotation if rotation is None else Rotation(rotation)
        if current_player is _CURRENT:
            current_player = self.current_player
        if current_player is None:
            return self._random_choice(self.players)
        if not isinstance(current_player, PlayerProtocol):
            raise TypeError("current_player must be a player or None")

        index = self._index_of(current_player)
        if index is None:
            raise ValueError(f"Unknown player: {current_player.name}")

        step = 1 if rotation is Rotation.CW else -1
        return self.players[(index + step) % len(self.players)]

    def set_next_player(self, silent: bool = False) -> None:
        previous = self.current_player
        self.current_player = self.get_next_player()
        if not silent:
            self.event_manager.fire_event(PlayerChangeEvent.fire(previous, self.current_player))

    def flip_direction(self) -> None:
        self.rotation = self.rotation.flipped()

    # ------------------------------------------------------------------ #
    # Special cards

    def _apply_card_effect(self, player: PlayerProtocol, card: Card) -> None:
        if card.value is Value.REVERSE:
            self.flip_direction()
            # With two players a reverse acts as a skip
            if len(self.players) == 2:
                self.set_next_player(True)
        elif card.value is Value.SKIP:
            self.set_next_player(True)
        elif card.value in _DRAW_AMOUNTS:
            self._apply_draw_card(card.value)

    def _apply_draw_card(self, value: Value) -> None:
        amount = _DRAW_AMOUNTS[value]
        next_player = self.get_next_player()

        if self.config.stack_cards and next_player.hand.get_card(None, value) is not None:
            self.stack_draw_amount += amount
            self.state = GameState.STACK_DRAW
            logger.debug("Draw stack at %d, %s may stack", self.stack_draw_amount, next_player.name)
        elif self.state is GameState.STACK_DRAW:
            # draw() takes the pending amount and resets the stack
            self.stack_draw_amount += amount
            self.draw(next_player, self.stack_draw_amount, True, False, True, True)
        else:
            self.draw(next_player, amount, True, False, True, True)

    # ------------------------------------------------------------------ #
    # Serialization

    def to_json(self) -> dict[str, Any]:
        current = self._index_of(self.current_player) if self.current_player is not None else None
        return {
            "config": self.config.to_json(),
            "init_players": [p if isinstance(p, str) else p.to_json() for p in self.init_players],
            "rotation": self.rotation.value,
            "current_player": current,
            "state": self.state.value,
            "stack_draw_amount": self.stack_draw_amount,
            "discarded_cards": self.discarded_cards.to_json(),
            "decks": [deck.to_json() for deck in self.decks],
            "players": [player.to_json() for player in self.players],
        }

    @classmethod
    def from_json(
        cls,
        data: Any,
        config: Optional[Config] = None,
        rng: Optional[random.Random] = None,
    ) -> "Game":
        """Rebuild a game from ``to_json`` output.

        Rule options come from ``config`` when given, otherwise from the
        snapshot itself.
        """
        if not data:
            raise InvalidSnapshotError("No JSON provided")
        if not isinstance(data, dict):
            raise InvalidSnapshotError("Snapshot must be an object")
        for key in ("init_players", "decks", "players", "discarded_cards"):
            if data.get(key) is None:
                raise InvalidSnapshotError(f"No {key}")

        if config is None:
            config = Config.from_json(data.get("config") or {})
        deck_class = config.overrides.deck_class
        player_class = config.overrides.player_class

        try:
            init_players = [
                p if isinstance(p, str) else player_class.from_json(p)
                for p in data["init_players"]
            ]
            game = cls(init_players, config, rng)
            game.rotation = Rotation(data.get("rotation", config.default_rotation))
            game.state = GameState(data.get("state", GameState.PLAYING))
            game.stack_draw_amount = int(data.get("stack_draw_amount", 0))
            game.decks = [deck_class.from_json(d) for d in data["decks"]]
            game.players = [player_class.from_json(p) for p in data["players"]]
            game.discarded_cards = deck_class.from_json(data["discarded_cards"])
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidSnapshotError(f"{type(e).__name__}: {e}") from e

        current = data.get("current_player")
        if current is not None:
            if not isinstance(current, int) or not 0 <= current < len(game.players):
                raise InvalidSnapshotError(f"current_player {current!r} is out of range")
            game.current_player = game.players[current]

        return game

    # ------------------------------------------------------------------ #
    # Internals

    def _resolve_player(self, spec: PlayerSpec, index: int) -> PlayerProtocol:
        if isinstance(spec, str):
            return self._player_class(spec, index)
        if spec.id < 0:
            spec.id = index
        return spec

    def _index_of(self, player: PlayerProtocol) -> Optional[int]:
        for i, p in enumerate(self.players):
            if p is player:
                return i
        return None

    def _get_deck(self) -> DeckProtocol:
        """First draw deck with cards left, reshuffling the discard pile if none."""
        for deck in self.decks:
            if deck.cards:
                return deck

        top = self.discarded_cards.get_top_card(remove=True)
        recycled = list(self.discarded_cards.cards)
        for card in recycled:
            card.reset_wild()

        self.discarded_cards = self._deck_class()
        if top is not None:
            self.discarded_cards.add_card(top)

        deck = self._deck_class()
        deck.cards = recycled
        deck.shuffle(self._rng)
        self.decks = [deck]
        if recycled:
            logger.info("Reshuffled %d discarded cards into a new draw deck", len(recycled))
        return deck

    def _random_choice(self, items: Sequence[T]) -> Optional[T]:
        if not items:
            return None
        return items[self._rng.randrange(len(items))]
