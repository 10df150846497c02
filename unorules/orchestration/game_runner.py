"""Single game runner."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from unorules.engine import (
    Config,
    DrawCard,
    EventKind,
    Game,
    GameState,
    PlayCard,
    PlayerView,
    apply_action,
    get_legal_actions,
)

if TYPE_CHECKING:
    from unorules.agent.protocol import AgentProtocol
    from unorules.engine.events import PlayerDrawEvent, PlayerPlayEvent

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a completed game. ``winner`` is None for a drawn game."""

    winner: Optional[str]
    num_turns: int
    player_ids: tuple[str, ...]
    history: list[str] = field(default_factory=list)


class GameRunner:
    """Runs a single UNO game to completion.

    Agents are keyed by player name. A game that is passed in (for example
    one restored from a snapshot) is continued instead of a new one started.
    """

    def __init__(
        self,
        agents: dict[str, "AgentProtocol"],
        seed: Optional[int] = None,
        config: Optional[Config] = None,
        game: Optional[Game] = None,
        max_turns: int = 1000,
    ):
        self._agents = agents
        self._seed = seed
        self._max_turns = max_turns
        self.history: list[str] = []
        self.game = game or Game(list(agents.keys()), config, random.Random(seed))
        self.game.event_manager.subscribe(EventKind.PLAYER_PLAY, self._record_play)
        self.game.event_manager.subscribe(EventKind.PLAYER_DRAW, self._record_draw)

    def _record_play(self, event: "PlayerPlayEvent") -> None:
        self.history.append(f"{event.player.name} played {event.card}")

    def _record_draw(self, event: "PlayerDrawEvent") -> None:
        n = len(event.cards)
        self.history.append(f"{event.player.name} drew {n} card{'s' if n != 1 else ''}")

    def run(self) -> GameResult:
        """Run the game and return the result."""
        game = self.game
        if game.state is GameState.NOT_STARTED:
            game.start()
        num_turns = 0

        while not game.is_finished and num_turns < self._max_turns:
            player = game.current_player
            agent = self._agents[player.name]
            legal = get_legal_actions(game, player)
            if not legal:
                break

            view = PlayerView.from_game(game, player, self.history)
            action = agent.get_action(view, legal) or DrawCard()

            ok = apply_action(game, player, action)
            if not ok and isinstance(action, PlayCard):
                logger.warning("%s could not play %s, drawing instead", player.name, action.card)
                ok = game.draw(player)
            num_turns += 1

            if not ok and game.is_exhausted:
                logger.warning("No cards left to draw after %d turns, ending in a draw", num_turns)
                break

        winner = game.winner
        return GameResult(
            winner=winner.name if winner else None,
            num_turns=num_turns,
            player_ids=tuple(p.name for p in game.players),
            history=list(self.history),
        )
