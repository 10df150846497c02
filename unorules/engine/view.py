"""Per-player view of a game."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from unorules.engine.card import Card
from unorules.engine.config import Rotation
from unorules.engine.game import Game, GameState
from unorules.engine.protocol import PlayerProtocol


@dataclass
class PlayerView:
    """Game state visible to a single player.

    Contains only that player's hand and public info.
    """

    player_name: str
    my_hand: List[Card]
    top_discard: Optional[Card]
    current_player: Optional[str]
    rotation: Rotation
    state: GameState
    stack_draw_amount: int
    is_stacking: bool
    player_order: tuple[str, ...]
    num_cards_per_player: Dict[str, int]  # player name -> hand size
    history: List[str]  # Recent game events

    @property
    def color_counts(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for card in self.my_hand:
            counts[card.color.value] = counts.get(card.color.value, 0) + 1
        return counts

    @classmethod
    def from_game(
        cls,
        game: Game,
        player: PlayerProtocol,
        history: Sequence[str] = (),
    ) -> "PlayerView":
        """Create a view for ``player``, hiding other players' hands."""
        return cls(
            player_name=player.name,
            my_hand=list(player.hand.cards),
            top_discard=game.top_card,
            current_player=game.current_player.name if game.current_player else None,
            rotation=game.rotation,
            state=game.state,
            stack_draw_amount=game.stack_draw_amount,
            is_stacking=game.is_stacking,
            player_order=tuple(p.name for p in game.players),
            num_cards_per_player={p.name: len(p.hand.cards) for p in game.players},
            history=list(history[-10:]),  # Last 10 events
        )
