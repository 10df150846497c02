"""Agent actions and their translation into game commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union

from unorules.engine.card import PLAYABLE_COLORS, Card, Color
from unorules.engine.game import Game, GameState
from unorules.engine.protocol import PlayerProtocol


@dataclass
class PlayCard:
    """Action: play a card. For wilds, chosen_color is required."""

    card: Card
    chosen_color: Optional[Color] = None


@dataclass
class DrawCard:
    """Action: draw (also how a player absorbs a pending draw stack)."""

    pass


Action = Union[PlayCard, DrawCard]


def get_legal_actions(game: Game, player: PlayerProtocol) -> List[Action]:
    """Return all legal actions for ``player``.

    Nothing is legal unless the game is running and it is the player's turn.
    Wild cards are offered once per concrete color.
    """
    if game.state is GameState.NOT_STARTED or game.is_finished:
        return []
    if game.current_player is not player:
        return []

    actions: List[Action] = []
    for card in player.get_playable_cards(game.top_card, False, game.is_stacking):
        if card.wild:
            for color in PLAYABLE_COLORS:
                actions.append(PlayCard(card=card, chosen_color=color))
        else:
            actions.append(PlayCard(card=card))

    # Drawing is always allowed
    actions.append(DrawCard())
    return actions


def apply_action(game: Game, player: PlayerProtocol, action: Action) -> bool:
    """Apply an action to the game. Returns False if the game rejected it."""
    if isinstance(action, DrawCard):
        return game.draw(player)

    if action.card.wild:
        if action.chosen_color is None:
            raise ValueError("Wild card requires chosen_color")
        action.card.pick_color(action.chosen_color)
    return game.play(player, action.card)
