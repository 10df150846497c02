"""Helpers for building games in a known position."""

import random
from typing import Optional

from unorules.engine import Card, Config, Deck, Game


def start_game(
    num_players: int = 2,
    seed: int = 0,
    config: Optional[Config] = None,
) -> Game:
    game = Game([f"p{i}" for i in range(num_players)], config or Config(), random.Random(seed))
    game.start()
    return game


def rig(
    game: Game,
    hands: dict[int, list[Card]],
    top: Card,
    current: int = 0,
) -> Game:
    """Replace hands, discard pile and current player of a started game."""
    for index, cards in hands.items():
        game.players[index].hand = Deck(cards)
    game.discarded_cards = Deck([top])
    game.current_player = game.players[current]
    return game
