"""Shared fixtures."""

import pytest

from unorules.engine import Config, Game

from helpers import start_game


@pytest.fixture
def two_player_game() -> Game:
    """A started two player game with a fixed seed."""
    return start_game(num_players=2, seed=11)


@pytest.fixture
def four_player_game() -> Game:
    """A started four player game with stacking enabled."""
    return start_game(num_players=4, seed=12, config=Config(stack_cards=True))
