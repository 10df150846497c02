"""Tests for JSON snapshots of a game."""

import json

import pytest

from unorules.engine import (
    Card,
    Color,
    Config,
    Game,
    GameState,
    InvalidSnapshotError,
    Player,
    Rotation,
    Value,
    apply_action,
    get_legal_actions,
)
from unorules.agents.computer_agent import ComputerAgent
from unorules.engine.view import PlayerView

from helpers import rig, start_game


def play_turns(game: Game, turns: int) -> None:
    agent = ComputerAgent(seed=5)
    for _ in range(turns):
        if game.is_finished:
            break
        player = game.current_player
        legal = get_legal_actions(game, player)
        apply_action(game, player, agent.get_action(PlayerView.from_game(game, player), legal))


def test_round_trip(four_player_game: Game) -> None:
    play_turns(four_player_game, 12)
    data = four_player_game.to_json()
    restored = Game.from_json(json.loads(json.dumps(data)))

    assert restored.to_json() == data
    assert [p.name for p in restored.players] == [p.name for p in four_player_game.players]
    assert restored.current_player is restored.players[four_player_game.players.index(four_player_game.current_player)]
    assert restored.rotation is four_player_game.rotation
    assert restored.state is four_player_game.state
    assert str(restored.top_card) == str(four_player_game.top_card)
    assert restored.config.stack_cards


def test_round_trip_keeps_stack_state() -> None:
    game = rig(start_game(config=Config(stack_cards=True)),
               {0: [Card(Color.RED, Value.DRAW_TWO), Card(Color.RED, Value.ONE)],
                1: [Card(Color.BLUE, Value.DRAW_TWO), Card(Color.GREEN, Value.THREE)]},
               Card(Color.RED, Value.FIVE))
    game.play(game.players[0], game.players[0].hand.cards[0])

    restored = Game.from_json(game.to_json())
    assert restored.state is GameState.STACK_DRAW
    assert restored.stack_draw_amount == 2
    assert restored.current_player is restored.players[1]

    # the restored game carries on with the same rules
    b = restored.players[1]
    assert restored.play(b, b.hand.cards[0])
    assert len(restored.players[0].hand.cards) == 5


def test_snapshot_shape(two_player_game: Game) -> None:
    data = two_player_game.to_json()
    assert set(data) == {
        "config",
        "init_players",
        "rotation",
        "current_player",
        "state",
        "stack_draw_amount",
        "discarded_cards",
        "decks",
        "players",
    }
    assert data["init_players"] == ["p0", "p1"]
    assert data["state"] == "PLAYING"
    assert data["rotation"] == "CW"
    assert len(data["discarded_cards"]) == 1


def test_unstarted_game_round_trip() -> None:
    game = Game(["a", Player("b", 7)], Config(default_rotation=Rotation.CCW))
    restored = Game.from_json(game.to_json())
    assert restored.state is GameState.NOT_STARTED
    assert restored.current_player is None
    assert restored.rotation is Rotation.CCW
    assert restored.init_players[0] == "a"
    assert restored.init_players[1].id == 7
    restored.start()
    assert restored.state is GameState.PLAYING


def test_config_argument_wins_over_snapshot(two_player_game: Game) -> None:
    restored = Game.from_json(two_player_game.to_json(), Config(stack_cards=True, initial_cards=3))
    assert restored.config.stack_cards
    assert restored.config.initial_cards == 3


@pytest.mark.parametrize("missing", ["init_players", "decks", "players", "discarded_cards"])
def test_missing_fields_fail(two_player_game: Game, missing: str) -> None:
    data = two_player_game.to_json()
    del data[missing]
    with pytest.raises(InvalidSnapshotError, match=f"No {missing}"):
        Game.from_json(data)


def test_empty_snapshot_fails() -> None:
    with pytest.raises(InvalidSnapshotError, match="No JSON provided"):
        Game.from_json(None)
    with pytest.raises(InvalidSnapshotError):
        Game.from_json(["not", "a", "dict"])


def test_bad_values_fail(two_player_game: Game) -> None:
    data = two_player_game.to_json()
    data["players"][0]["hand"][0]["color"] = "PURPLE"
    with pytest.raises(InvalidSnapshotError):
        Game.from_json(data)

    data = two_player_game.to_json()
    data["current_player"] = 9
    with pytest.raises(InvalidSnapshotError):
        Game.from_json(data)
