"""Unit tests for the history the game runner records from events."""

from unorules.agents.computer_agent import ComputerAgent
from unorules.engine import Card, Color, DrawCard, PlayCard, Value, apply_action
from unorules.orchestration.game_runner import GameRunner

from helpers import rig


def make_runner(seed: int = 42) -> GameRunner:
    agents = {"p1": ComputerAgent(seed=1), "p2": ComputerAgent(seed=2)}
    runner = GameRunner(agents, seed=seed)
    runner.game.start()
    return runner


def test_history_initialization() -> None:
    runner = make_runner()
    assert runner.history == []


def test_history_records_play() -> None:
    runner = make_runner()
    game = rig(runner.game, {0: [Card(Color.RED, Value.ONE), Card(Color.RED, Value.TWO)]},
               Card(Color.RED, Value.FIVE))
    card = game.players[0].hand.cards[0]
    assert apply_action(game, game.players[0], PlayCard(card=card))

    assert runner.history == ["p1 played RED ONE"]


def test_history_records_draw() -> None:
    runner = make_runner()
    player = runner.game.current_player
    assert apply_action(runner.game, player, DrawCard())
    assert runner.history == [f"{player.name} drew 1 card"]


def test_history_persists_across_turns() -> None:
    runner = make_runner()
    game = rig(runner.game, {0: [Card(Color.RED, Value.ONE), Card(Color.RED, Value.TWO)]},
               Card(Color.RED, Value.FIVE))
    apply_action(game, game.players[0], PlayCard(card=game.players[0].hand.cards[0]))
    apply_action(game, game.players[1], DrawCard())

    assert len(runner.history) == 2
    assert "p1 played" in runner.history[0]
    assert "p2 drew" in runner.history[1]


def test_forced_draw_is_recorded() -> None:
    runner = make_runner()
    game = rig(runner.game, {0: [Card(Color.RED, Value.DRAW_TWO), Card(Color.RED, Value.TWO)]},
               Card(Color.RED, Value.FIVE))
    apply_action(game, game.players[0], PlayCard(card=game.players[0].hand.cards[0]))
    assert runner.history == ["p2 drew 2 cards", "p1 played RED DRAW_TWO"]
