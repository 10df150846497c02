"""Tests for legal actions, player views and applying actions."""

import pytest

from unorules.engine import (
    PLAYABLE_COLORS,
    Card,
    Color,
    DrawCard,
    Game,
    PlayCard,
    Player,
    PlayerView,
    Value,
    apply_action,
    get_legal_actions,
)

from helpers import rig, start_game


def test_no_actions_before_start_or_out_of_turn() -> None:
    game = Game(["a", "b"])
    assert get_legal_actions(game, Player("a")) == []

    game = start_game()
    other = game.get_next_player()
    assert get_legal_actions(game, other) == []


def test_wilds_are_offered_per_color() -> None:
    wild = Card(Color.BLACK, Value.WILD)
    red_one = Card(Color.RED, Value.ONE)
    game = rig(start_game(), {0: [wild, red_one, Card(Color.BLUE, Value.TWO)]}, Card(Color.RED, Value.FIVE))

    actions = get_legal_actions(game, game.players[0])
    assert isinstance(actions[-1], DrawCard)
    plays = [a for a in actions if isinstance(a, PlayCard)]
    assert [a.chosen_color for a in plays if a.card is wild] == list(PLAYABLE_COLORS)
    assert [a.card for a in plays if not a.card.wild] == [red_one]


def test_apply_wild_play_sets_color() -> None:
    wild = Card(Color.BLACK, Value.WILD)
    game = rig(start_game(), {0: [wild, Card(Color.BLUE, Value.TWO)]}, Card(Color.RED, Value.FIVE))
    assert apply_action(game, game.players[0], PlayCard(card=wild, chosen_color=Color.YELLOW))
    assert game.top_card is wild
    assert wild.color is Color.YELLOW


def test_apply_wild_without_color_raises() -> None:
    wild = Card(Color.BLACK, Value.WILD)
    game = rig(start_game(), {0: [wild]}, Card(Color.RED, Value.FIVE))
    with pytest.raises(ValueError):
        apply_action(game, game.players[0], PlayCard(card=wild))


def test_apply_draw() -> None:
    game = start_game(seed=8)
    player = game.current_player
    assert apply_action(game, player, DrawCard())
    assert len(player.hand.cards) == 8
    assert not apply_action(game, player, DrawCard())


def test_player_view_hides_other_hands() -> None:
    game = rig(start_game(num_players=3),
               {0: [Card(Color.RED, Value.ONE), Card(Color.BLACK, Value.WILD)]},
               Card(Color.RED, Value.FIVE))
    view = PlayerView.from_game(game, game.players[0], ["x"] * 15)

    assert view.player_name == "p0"
    assert len(view.my_hand) == 2
    assert view.num_cards_per_player == {"p0": 2, "p1": 7, "p2": 7}
    assert view.player_order == ("p0", "p1", "p2")
    assert view.current_player == "p0"
    assert view.color_counts == {"RED": 1, "BLACK": 1}
    assert len(view.history) == 10
    assert not view.is_stacking
