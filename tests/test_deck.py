"""Unit tests for Deck and Player."""

import random
from collections import Counter

from unorules.engine import (
    CARD_COUNTS,
    DEFAULT_DECK_SIZE,
    Card,
    Color,
    Deck,
    Player,
    Value,
    create_deck,
)


def test_create_deck_size() -> None:
    deck = create_deck(seed=42)
    assert len(deck) == 108
    assert DEFAULT_DECK_SIZE == 108


def test_create_deck_reproducible() -> None:
    d1 = create_deck(seed=123)
    d2 = create_deck(seed=123)
    assert [str(c) for c in d1] == [str(c) for c in d2]


def test_default_cards_follow_count_table() -> None:
    expected = Counter(
        {(color, value): n for color, counts in CARD_COUNTS.items() for value, n in counts.items()}
    )
    for seed in range(3):
        deck = Deck().insert_default_cards(random.Random(seed))
        assert Counter((c.color, c.value) for c in deck) == expected


def test_insert_default_cards_replaces_contents() -> None:
    deck = Deck([Card(Color.RED, Value.ONE)])
    deck.insert_default_cards()
    deck.insert_default_cards()
    assert len(deck) == DEFAULT_DECK_SIZE


def test_default_wilds_are_flagged() -> None:
    deck = create_deck(seed=1)
    wilds = [c for c in deck if c.color is Color.BLACK]
    assert len(wilds) == 8
    assert all(c.wild and c.wild_picked_color is Color.BLACK for c in wilds)


def test_shuffle_is_a_permutation() -> None:
    deck = create_deck(seed=7)
    before = list(deck.cards)
    deck.shuffle(random.Random(99))
    assert len(deck.cards) == len(before)
    assert {id(c) for c in deck.cards} == {id(c) for c in before}
    assert deck.cards != before


def test_top_card_peek_and_pop() -> None:
    first = Card(Color.RED, Value.ONE)
    second = Card(Color.BLUE, Value.TWO)
    deck = Deck([first, second])
    assert deck.get_top_card() is first
    assert len(deck) == 2
    assert deck.get_top_card(remove=True) is first
    assert deck.get_top_card() is second
    assert Deck().get_top_card() is None
    assert Deck().get_top_card(remove=True) is None


def test_add_card_puts_on_top() -> None:
    deck = Deck([Card(Color.RED, Value.ONE)])
    card = Card(Color.GREEN, Value.SKIP)
    deck.add_card(card)
    assert deck.get_top_card() is card


def test_get_card_by_color_and_value() -> None:
    red_five = Card(Color.RED, Value.FIVE)
    blue_five = Card(Color.BLUE, Value.FIVE)
    deck = Deck([red_five, blue_five])
    assert deck.get_card(value=Value.FIVE) is red_five
    assert deck.get_card("BLUE", "FIVE") is blue_five
    assert deck.get_card(Color.BLUE) is blue_five
    assert deck.get_card(Color.GREEN) is None
    assert deck.get_card() is None


def test_get_card_wild_ignores_color_and_picks_it() -> None:
    wild = Card(Color.BLACK, Value.WILD_DRAW_FOUR)
    deck = Deck([Card(Color.RED, Value.FIVE), wild])
    found = deck.get_card(Color.GREEN, Value.WILD_DRAW_FOUR)
    assert found is wild
    assert wild.wild_picked_color is Color.GREEN


def test_get_card_wild_without_color_keeps_pick() -> None:
    wild = Card(Color.BLACK, Value.WILD)
    wild.pick_color(Color.RED)
    deck = Deck([wild])
    assert deck.get_card(value=Value.WILD) is wild
    assert wild.wild_picked_color is Color.RED


def test_color_counts() -> None:
    deck = Deck([
        Card(Color.RED, Value.ONE),
        Card(Color.RED, Value.TWO),
        Card(Color.BLUE, Value.TWO),
        Card(Color.BLACK, Value.WILD),
    ])
    assert deck.get_color_counts() == {"RED": 2, "BLUE": 1, "BLACK": 1}
    assert Deck().get_color_counts() == {}


def test_remove_card_prefers_identity() -> None:
    first = Card(Color.RED, Value.FIVE)
    second = Card(Color.RED, Value.FIVE)
    deck = Deck([first, second])
    assert deck.remove_card(second)
    assert deck.cards == [first]


def test_remove_card_falls_back_to_match() -> None:
    held = Card(Color.RED, Value.FIVE)
    deck = Deck([Card(Color.BLUE, Value.ONE), held])
    assert deck.remove_card(Card(Color.RED, Value.FIVE))
    assert held not in deck.cards
    assert not deck.remove_card(Card(Color.GREEN, Value.NINE))
    assert len(deck) == 1


def test_deck_json() -> None:
    deck = create_deck(seed=3)
    restored = Deck.from_json(deck.to_json())
    assert [str(c) for c in restored] == [str(c) for c in deck]
    assert Deck.from_json([]).cards == []


def test_player_playable_cards() -> None:
    player = Player("alice", 0)
    red_one = Card(Color.RED, Value.ONE)
    blue_five = Card(Color.BLUE, Value.FIVE)
    wild = Card(Color.BLACK, Value.WILD)
    player.hand = Deck([red_one, blue_five, wild])

    top = Card(Color.RED, Value.NINE)
    assert player.get_playable_cards(top) == [red_one, wild]
    assert player.get_playable_cards(top, to_play=True) == [red_one]
    assert player.get_playable_cards(Card(Color.RED, Value.DRAW_TWO), is_stacking=True) == []


def test_player_json() -> None:
    player = Player("bob", 3)
    player.hand.add_card(Card(Color.YELLOW, Value.REVERSE))
    data = player.to_json()
    assert data == {
        "id": 3,
        "name": "bob",
        "hand": [{"color": "YELLOW", "value": "REVERSE", "wild": False, "wild_picked_color": None}],
    }
    restored = Player.from_json(data)
    assert restored.name == "bob"
    assert restored.id == 3
    assert str(restored.hand.get_top_card()) == "YELLOW REVERSE"
    assert Player("carol").id == -1
