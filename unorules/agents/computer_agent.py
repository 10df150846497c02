"""Computer agent - plays a random playable card."""

from __future__ import annotations

import random
from typing import Optional

from unorules.engine import PLAYABLE_COLORS, Action, Color, DrawCard, PlayCard, PlayerView


def pick_wild_color(player_view: PlayerView, rng: Optional[random.Random] = None) -> Color:
    """Most common concrete color in the hand; random when the hand has none."""
    counts = {
        color: n for color, n in player_view.color_counts.items()
        if color != Color.BLACK.value
    }
    if not counts:
        return (rng or random).choice(PLAYABLE_COLORS)
    return Color(max(counts.items(), key=lambda item: item[1])[0])


class ComputerAgent:
    """Plays a playable card when it has one, preferring non-wild cards."""

    def __init__(self, name: str = "computer", seed: int | None = None):
        self._name = name
        self._rng = random.Random(seed)

    @property
    def name(self) -> str:
        return self._name

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
    ) -> Action | None:
        plays = [a for a in legal_actions if isinstance(a, PlayCard)]
        if not plays:
            return DrawCard()

        cards = []
        for a in plays:
            if not any(c is a.card for c in cards):
                cards.append(a.card)
        choices = [c for c in cards if not c.wild] or cards
        card = self._rng.choice(choices)

        if not card.wild:
            return next(a for a in plays if a.card is card)
        return PlayCard(card=card, chosen_color=pick_wild_color(player_view, self._rng))
