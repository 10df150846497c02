"""Human agent - reads actions from terminal."""

from __future__ import annotations

from typing import Optional

from unorules.engine import Action, Color, DrawCard, PlayCard, PlayerView, Value

_SHORTHAND = {
    "r": "RED",
    "g": "GREEN",
    "b": "BLUE",
    "y": "YELLOW",
    "w": "WILD",
    "wd4": "WILD_DRAW_FOUR",
    "d2": "DRAW_TWO",
    "s": "SKIP",
    "rev": "REVERSE",
    "0": "ZERO",
    "1": "ONE",
    "2": "TWO",
    "3": "THREE",
    "4": "FOUR",
    "5": "FIVE",
    "6": "SIX",
    "7": "SEVEN",
    "8": "EIGHT",
    "9": "NINE",
}


def parse_card_input(text: str) -> tuple[Optional[Color], Optional[Value]]:
    """Parse card shorthand such as ``r 5``, ``g d2`` or ``wd4 b``.

    Tokens may come in any order. Unknown tokens raise ValueError.
    """
    color: Optional[Color] = None
    value: Optional[Value] = None
    for token in text.lower().split():
        symbol = _SHORTHAND.get(token, token.upper())
        if symbol in Color.__members__:
            color = Color(symbol)
        elif symbol in Value.__members__:
            value = Value(symbol)
        else:
            raise ValueError(f"Unknown card token: {token}")
    return color, value


def match_action(
    color: Optional[Color],
    value: Optional[Value],
    legal_actions: list[Action],
) -> Action | None:
    """Find the legal play for a parsed card; for wilds ``color`` is the chosen color."""
    if value is None:
        return None
    for a in legal_actions:
        if not isinstance(a, PlayCard) or a.card.value != value:
            continue
        if a.card.wild:
            if color is not None and a.chosen_color == color:
                return a
        elif color is None or a.card.color == color:
            return a
    return None


class HumanAgent:
    """Agent that prompts the human for input via terminal."""

    def __init__(self, name: str = "human"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
    ) -> Action | None:
        if not legal_actions:
            return None

        print("\n--- Your turn ---")
        for pname, count in player_view.num_cards_per_player.items():
            if pname != player_view.player_name:
                print(f"  {pname}: {count} cards")
        print("Top discard:", player_view.top_discard)
        if player_view.is_stacking:
            print(f"Pending draw stack: {player_view.stack_draw_amount}")
        print("Your hand:", ", ".join(str(c) for c in player_view.my_hand))
        print("Colors in hand:")
        for color, count in player_view.color_counts.items():
            print(f"  {color}: {count}")
        print("\nLegal actions:")
        for i, a in enumerate(legal_actions):
            if isinstance(a, DrawCard):
                print(f"  {i}: DRAW")
            else:
                extra = f" (choose color: {a.chosen_color})" if a.chosen_color else ""
                print(f"  {i}: PLAY {a.card}{extra}")

        while True:
            try:
                raw = input("Enter number, card (e.g. 'r 5', 'wd4 b') or 'd' to draw: ").strip()
            except EOFError:
                return None
            if raw.lower() == "d":
                return DrawCard()
            if raw.isdigit():
                idx = int(raw)
                if 0 <= idx < len(legal_actions):
                    return legal_actions[idx]
            else:
                try:
                    action = match_action(*parse_card_input(raw), legal_actions)
                except ValueError:
                    action = None
                if action is not None:
                    return action
            print("Invalid. Try again.")
