"""Simulate a game between computer agents, printing events as they happen."""

import random

from unorules.agents.computer_agent import ComputerAgent
from unorules.engine import Config, EventKind, Game
from unorules.orchestration.game_runner import GameRunner


def main():
    agents = {
        "p1": ComputerAgent("Bot1", seed=1),
        "p2": ComputerAgent("Bot2", seed=2),
        "p3": ComputerAgent("Bot3", seed=3),
        "p4": ComputerAgent("Bot4", seed=4),
    }

    game = Game(list(agents), Config(stack_cards=True), random.Random(42))
    game.event_manager.subscribe(
        EventKind.PLAYER_PLAY,
        lambda e: print(f"> {e.player.name} played {e.card}, {e.next_player.name} is next"),
    )
    game.event_manager.subscribe(
        EventKind.PLAYER_DRAW,
        lambda e: print(f"> {e.player.name} drew {len(e.cards)}"),
    )

    runner = GameRunner(agents, game=game)
    result = runner.run()

    print(f"Game finished! Winner: {result.winner}")
    print(f"Turns: {result.num_turns}")


if __name__ == "__main__":
    main()
