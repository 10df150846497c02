"""Game orchestration."""

from unorules.orchestration.game_runner import GameRunner
from unorules.orchestration.tournament import run_tournament

__all__ = ["GameRunner", "run_tournament"]
