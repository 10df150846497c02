"""CLI entry point."""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="UNO rules engine with computer, LLM and human agents")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _build_config(
    stack: Optional[bool],
    initial_cards: Optional[int],
    players_per_deck: Optional[int],
) -> "Config":
    from unorules.engine import Config

    changes = {
        "stack_cards": stack,
        "initial_cards": initial_cards,
        "players_per_deck": players_per_deck,
    }
    return replace(Config.from_env(), **{k: v for k, v in changes.items() if v is not None})


def _parse_agents(
    agent_specs: str,
    llm_provider: str,
    llm_model: str,
    seed: Optional[int] = None,
) -> dict[str, "AgentProtocol"]:
    from unorules.agent.protocol import AgentProtocol
    from unorules.agents.computer_agent import ComputerAgent
    from unorules.agents.human_agent import HumanAgent
    from unorules.agents.llm_agent import LLMAgent

    parts = [s.strip().lower() for s in agent_specs.split(",") if s.strip()]
    agents: dict[str, AgentProtocol] = {}
    for i, part in enumerate(parts):
        pid = f"player_{i}"
        if ":" in part:
            kind, model = part.split(":", 1)
        else:
            kind, model = part, llm_model

        if kind == "llm":
            agents[pid] = LLMAgent(provider=llm_provider, model=model)
        elif kind == "human":
            agents[pid] = HumanAgent(name=f"Human_{i}")
        elif kind == "computer":
            agents[pid] = ComputerAgent(name=f"Computer_{i}", seed=None if seed is None else seed + i)
        else:
            raise typer.BadParameter(f"Unknown agent type: {kind}. Use 'computer', 'llm' or 'human'.")
    return agents


def _report(result: "GameResult") -> None:
    typer.echo(f"Winner: {result.winner or 'None (draw)'}")
    typer.echo(f"Turns: {result.num_turns}")


@app.command()
def play(
    agents: str = typer.Option(
        "human,computer",
        "--agents",
        "-a",
        help="Comma-separated: computer, human, llm, or llm:model_name (e.g. human,computer,llm:gpt-4o)",
    ),
    llm_provider: str = typer.Option(
        "openrouter",
        "--llm-provider",
        "-p",
        help="LLM provider: openrouter, groq, ollama or huggingface",
    ),
    llm_model: str = typer.Option(
        "openai/gpt-4o-mini",
        "--llm-model",
        "-m",
        help="Model name (e.g. openai/gpt-4o-mini, meta-llama/llama-3-8b-instruct)",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    stack: Optional[bool] = typer.Option(None, "--stack/--no-stack", help="Allow stacking draw cards"),
    initial_cards: Optional[int] = typer.Option(None, "--initial-cards", help="Cards dealt to each player"),
    players_per_deck: Optional[int] = typer.Option(None, "--players-per-deck", help="Players served by one deck"),
    snapshot: Optional[Path] = typer.Option(None, "--snapshot", help="Write the final game state as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Run a single UNO game."""
    from unorules.orchestration.game_runner import GameRunner

    _setup_logging(verbose)
    config = _build_config(stack, initial_cards, players_per_deck)
    agent_map = _parse_agents(agents, llm_provider, llm_model, seed)
    runner = GameRunner(agent_map, seed=seed, config=config)
    result = runner.run()
    _report(result)

    if snapshot is not None:
        snapshot.write_text(json.dumps(runner.game.to_json(), indent=2))
        typer.echo(f"Snapshot written to {snapshot}")


@app.command()
def resume(
    snapshot: Path = typer.Argument(..., exists=True, dir_okay=False, help="Snapshot written by 'play --snapshot'"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Continue a saved game with computer agents in every seat."""
    import random

    from unorules.agents.computer_agent import ComputerAgent
    from unorules.engine import Game
    from unorules.orchestration.game_runner import GameRunner

    _setup_logging(verbose)
    game = Game.from_json(json.loads(snapshot.read_text()), rng=random.Random(seed))
    agent_map = {p.name: ComputerAgent(name=p.name, seed=seed) for p in game.players}
    result = GameRunner(agent_map, game=game).run()
    _report(result)


@app.command()
def tournament(
    agents: str = typer.Option(
        "computer,computer",
        "--agents",
        "-a",
        help="Comma-separated agent types or llm:model_name (e.g. computer,llm:gpt-4o)",
    ),
    games: int = typer.Option(100, "--games", "-g", help="Number of games"),
    llm_provider: str = typer.Option(
        "openrouter",
        "--llm-provider",
        "-p",
        help="LLM provider: openrouter, groq, ollama or huggingface",
    ),
    llm_model: str = typer.Option(
        "openai/gpt-4o-mini",
        "--llm-model",
        "-m",
        help="Model name",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    stack: Optional[bool] = typer.Option(None, "--stack/--no-stack", help="Allow stacking draw cards"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Run a tournament."""
    from unorules.orchestration.tournament import run_tournament

    _setup_logging(verbose)
    config = _build_config(stack, None, None)
    agent_map = _parse_agents(agents, llm_provider, llm_model, seed)
    wins = run_tournament(agent_map, num_games=games, seed=seed, config=config)
    typer.echo("Tournament results:")
    for pid, w in sorted(wins.items(), key=lambda x: -x[1]):
        typer.echo(f"  {pid}: {w} wins")


if __name__ == "__main__":
    app()
