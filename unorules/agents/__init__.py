"""Built-in agents."""

from unorules.agents.computer_agent import ComputerAgent
from unorules.agents.human_agent import HumanAgent
from unorules.agents.llm_agent import LLMAgent

__all__ = ["ComputerAgent", "LLMAgent", "HumanAgent"]
