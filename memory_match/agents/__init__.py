from .core import Agent, BaseAgent
from .memory import MemoryAgent
from .random import RandomAgent

__all__ = ["Agent", "BaseAgent", "MemoryAgent", "RandomAgent"]
