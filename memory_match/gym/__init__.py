from .env import MemoryEnv, action_mask, make_obs

__all__ = ["MemoryEnv", "action_mask", "make_obs"]
