from __future__ import annotations
from typing import List
from .base import Agent, AgentStats, REGISTRY, register

from . import random_consistent  # noqa: F401
from . import entropy  # noqa: F401
from .entropy import EntropySolver, information_gain
from .random_consistent import RandomConsistentSolver
from .manual import ManualAgent


def create_solver(solver_id: str, **kwargs) -> Agent:
    """
    Factory: instantiate a registered solver by id.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = ["Agent", "AgentStats", "REGISTRY", "register", "create_solver", "get_solver_ids",
           "EntropySolver", "RandomConsistentSolver", "ManualAgent", "information_gain"]
