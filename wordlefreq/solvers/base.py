from __future__ import annotations
from typing import Dict, Type

from ..engine.frequency import WORD_SIZE

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.N: int = WORD_SIZE

    def reset(self, *, N: int) -> None:
        """Prepare for a new game of N-letter words."""
        self.N = int(N)

    def next_guess(self, state: dict) -> str:
        """
        Propose a guess from `state["candidates"]`.
        Must raise EmptyCandidates when there is nothing to choose from.
        """
        raise NotImplementedError("Override in subclass")
