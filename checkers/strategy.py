"""
Move selection strategies and the computer player that uses them.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from checkers.engine import CheckersLogic
from checkers.types import Move

logger = logging.getLogger(__name__)


class MoveStrategy(ABC):
    """Picks one entry from the engine's current legal-move list."""

    @abstractmethod
    def choose_index(self, count: int) -> int:  # pragma: no cover
        raise NotImplementedError

    def select_move(self, engine: CheckersLogic) -> Optional[Move]:
        count = engine.get_move_count()
        if count == 0:
            return None
        return engine.get_move(self.choose_index(count))


class RandomMoveStrategy(MoveStrategy):
    """Uniformly random choice driven by an injectable numpy Generator."""

    def __init__(self, rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None) -> None:
        self._rng = rng if rng is not None else np.random.default_rng(seed)

    def choose_index(self, count: int) -> int:
        if count <= 0:
            raise ValueError("count must be positive")
        return int(self._rng.integers(0, count))


def get_move_strategy(seed: Optional[int] = None) -> MoveStrategy:
    """Factory for the default move strategy (uniform random)."""
    return RandomMoveStrategy(seed=seed)


class CheckersComputerPlayer:
    """Computer opponent: asks its strategy for one of the legal moves."""

    def __init__(self, engine: CheckersLogic,
                 strategy: Optional[MoveStrategy] = None) -> None:
        self.engine = engine
        self.strategy = strategy if strategy is not None else get_move_strategy()

    def calculate_move(self) -> Optional[Move]:
        move = self.strategy.select_move(self.engine)
        logger.debug("Computer selected %s", move)
        return move


__all__ = [
    "MoveStrategy",
    "RandomMoveStrategy",
    "get_move_strategy",
    "CheckersComputerPlayer",
]
