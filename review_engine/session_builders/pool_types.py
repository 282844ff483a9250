"""
Typed difficulty pools used by the session composer.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Literal

from review_engine.sm2.memory_state import SpacedRepetitionCard


PoolName = Literal["easy", "medium", "hard"]
POOL_ORDER: tuple[PoolName, ...] = ("easy", "medium", "hard")


@dataclass
class DifficultyPools:
    """
    Due cards split by retention strength, each pool kept in due order.
    """
    easy: list[SpacedRepetitionCard] = field(default_factory=list)
    medium: list[SpacedRepetitionCard] = field(default_factory=list)
    hard: list[SpacedRepetitionCard] = field(default_factory=list)

    def add(self, card: SpacedRepetitionCard, target: PoolName) -> None:
        """
        Append a card to the target pool.
        """
        if target == "easy":
            self.easy.append(card)
        elif target == "medium":
            self.medium.append(card)
        else:
            self.hard.append(card)

    def as_dict(self) -> dict[str, list[SpacedRepetitionCard]]:
        return {"easy": self.easy, "medium": self.medium, "hard": self.hard}

    def sizes(self) -> dict[str, int]:
        return {name: len(cards) for name, cards in self.as_dict().items()}
