"""components.rpg — Player health."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Health:
    current: float = 5.0       # HP
    maximum: float = 5.0       # HP

    @property
    def alive(self) -> bool:
        return self.current > 0

    def take_damage(self, amount: float) -> float:
        """Subtract *amount* (floored at 0).  Returns HP actually lost."""
        lost = min(self.current, max(0.0, amount))
        self.current -= lost
        return lost

    def refill(self) -> None:
        self.current = self.maximum
