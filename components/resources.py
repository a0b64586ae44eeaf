"""components.resources — Encounter-level singletons (not per-agent)."""

from __future__ import annotations
from dataclasses import dataclass

from core.constants import FIXED_DT, MAX_STEPS_PER_FRAME


@dataclass
class GameClock:
    """Monotonic simulation time — accumulated ``dt`` since session start.

    Single source of truth for DevLog / event timestamps on the host.
    Advanced once per frame in ``Encounter.update()``.
    """
    time: float = 0.0


@dataclass
class FixedStep:
    """Fixed-timestep accumulator state.

    ``accumulator`` holds frame time not yet consumed by physics steps.
    ``max_steps`` caps the steps run per frame so a slow frame cannot
    snowball into ever longer catch-up frames; excess time is dropped.
    """
    dt: float = FIXED_DT         # s
    max_steps: int = MAX_STEPS_PER_FRAME
    accumulator: float = 0.0     # s
    steps_run: int = 0           # total fixed steps since creation

    def consume(self, frame_dt: float) -> int:
        """Add *frame_dt* and return how many fixed steps to run now."""
        self.accumulator += max(0.0, frame_dt)
        steps = 0
        # Tolerance so 0.02 + 0.02 + ... still lands on whole steps.
        while self.accumulator + 1e-9 >= self.dt and steps < self.max_steps:
            self.accumulator = max(0.0, self.accumulator - self.dt)
            steps += 1
        if steps == self.max_steps and self.accumulator + 1e-9 >= self.dt:
            self.accumulator = 0.0
        self.steps_run += steps
        return steps
