"""logic/ai/wander.py — Wander-target selection.

An idle motorcycle drives toward a random road cell near its spawn
point.  Candidates are drawn uniformly from a disk around spawn; the
first one that lands on a passable cell wins and is snapped to that
cell's centre.  If every try misses, the spawn point itself is used.

Randomness comes from an injected sampler so tests can seed it.
"""

from __future__ import annotations
import math
import random
from typing import TYPE_CHECKING, Callable

from pygame.math import Vector2

if TYPE_CHECKING:
    from core.grid import GridSurface


Sampler = Callable[[float], Vector2]


class DiskSampler:
    """Uniform offsets inside a disk, backed by a ``random.Random``.

    ``r = R * sqrt(u)`` keeps the density uniform over the area rather
    than clustering samples at the centre.
    """

    def __init__(self, rng: random.Random | None = None, seed: int | None = None):
        self.rng = rng if rng is not None else random.Random(seed)

    def __call__(self, radius: float) -> Vector2:
        angle = self.rng.uniform(0.0, 2.0 * math.pi)
        r = radius * math.sqrt(self.rng.random())
        return Vector2(math.cos(angle) * r, math.sin(angle) * r)


def pick_wander_target(spawn, radius: float, surface: GridSurface | None,
                       sampler: Sampler, *, attempts: int = 10) -> Vector2:
    """Return a wander destination within *radius* of *spawn*.

    With a surface: centre of the first sampled passable cell, or
    *spawn* when all *attempts* miss.  Without one: the first sample
    as-is, since every point counts as passable.
    """
    origin = Vector2(spawn)
    for _ in range(attempts):
        candidate = origin + sampler(radius)
        if surface is None:
            return candidate
        cell = surface.world_to_cell(candidate)
        if surface.is_passable(cell):
            return surface.cell_center_to_world(cell)
    return origin
