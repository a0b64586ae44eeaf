"""components.agents — Per-agent kinematic and pursuit state.

All positions / velocities are ``pygame.math.Vector2`` in world units.
A state object belongs to exactly one controller; nothing shares them.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from pygame.math import Vector2

from core.constants import FACING_RIGHT


class PursuitMode(Enum):
    WANDERING = "wandering"
    CHASING = "chasing"


@dataclass
class BikeState:
    """Player bike.

    ``intent`` is the clamped movement direction captured on the last
    high-frequency tick; ``velocity`` is what the last fixed tick resolved.
    """
    position: Vector2 = field(default_factory=Vector2)
    velocity: Vector2 = field(default_factory=Vector2)
    intent: Vector2 = field(default_factory=Vector2)
    facing: str = FACING_RIGHT
    spawn: Vector2 = field(default_factory=Vector2)


@dataclass
class AgentState:
    """Motorcycle pursuit state.

    ``path`` is a tuple of waypoints and is swapped whole on replanning.
    ``waypoint_index == len(path)`` means the path is exhausted.
    ``last_replan_time`` / ``last_contact_time`` are controller
    simulation times (s); the replan stamp never moves backwards.
    """
    position: Vector2 = field(default_factory=Vector2)
    velocity: Vector2 = field(default_factory=Vector2)
    facing: str = FACING_RIGHT
    path: tuple[Vector2, ...] = ()
    waypoint_index: int = 0
    last_replan_time: float = float("-inf")
    last_contact_time: float = float("-inf")
    mode: PursuitMode = PursuitMode.WANDERING
    wander_target: Vector2 = field(default_factory=Vector2)
    spawn: Vector2 = field(default_factory=Vector2)

    @property
    def path_exhausted(self) -> bool:
        return self.waypoint_index >= len(self.path)
