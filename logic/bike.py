"""logic/bike.py — Player bike controller.

The host feeds a movement intent every frame (keyboard, gamepad, a
replay — the controller doesn't care where it comes from):

    bike.tick(dt, intent=(1.0, 1.0))   # captured + clamped, facing updated
    bike.fixed_tick(FIXED_DT)          # → road-constrained velocity

Facing follows the sign of the horizontal intent and is left alone when
the intent has no horizontal part.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from pygame.math import Vector2

from components.agents import BikeState
from components.config import BikeConfig
from logic.movement import clamp_unit, resolve_velocity
from logic.ai.steering import face_toward

if TYPE_CHECKING:
    from core.grid import GridSurface


class BikeController:
    def __init__(self, spawn, surface: GridSurface | None,
                 config: BikeConfig | None = None):
        self.config = config if config is not None else BikeConfig()
        self.surface = surface
        spawn = Vector2(spawn)
        self.state = BikeState(position=Vector2(spawn), spawn=spawn)

    @property
    def position(self) -> Vector2:
        return Vector2(self.state.position)

    @property
    def velocity(self) -> Vector2:
        return Vector2(self.state.velocity)

    @property
    def facing(self) -> str:
        return self.state.facing

    def tick(self, dt: float, intent=(0.0, 0.0)) -> None:
        """Capture this frame's intent."""
        s = self.state
        s.intent = clamp_unit(intent)
        s.facing = face_toward(s.facing, s.intent)

    def fixed_tick(self, dt: float) -> Vector2:
        """Resolve the captured intent against the road for one step."""
        s = self.state
        s.velocity = resolve_velocity(s.position, s.intent,
                                      self.config.move_speed, dt,
                                      self.config.edge_offset, self.surface)
        return Vector2(s.velocity)

    def reset(self) -> None:
        s = self.state
        s.position = Vector2(s.spawn)
        s.velocity = Vector2()
        s.intent = Vector2()

    def __repr__(self) -> str:
        p = self.state.position
        return f"BikeController(pos=({p.x:.2f}, {p.y:.2f}), facing={self.state.facing})"
