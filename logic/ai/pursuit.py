"""logic/ai/pursuit.py — Wandering ⇄ Chasing controller for a motorcycle.

State machine
-------------
::

    WANDERING ──(player within chase_range)──▶ CHASING
        ▲                                         │
        └────(player beyond chase_range)──────────┘   path dropped at once

Two entry points, driven by the host at two rates:

``tick(dt)``        high frequency.  Advances the controller's simulation
                    clock, locates the player, switches mode, replans on
                    the ``path_update_rate`` cadence and runs the contact
                    check (in either mode).
``fixed_tick(dt)``  fixed step.  Follows the current path (CHASING) or
                    drives to the wander target, returning a velocity that
                    ``resolve_velocity`` has kept on the road.

Replanning
----------
Entering CHASING replans immediately.  After that a new BFS runs only
once ``path_update_rate`` simulated seconds have passed since the last
one; in between the old path is followed even if the player has moved.
A replan swaps the whole path tuple and restarts at waypoint 0.

While CHASING, an empty path (nothing found, or already in the
player's cell) and an exhausted one (last waypoint reached) both fall
back to the wander policy until the next replan.

Wander targets are re-picked on arrival, and also when the road blocks
the move on both axes so a motorcycle never idles against an edge.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Callable

from pygame.math import Vector2

from components.agents import AgentState, PursuitMode
from components.config import MotorcycleConfig
from logic.movement import normalized, resolve_velocity
from logic.pathfinding import find_path
from logic.ai.steering import face_toward, seek
from logic.ai.wander import DiskSampler, Sampler, pick_wander_target

if TYPE_CHECKING:
    from core.grid import GridSurface
    from components.dev_log import DevLog


TargetLocator = Callable[[], "Vector2 | None"]
DamageSink = Callable[[float], None]


class PursuitController:
    """Owns one motorcycle's :class:`AgentState` for its whole lifetime.

    Collaborators are injected:

    ``surface``        road grid (``None`` = unconstrained, no planning)
    ``locate_target``  returns the player's world position, or ``None``
    ``damage_sink``    receives the contact damage magnitude
    ``sampler``        uniform disk offsets for wander targets
    ``log``            optional :class:`DevLog`; ``"pursuit"`` entries
    """

    def __init__(self, spawn, surface: GridSurface | None,
                 locate_target: TargetLocator,
                 config: MotorcycleConfig | None = None, *,
                 damage_sink: DamageSink | None = None,
                 sampler: Sampler | None = None,
                 log: DevLog | None = None,
                 eid: int = 0, name: str = ""):
        self.config = config if config is not None else MotorcycleConfig()
        self.surface = surface
        self.locate_target = locate_target
        self.damage_sink = damage_sink
        self.sampler = sampler if sampler is not None else DiskSampler()
        self.log = log
        self.eid = eid
        self.name = name or f"moto-{eid}"

        self.time = 0.0
        spawn = Vector2(spawn)
        self.state = AgentState(position=Vector2(spawn), spawn=spawn)
        self._pick_wander_target()

    # ── Read-only views for the host ─────────────────────────────────

    @property
    def mode(self) -> PursuitMode:
        return self.state.mode

    @property
    def path(self) -> tuple[Vector2, ...]:
        return self.state.path

    @property
    def waypoint_index(self) -> int:
        return self.state.waypoint_index

    @property
    def position(self) -> Vector2:
        return Vector2(self.state.position)

    @property
    def velocity(self) -> Vector2:
        return Vector2(self.state.velocity)

    @property
    def facing(self) -> str:
        return self.state.facing

    @property
    def wander_target(self) -> Vector2:
        return Vector2(self.state.wander_target)

    def remaining_path(self) -> tuple[Vector2, ...]:
        """Waypoints not reached yet (what a debug overlay would draw)."""
        return self.state.path[self.state.waypoint_index:]

    # ── High-frequency tick ──────────────────────────────────────────

    def tick(self, dt: float) -> None:
        """Mode switch, replanning cadence and contact check."""
        if dt > 0:
            self.time += dt
        s = self.state
        cfg = self.config

        target = self.locate_target()
        if target is None:
            self._stop_chasing("player not located")
            return
        target = Vector2(target)
        dist = s.position.distance_to(target)

        if dist <= cfg.chase_range:
            entering = s.mode is PursuitMode.WANDERING
            if entering:
                s.mode = PursuitMode.CHASING
                self._log("mode → chasing", dist=round(dist, 2))
            if entering or self.time >= s.last_replan_time + cfg.path_update_rate:
                self._replan(target)
        else:
            self._stop_chasing("player out of range", dist=round(dist, 2))

        self._check_contact(dist)

    # ── Fixed-step tick ──────────────────────────────────────────────

    def fixed_tick(self, dt: float) -> Vector2:
        """Resolve this step's velocity.  The host integrates it."""
        s = self.state
        if s.mode is PursuitMode.CHASING and s.path and not s.path_exhausted:
            velocity = self._follow_path(dt)
        else:
            velocity = self._wander(dt)
        s.velocity = velocity
        return Vector2(velocity)

    # ── Reset ────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Back to spawn, idle, no path, contact ready, fresh wander target."""
        s = self.state
        s.position = Vector2(s.spawn)
        s.velocity = Vector2()
        s.path = ()
        s.waypoint_index = 0
        s.mode = PursuitMode.WANDERING
        s.last_contact_time = float("-inf")
        self._pick_wander_target()
        self._log("reset")

    # ── Internals ────────────────────────────────────────────────────

    def _replan(self, target: Vector2) -> None:
        s = self.state
        path = find_path(s.position, target, self.surface,
                         self.config.max_bfs_iterations)
        s.path = tuple(path)
        s.waypoint_index = 0
        s.last_replan_time = max(s.last_replan_time, self.time)
        self._log("replan", waypoints=len(path))

    def _stop_chasing(self, reason: str, **details) -> None:
        s = self.state
        if s.mode is PursuitMode.CHASING:
            s.mode = PursuitMode.WANDERING
            self._log(f"mode → wandering ({reason})", **details)
        s.path = ()
        s.waypoint_index = 0

    def _check_contact(self, dist: float) -> None:
        s = self.state
        cfg = self.config
        if dist > cfg.contact_damage_radius:
            return
        if self.time - s.last_contact_time < cfg.damage_cooldown:
            return
        s.last_contact_time = self.time
        self._log("contact", damage=cfg.contact_damage)
        if self.damage_sink is not None:
            self.damage_sink(cfg.contact_damage)

    def _follow_path(self, dt: float) -> Vector2:
        s = self.state
        cfg = self.config
        waypoint = s.path[s.waypoint_index]
        direction, dist = seek(s.position, waypoint)
        velocity = resolve_velocity(s.position, direction, cfg.chase_speed,
                                    dt, cfg.edge_offset, self.surface)
        self._update_facing(velocity)
        if dist < cfg.waypoint_reach_distance:
            s.waypoint_index += 1
        return velocity

    def _wander(self, dt: float) -> Vector2:
        s = self.state
        cfg = self.config
        direction, dist = seek(s.position, s.wander_target)
        if dist < cfg.waypoint_reach_distance:
            self._pick_wander_target()
            return Vector2()

        velocity = resolve_velocity(s.position, direction, cfg.wander_speed,
                                    dt, cfg.edge_offset, self.surface)
        if velocity.length_squared() == 0.0:
            # Wedged against the road edge, aim somewhere else next step
            self._pick_wander_target()
            return velocity
        self._update_facing(velocity)
        return velocity

    def _pick_wander_target(self) -> None:
        s = self.state
        s.wander_target = pick_wander_target(
            s.spawn, self.config.wander_radius, self.surface, self.sampler,
            attempts=self.config.wander_samples,
        )

    def _update_facing(self, velocity: Vector2) -> None:
        self.state.facing = face_toward(self.state.facing, normalized(velocity),
                                        self.config.facing_deadzone)

    def _log(self, msg: str, **details) -> None:
        if self.log is None:
            return
        self.log.record(self.eid, "pursuit", msg, name=self.name,
                        t=self.time, details=details or None)

    def __repr__(self) -> str:
        p = self.state.position
        return (f"PursuitController({self.name}, {self.state.mode.value}, "
                f"pos=({p.x:.2f}, {p.y:.2f}), "
                f"wp={self.state.waypoint_index}/{len(self.state.path)})")
