"""logic/encounter.py — Headless host for one chase encounter.

Owns the road surface, the player bike, its health and every pursuing
motorcycle, and drives them the way a game loop would:

    enc = Encounter(grid, player_spawn=(2.5, 2.5))
    enc.add_motorcycle((10.5, 2.5))
    while running:
        enc.update(frame_dt, intent=read_stick())

Per frame
---------
1. advance the ``GameClock``
2. high-frequency tick: bike intent, then every motorcycle
3. fixed steps from the accumulator: resolve velocities, integrate
   positions (bike first, then motorcycles in spawn order)
4. drain the ``EventBus`` (contact damage → player health)

Motorcycles never touch the player's health directly; their damage sink
emits ``ContactDamage`` and the encounter applies it on drain.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from pygame.math import Vector2

from components import (
    BikeConfig, EncounterConfig, MotorcycleConfig,
    DevLog, FixedStep, GameClock, Health,
)
from core.events import ContactDamage, EncounterReset, EventBus, PlayerDefeated
from logic.bike import BikeController
from logic.movement import integrate
from logic.ai.pursuit import PursuitController
from logic.ai.wander import Sampler

if TYPE_CHECKING:
    from core.grid import GridSurface


PLAYER_EID = 0


class Encounter:
    def __init__(self, surface: GridSurface | None, player_spawn, *,
                 config: EncounterConfig | None = None,
                 bike_config: BikeConfig | None = None,
                 log: DevLog | None = None):
        self.config = config if config is not None else EncounterConfig()
        self.surface = surface
        self.clock = GameClock()
        self.bus = EventBus()
        self.log = log if log is not None else DevLog()
        self.step = FixedStep(dt=self.config.fixed_dt,
                              max_steps=self.config.max_steps_per_frame)

        self.bike = BikeController(player_spawn, surface, bike_config)
        self.health = Health(current=self.config.player_health,
                             maximum=self.config.player_health)
        self.motorcycles: list[PursuitController] = []

        self.bus.subscribe(ContactDamage, self._on_contact_damage)

    # ── Setup ────────────────────────────────────────────────────────

    def add_motorcycle(self, spawn, config: MotorcycleConfig | None = None, *,
                       sampler: Sampler | None = None,
                       name: str = "") -> PursuitController:
        """Spawn a pursuer wired to this encounter's player and bus."""
        eid = len(self.motorcycles) + 1
        name = name or f"moto-{eid}"

        def _sink(magnitude: float, _name: str = name) -> None:
            self.bus.emit(ContactDamage(source=_name, magnitude=magnitude,
                                        t=self.clock.time))

        moto = PursuitController(
            spawn, self.surface, self.player_position, config,
            damage_sink=_sink, sampler=sampler,
            log=self.log, eid=eid, name=name,
        )
        self.motorcycles.append(moto)
        return moto

    # ── Collaborator hooks ───────────────────────────────────────────

    def player_position(self) -> Vector2 | None:
        """Target locator for the motorcycles; ``None`` once defeated."""
        if not self.health.alive:
            return None
        return self.bike.position

    @property
    def defeated(self) -> bool:
        return not self.health.alive

    # ── Frame update ─────────────────────────────────────────────────

    def update(self, frame_dt: float, intent=(0.0, 0.0)) -> int:
        """Run one frame.  Returns the number of fixed steps executed."""
        frame_dt = max(0.0, frame_dt)
        self.clock.time += frame_dt

        self.bike.tick(frame_dt, intent)
        for moto in self.motorcycles:
            moto.tick(frame_dt)

        steps = self.step.consume(frame_dt)
        for _ in range(steps):
            self._fixed_step(self.step.dt)

        self.bus.drain()
        return steps

    def _fixed_step(self, dt: float) -> None:
        bs = self.bike.state
        self.bike.fixed_tick(dt)
        bs.position = integrate(bs.position, bs.velocity, dt)

        for moto in self.motorcycles:
            ms = moto.state
            moto.fixed_tick(dt)
            ms.position = integrate(ms.position, ms.velocity, dt)

    # ── Events ───────────────────────────────────────────────────────

    def _on_contact_damage(self, ev: ContactDamage) -> None:
        if not self.health.alive:
            return
        lost = self.health.take_damage(ev.magnitude)
        self.log.record(PLAYER_EID, "damage", f"hit by {ev.source}",
                        name="player", t=ev.t,
                        details={"lost": lost, "hp": self.health.current})
        if not self.health.alive:
            self.log.record(PLAYER_EID, "damage", "defeated",
                            name="player", t=ev.t)
            self.bus.emit(PlayerDefeated(source=ev.source, t=ev.t))

    # ── Reset ────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Put every agent back on its spawn without rebuilding anything."""
        self.bus.clear()
        self.step.accumulator = 0.0
        self.bike.reset()
        self.health.refill()
        for moto in self.motorcycles:
            moto.reset()
        self.log.record(PLAYER_EID, "encounter", "reset",
                        name="player", t=self.clock.time)
        self.bus.emit(EncounterReset(t=self.clock.time))
        self.bus.drain()

    def __repr__(self) -> str:
        return (f"Encounter(t={self.clock.time:.2f}, hp={self.health.current}, "
                f"motorcycles={len(self.motorcycles)})")
