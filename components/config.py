"""components.config — Immutable per-agent tuning.

Each agent copies its numbers once, at construction, either from the
dataclass defaults or from ``data/tuning.toml`` via ``from_tuning()``.
Nothing mutates a config afterwards (the dataclasses are frozen).
"""

from __future__ import annotations
from dataclasses import dataclass, fields

from core import tuning
from core.constants import FIXED_DT, MAX_STEPS_PER_FRAME


def _from_section(cls, section_name: str, overrides: dict):
    """Build *cls* from tuning section *section_name*, then *overrides*.

    Keys the dataclass doesn't know are ignored so the TOML file can carry
    comments-as-keys or host-only values without breaking agents.
    """
    known = {f.name for f in fields(cls)}
    values = {k: v for k, v in tuning.section(section_name).items() if k in known}
    values.update(overrides)
    return cls(**values)


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ValueError(msg)


@dataclass(frozen=True)
class BikeConfig:
    """Player bike.

    ``move_speed``  — top speed (u/s).
    ``edge_offset`` — distance from the centre to the leading edge of the
                      bike, used to probe the road ahead (u).
    """
    move_speed: float = 5.0      # u/s
    edge_offset: float = 0.4     # u

    def __post_init__(self):
        _require(self.move_speed >= 0, "move_speed must be >= 0")
        _require(self.edge_offset >= 0, "edge_offset must be >= 0")

    @classmethod
    def from_tuning(cls, **overrides) -> "BikeConfig":
        return _from_section(cls, "bike", overrides)


@dataclass(frozen=True)
class MotorcycleConfig:
    """Enemy motorcycle.

    ``chase_range``             — start / keep chasing within this distance (u).
    ``path_update_rate``        — min. simulated seconds between replans (s).
    ``waypoint_reach_distance`` — closer than this = waypoint reached (u).
    ``max_bfs_iterations``      — BFS dequeue cap per replan.
    ``wander_radius``           — wander targets are sampled this far from spawn (u).
    ``wander_samples``          — random tries before falling back to spawn.
    ``contact_damage_radius``   — touching distance for the contact hit (u).
    ``damage_cooldown``         — min. seconds between two contact hits (s).
    ``facing_deadzone``         — |dir.x| must exceed this to flip facing.
    """
    chase_range: float = 8.0                # u
    chase_speed: float = 3.0                # u/s
    wander_speed: float = 1.5               # u/s
    edge_offset: float = 0.25               # u
    path_update_rate: float = 0.5           # s
    waypoint_reach_distance: float = 0.3    # u
    max_bfs_iterations: int = 1000
    wander_radius: float = 5.0              # u
    wander_samples: int = 10
    contact_damage_radius: float = 0.6      # u
    contact_damage: float = 1.0             # HP
    damage_cooldown: float = 1.0            # s
    facing_deadzone: float = 0.01

    def __post_init__(self):
        for name in ("chase_range", "chase_speed", "wander_speed",
                     "edge_offset", "path_update_rate",
                     "waypoint_reach_distance", "wander_radius",
                     "contact_damage_radius", "contact_damage",
                     "damage_cooldown", "facing_deadzone"):
            _require(getattr(self, name) >= 0, f"{name} must be >= 0")
        _require(self.max_bfs_iterations > 0, "max_bfs_iterations must be > 0")
        _require(self.wander_samples > 0, "wander_samples must be > 0")

    @classmethod
    def from_tuning(cls, **overrides) -> "MotorcycleConfig":
        return _from_section(cls, "motorcycle", overrides)


@dataclass(frozen=True)
class EncounterConfig:
    """Host scheduling and player bookkeeping."""
    fixed_dt: float = FIXED_DT      # s
    max_steps_per_frame: int = MAX_STEPS_PER_FRAME
    player_health: float = 5.0      # HP

    def __post_init__(self):
        _require(self.fixed_dt > 0, "fixed_dt must be > 0")
        _require(self.max_steps_per_frame > 0, "max_steps_per_frame must be > 0")
        _require(self.player_health > 0, "player_health must be > 0")

    @classmethod
    def from_tuning(cls, **overrides) -> "EncounterConfig":
        return _from_section(cls, "encounter", overrides)
