"""components — Plain state / config dataclasses, organised by domain.

Submodules
----------
agents      PursuitMode, BikeState, AgentState
config      BikeConfig, MotorcycleConfig, EncounterConfig
rpg         Health
resources   GameClock, FixedStep
dev_log     DevLog, LogEntry

All public names are re-exported here so callers can write
``from components import AgentState``.
"""

# ── Agents ───────────────────────────────────────────────────────────
from components.agents import PursuitMode, BikeState, AgentState

# ── Config ───────────────────────────────────────────────────────────
from components.config import BikeConfig, MotorcycleConfig, EncounterConfig

# ── RPG ──────────────────────────────────────────────────────────────
from components.rpg import Health

# ── Encounter resources / singletons ─────────────────────────────────
from components.resources import GameClock, FixedStep

# ── Logging ──────────────────────────────────────────────────────────
from components.dev_log import DevLog, LogEntry

__all__ = [
    # agents
    "PursuitMode", "BikeState", "AgentState",
    # config
    "BikeConfig", "MotorcycleConfig", "EncounterConfig",
    # rpg
    "Health",
    # resources
    "GameClock", "FixedStep",
    # logging
    "DevLog", "LogEntry",
]
