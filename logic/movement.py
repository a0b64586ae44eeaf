"""logic/movement.py — Road-constrained velocity resolution.

Turns a desired direction into a velocity that keeps the agent on the
passable surface for one fixed step.  Instead of testing the agent's
centre, the check point is pushed ``edge_offset`` ahead in the direction
of travel so the leading edge stops at the road boundary before the
centre's cell ever changes.

When the full step would leave the road, X and Y are tested separately
from the same probe point and any open axis is kept — moving diagonally
into a kerb slides along it instead of stopping dead.

Velocities are returned, never applied: the host integrates positions
(see :func:`integrate`).
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from pygame.math import Vector2

if TYPE_CHECKING:
    from core.grid import GridSurface


def clamp_unit(direction) -> Vector2:
    """Copy of *direction* scaled down to length 1 if it is longer.

    Stops diagonal input (1, 1) from being ~41% faster than straight input.
    Shorter vectors (analogue half-tilt, zero) pass through unchanged.
    """
    d = Vector2(direction)
    if d.length_squared() > 1.0:
        d.scale_to_length(1.0)
    return d


def normalized(v) -> Vector2:
    """Unit vector along *v*, or the zero vector for zero input."""
    v = Vector2(v)
    if v.length_squared() == 0.0:
        return Vector2()
    return v.normalize()


def resolve_velocity(position, direction, speed: float, dt: float,
                     edge_offset: float,
                     surface: GridSurface | None) -> Vector2:
    """Velocity for one step toward *direction* that stays on *surface*.

    Parameters
    ----------
    position : Vector2
        Agent centre in world units.
    direction : Vector2
        Desired direction; clamped to unit length, zero = stand still.
    speed : float
        Full speed (u/s).
    dt : float
        The fixed step the velocity will be integrated over (s).
    edge_offset : float
        Distance from centre to leading edge (u).
    surface : GridSurface | None
        ``None`` means no road layer — movement is unconstrained.

    Returns
    -------
    Vector2
        ``direction * speed`` when the step is clear, the per-axis slide
        when only one axis is clear, or zero when both are blocked.
    """
    direction = clamp_unit(direction)
    if surface is None:
        return direction * speed

    probe = Vector2(position) + normalized(direction) * edge_offset
    step = direction * speed * dt

    if surface.is_passable(surface.world_to_cell(probe + step)):
        return direction * speed

    # Edge slide — test each axis on its own from the same probe
    kept = Vector2()
    if surface.is_passable(surface.world_to_cell(probe + Vector2(step.x, 0.0))):
        kept.x = direction.x
    if surface.is_passable(surface.world_to_cell(probe + Vector2(0.0, step.y))):
        kept.y = direction.y
    return kept * speed


def integrate(position, velocity, dt: float) -> Vector2:
    """Explicit-Euler position after *dt* seconds at *velocity*."""
    return Vector2(position) + Vector2(velocity) * dt
