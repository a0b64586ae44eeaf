"""logic/ai/steering.py — Direction and orientation helpers.

Small pure functions shared by the bike and the pursuit controller.
They never touch a surface; road constraints are applied afterwards by
``logic.movement.resolve_velocity``.
"""

from __future__ import annotations

from pygame.math import Vector2

from core.constants import FACING_LEFT, FACING_RIGHT
from logic.movement import normalized


def seek(position, target) -> tuple[Vector2, float]:
    """Return ``(unit direction, distance)`` from *position* to *target*.

    The direction is zero when the two points coincide.
    """
    to_target = Vector2(target) - Vector2(position)
    return normalized(to_target), to_target.length()


def face_toward(facing: str, direction, deadzone: float = 0.0) -> str:
    """New left/right facing for movement along *direction*.

    Only flips when the horizontal component clears *deadzone*; purely
    vertical (or tiny) movement keeps the current facing.
    """
    dx = Vector2(direction).x
    if abs(dx) <= deadzone:
        return facing
    return FACING_LEFT if dx < 0 else FACING_RIGHT
