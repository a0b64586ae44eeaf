"""core/constants.py — Shared constants used across the codebase.

Centralises magic numbers so there's exactly one place to change them.

Unit System
-----------
All gameplay distances are measured in **world units**, where:

    1 cell = 1 world unit   (the default ``TileGrid`` cell size)

    Distance / position     u       (world units)
    Speed                   u/s     (world units per second)
    Time (simulation)       s       (seconds of accumulated ``dt``)
    Damage (contact)        HP      (per hit)

Cell coordinates are ``(x, y)`` with ``y`` growing "up" the map, so the
ASCII builder in ``core/grid.py`` reads its first text line as the
*top* row (highest ``y``).

Reference speeds (original road-chase tuning):
    Motorcycle wander   1.5 u/s
    Motorcycle chase    3.0 u/s
    Player bike         5.0 u/s   (always outruns a chaser on open road)
"""

# Tile IDs
TILE_VOID     = 0    # off-road: nothing painted on the road layer
TILE_ROAD     = 1
TILE_OBSTACLE = 2    # painted road with a blocker on it

# Tiles an agent may occupy / traverse
PASSABLE_TILES: frozenset[int] = frozenset({TILE_ROAD})

# ASCII map legend for ``TileGrid.from_ascii``
ASCII_TILES: dict[str, int] = {
    ".": TILE_ROAD,
    "#": TILE_OBSTACLE,
    " ": TILE_VOID,
    "~": TILE_VOID,
}

# 4-connected neighbour order: up, down, left, right.  Path planning
# relies on this order being fixed so ties break the same way every call.
NEIGHBOURS_4: tuple[tuple[int, int], ...] = (
    (0, 1), (0, -1), (-1, 0), (1, 0),
)

# Orientation flag values
FACING_LEFT  = "left"
FACING_RIGHT = "right"

# Fixed-step physics
FIXED_DT: float = 1.0 / 50.0           # s  (50 Hz, the classic physics rate)
MAX_STEPS_PER_FRAME: int = 5           # death-spiral guard
