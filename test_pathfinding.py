"""test_pathfinding.py — Tile grid + BFS path planner.

Checks the grid's world↔cell mapping, then the planner: exact shortest
lengths against an independent relaxation oracle on seeded random grids,
deterministic tie-breaking, the iteration cap and unreachable goals.

Run:  python test_pathfinding.py
"""
from __future__ import annotations
import sys, random, traceback

from pygame.math import Vector2

from core.constants import TILE_ROAD, TILE_OBSTACLE, TILE_VOID
from core.grid import Cell, TileGrid
from logic.pathfinding import find_path, path_cells


# ── Test harness ─────────────────────────────────────────────────────

_passed = 0
_failed = 0

def ok(label: str):
    global _passed
    _passed += 1
    print(f"  [PASS] {label}")

def fail(label: str, detail: str = ""):
    global _failed
    _failed += 1
    msg = f"  [FAIL] {label}"
    if detail:
        msg += f" — {detail}"
    print(msg)

def check(cond: bool, label: str, detail: str = ""):
    if cond:
        ok(label)
    else:
        fail(label, detail)
    assert cond, f"{label} {detail}"


# ── Helpers ──────────────────────────────────────────────────────────

class CountingSurface:
    """Wraps a grid and counts passability queries."""

    def __init__(self, grid: TileGrid):
        self.grid = grid
        self.queries = 0

    def is_passable(self, cell):
        self.queries += 1
        return self.grid.is_passable(cell)

    def world_to_cell(self, pos):
        return self.grid.world_to_cell(pos)

    def cell_center_to_world(self, cell):
        return self.grid.cell_center_to_world(cell)


def _center(c: tuple[int, int]) -> Vector2:
    return Vector2(c[0] + 0.5, c[1] + 0.5)


def _oracle_distance(grid: TileGrid, start: Cell, goal: Cell) -> int | None:
    """Shortest 4-connected hop count by repeated relaxation (no queue)."""
    inf = 10 ** 9
    dist = {c: inf for c in grid.passable_cells()}
    dist[start] = 0
    changed = True
    while changed:
        changed = False
        for c in list(dist):
            for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
                n = Cell(c.x + dx, c.y + dy)
                if n in dist and dist[n] + 1 < dist[c]:
                    dist[c] = dist[n] + 1
                    changed = True
    d = dist.get(goal, inf)
    return None if d >= inf else d


def _is_chain(start: Cell, cells: list[Cell]) -> bool:
    prev = start
    for c in cells:
        if abs(c.x - prev.x) + abs(c.y - prev.y) != 1:
            return False
        prev = c
    return True


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 1:  GRID
# ═══════════════════════════════════════════════════════════════════════

def test_grid_mapping():
    print("\n=== 1: Tile grid ===")
    grid = TileGrid.from_ascii([
        "..#",
        ".  ",
    ])
    check(grid.width == 3 and grid.height == 2, f"size {grid.width}x{grid.height}")
    check(grid.tile_at(Cell(2, 1)) == TILE_OBSTACLE, "top line is the top row")
    check(grid.tile_at(Cell(1, 0)) == TILE_VOID, "space is void")
    check(grid.is_passable(Cell(0, 0)) and grid.is_passable(Cell(1, 1)),
          "road cells passable")
    check(not grid.is_passable(Cell(2, 1)), "obstacle impassable")
    check(not grid.is_passable(Cell(-1, 0)) and not grid.is_passable(Cell(0, 5)),
          "out of bounds impassable")
    check(grid.world_to_cell(Vector2(-0.2, 1.7)) == Cell(-1, 1),
          "negative world coords floor, not truncate")

    big = TileGrid.filled(4, 4, TILE_ROAD, cell_size=2.0, origin=(10.0, -4.0))
    c = big.world_to_cell(Vector2(13.9, -0.1))
    check(c == Cell(1, 1), f"scaled grid world→cell {tuple(c)}")
    check(big.cell_center_to_world(c) == Vector2(13.0, -1.0),
          "scaled grid cell centre")
    check(big.world_to_cell(big.cell_center_to_world(Cell(3, 2))) == Cell(3, 2),
          "centre maps back to its own cell")


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 2:  PLANNER
# ═══════════════════════════════════════════════════════════════════════

def test_open_grid_scenario():
    print("\n=== 2a: 5×5 open grid, (0,0) → (4,4) ===")
    grid = TileGrid.filled(5, 5, TILE_ROAD)
    path = find_path(_center((0, 0)), _center((4, 4)), grid, 1000)
    check(len(path) == 8, f"8 waypoints (got {len(path)})")
    check(path and path[-1] == Vector2(4.5, 4.5), "ends at centre of (4,4)")
    check(Vector2(0.5, 0.5) not in path, "start cell excluded")
    cells = [grid.world_to_cell(p) for p in path]
    check(_is_chain(Cell(0, 0), cells), "consecutive waypoints are 4-neighbours")


def test_same_cell_and_no_surface():
    print("\n=== 2b: Trivial cases ===")
    grid = TileGrid.filled(5, 5, TILE_ROAD)
    check(find_path(Vector2(1.1, 1.1), Vector2(1.9, 1.8), grid, 1000) == [],
          "same cell → empty path")
    check(find_path(Vector2(0.5, 0.5), Vector2(3.5, 3.5), None, 1000) == [],
          "no surface → empty path")
    grid.set_tile(Cell(3, 3), TILE_OBSTACLE)
    check(find_path(Vector2(0.5, 0.5), Vector2(3.5, 3.5), grid, 1000) == [],
          "impassable goal → empty path")


def test_determinism_and_tiebreak():
    print("\n=== 2c: Determinism ===")
    grid = TileGrid.filled(6, 6, TILE_ROAD)
    a = [tuple(p) for p in find_path(_center((0, 0)), _center((5, 3)), grid)]
    b = [tuple(p) for p in find_path(_center((0, 0)), _center((5, 3)), grid)]
    check(a == b, "identical input → identical path")

    # Up is expanded before right, so the diagonal tie goes via (0,1)
    cells = path_cells(_center((0, 0)), _center((1, 1)), grid)
    check(cells == [Cell(0, 1), Cell(1, 1)], f"tie broken 'up' first: {cells}")


def test_routes_around_walls():
    print("\n=== 2d: Detour through a gap ===")
    grid = TileGrid.from_ascii([
        ".......",
        "######.",
        ".......",
    ])
    path = find_path(_center((0, 0)), _center((0, 2)), grid)
    check(len(path) == 14, f"detour is 6 right + 2 up + 6 left (got {len(path)})")
    cells = [grid.world_to_cell(p) for p in path]
    check(all(grid.is_passable(c) for c in cells), "every waypoint is road")
    check(Cell(6, 1) in cells, "route goes through the gap")


def test_unreachable_and_cap():
    print("\n=== 2e: Unreachable goal + iteration cap ===")
    grid = TileGrid.from_ascii([
        "...  ...",
        "...  ...",
        "...  ...",
    ])
    surf = CountingSurface(grid)
    path = find_path(_center((0, 0)), _center((7, 2)), surf, max_iterations=50)
    check(path == [], "disconnected goal → empty path")
    check(surf.queries <= 4 * 50, f"queries bounded by 4×cap (got {surf.queries})")

    open_grid = TileGrid.filled(40, 40, TILE_ROAD)
    surf = CountingSurface(open_grid)
    path = find_path(_center((0, 0)), _center((39, 39)), surf, max_iterations=10)
    check(path == [], "goal beyond the cap → empty path")
    check(surf.queries <= 40, f"at most 10 expansions (queries={surf.queries})")

    path = find_path(_center((0, 0)), _center((39, 39)), open_grid, max_iterations=2000)
    check(len(path) == 78, f"same query with enough budget succeeds (len={len(path)})")


def test_shortest_against_oracle():
    """Random 7×7 grids, ~30% blocked, compared with a relaxation oracle."""
    print("\n=== 2f: Shortest length vs oracle ===")
    rng = random.Random(1234)
    mismatches = []
    trials = 0
    for _ in range(40):
        tiles = [[TILE_OBSTACLE if rng.random() < 0.3 else TILE_ROAD
                  for _ in range(7)] for _ in range(7)]
        grid = TileGrid(tiles)
        road = list(grid.passable_cells())
        if len(road) < 2:
            continue
        for _ in range(5):
            s, g = rng.sample(road, 2)
            trials += 1
            cells = path_cells(_center(s), _center(g), grid, 10_000)
            expected = _oracle_distance(grid, s, g)
            if expected is None:
                if cells:
                    mismatches.append((s, g, "found path to unreachable goal"))
                continue
            if len(cells) != expected:
                mismatches.append((s, g, f"len {len(cells)} != {expected}"))
            elif not _is_chain(s, cells) or cells[-1] != g:
                mismatches.append((s, g, "not a connected route to goal"))
            elif not all(grid.is_passable(c) for c in cells):
                mismatches.append((s, g, "route crosses a blocked cell"))
    check(not mismatches, f"{trials} random queries match the oracle",
          f"{mismatches[:3]}")


# ═══════════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("Grid", test_grid_mapping),
        ("Open grid", test_open_grid_scenario),
        ("Trivial cases", test_same_cell_and_no_surface),
        ("Determinism", test_determinism_and_tiebreak),
        ("Walls", test_routes_around_walls),
        ("Unreachable", test_unreachable_and_cap),
        ("Oracle", test_shortest_against_oracle),
    ]

    for name, fn in sections:
        try:
            fn()
        except AssertionError:
            pass  # already counted by check()
        except Exception:
            _failed += 1
            print(f"\n  [CRASH] {name} — unhandled exception:")
            traceback.print_exc()

    total = _passed + _failed
    print(f"\n{'=' * 60}")
    print(f"  Pathfinding Tests: {_passed} passed, {_failed} failed  (total {total})")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
