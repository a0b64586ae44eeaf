"""logic/pathfinding.py — Breadth-first path planning on the road grid.

Search
------
Plain BFS over the 4-connected grid (up, down, left, right — no
diagonals), expanding only into passable cells.  Every step costs the
same, so the first time the goal is dequeued its parent chain is a route
with the fewest cell transitions.  Neighbour order is fixed
(``NEIGHBOURS_4``): among equally short routes the same one is returned
every time for the same input.

Bounds
------
``max_iterations`` caps the number of dequeues.  Hitting the cap and
running out of frontier both return an empty path; callers never need
to tell the two apart.

Public API
----------
``find_path(start, goal, surface, max_iterations)`` → ``list[Vector2]``
``path_cells(start, goal, surface, max_iterations)`` → ``list[Cell]``
"""

from __future__ import annotations
from collections import deque
from typing import TYPE_CHECKING

from pygame.math import Vector2

from core.constants import NEIGHBOURS_4
from core.grid import Cell

if TYPE_CHECKING:
    from core.grid import GridSurface


def path_cells(start_world, goal_world, surface: GridSurface | None,
               max_iterations: int = 1000) -> list[Cell]:
    """BFS from the start cell to the goal cell.

    Returns the cells after the start cell up to and including the goal
    cell, or ``[]`` when already there, unreachable, capped, or when
    there is no surface to plan over.
    """
    if surface is None:
        return []

    start = Cell(*surface.world_to_cell(Vector2(start_world)))
    goal = Cell(*surface.world_to_cell(Vector2(goal_world)))
    if start == goal:
        return []

    frontier: deque[Cell] = deque([start])
    came_from: dict[Cell, Cell] = {start: start}

    iterations = 0
    found = False
    while frontier and iterations < max_iterations:
        iterations += 1
        current = frontier.popleft()
        if current == goal:
            found = True
            break

        for dx, dy in NEIGHBOURS_4:
            nxt = Cell(current[0] + dx, current[1] + dy)
            if nxt in came_from:
                continue
            if not surface.is_passable(nxt):
                continue
            came_from[nxt] = current
            frontier.append(nxt)

    if not found:
        return []

    # ── Reconstruct goal → start, then flip ──────────────────────────
    cells: list[Cell] = []
    node = goal
    while node != start:
        cells.append(node)
        node = came_from[node]
    cells.reverse()
    return cells


def find_path(start_world, goal_world, surface: GridSurface | None,
              max_iterations: int = 1000) -> list[Vector2]:
    """Waypoints (passable cell centres) from near-start to goal.

    The start cell is excluded and the goal cell included.  Empty when
    start and goal share a cell or no route was found within
    *max_iterations* dequeues.
    """
    cells = path_cells(start_world, goal_world, surface, max_iterations)
    return [surface.cell_center_to_world(c) for c in cells]
