"""logic — Movement, planning and pursuit systems.

Subpackages
-----------
ai/         — pursuit state machine, steering helpers, wander targets

Top-level modules
-----------------
movement        — road-constrained velocity resolution (+ integration)
pathfinding     — 4-connected BFS path planner
bike            — player bike controller
encounter       — headless host: clock, fixed-step loop, damage routing
"""
