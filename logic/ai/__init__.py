"""logic/ai — AI subpackage.

Modules
-------
pursuit     — Wandering ⇄ Chasing controller for enemy motorcycles
steering    — seek direction, left/right facing
wander      — disk sampler + wander-target picker
"""
