"""core/events.py — Encounter events and the bus that carries them.

Motorcycles never touch the player's health themselves.  Their damage
sink posts a :class:`ContactDamage`; the encounter drains the bus once
per frame and applies it::

    bus.subscribe(ContactDamage, on_hit)
    bus.emit(ContactDamage(source="moto-1", magnitude=1.0, t=clock.time))
    bus.drain()

Events are plain dataclasses keyed by their class.  Handlers run in
subscription order, events in FIFO order; anything a handler emits is
delivered in the same ``drain()``.
"""

from __future__ import annotations
from collections import Counter, defaultdict
from dataclasses import dataclass
from typing import Callable
import traceback


@dataclass
class Event:
    t: float = 0.0          # simulation time when raised (s)


@dataclass
class ContactDamage(Event):
    """A pursuer touched the player and its contact cooldown had elapsed."""
    source: str = ""
    magnitude: float = 1.0


@dataclass
class PlayerDefeated(Event):
    """The player's health reached zero."""
    source: str = ""


@dataclass
class EncounterReset(Event):
    """Every agent went back to its spawn point."""


Handler = Callable[[Event], None]


class EventBus:
    """Queue now, deliver on ``drain()``."""

    def __init__(self, max_rounds: int = 16):
        self.max_rounds = max_rounds
        self._queue: list[Event] = []
        self._handlers: dict[type, list[Handler]] = defaultdict(list)
        self._delivered: Counter[str] = Counter()

    def subscribe(self, event_type: type, handler: Handler) -> None:
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: type, handler: Handler) -> None:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: Event) -> None:
        self._queue.append(event)

    def drain(self) -> int:
        """Deliver every queued event.  Returns how many were delivered.

        Follow-up events raised by handlers get up to ``max_rounds``
        rounds; whatever is still queued after that waits for the next
        drain.  A failing handler is reported and the rest still run.
        """
        delivered = 0
        for _ in range(self.max_rounds):
            if not self._queue:
                break
            batch, self._queue = self._queue, []
            for event in batch:
                name = type(event).__name__
                self._delivered[name] += 1
                for handler in list(self._handlers.get(type(event), [])):
                    try:
                        handler(event)
                    except Exception as exc:
                        print(f"[EVENT] {name} handler {handler!r} failed: {exc}")
                        traceback.print_exc()
            delivered += len(batch)
        return delivered

    def clear(self) -> None:
        """Drop pending events without delivering them."""
        self._queue.clear()

    def stats(self) -> dict[str, int]:
        """Delivered-event counts by class name since the bus was made."""
        return dict(self._delivered)

    def pending_count(self) -> int:
        return len(self._queue)

    def __repr__(self) -> str:
        return f"EventBus(pending={len(self._queue)}, types={len(self._handlers)})"
