"""components.dev_log — What every agent decided, and when.

Stands in for editor gizmos: pursuers and the encounter host append
:class:`LogEntry` records, and hosts, tests or a debug overlay read them
back.  The buffer is bounded; the oldest entries fall off first.

    log.record(1, "pursuit", "replan", name="moto-1", t=3.2,
               details={"waypoints": 7})
    log.count("pursuit", "replan")

Categories in use: ``"pursuit"`` (mode changes, replans, contact hits,
resets), ``"damage"`` (player hits and defeat), ``"encounter"``.
"""

from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field


@dataclass(frozen=True)
class LogEntry:
    t: float
    eid: int
    name: str
    cat: str
    msg: str
    details: dict | None = None

    def __str__(self) -> str:
        extra = f"  {self.details}" if self.details else ""
        return f"{self.t:7.2f}s  {self.name or self.eid:<8} [{self.cat}] {self.msg}{extra}"


@dataclass
class DevLog:
    """Bounded log of agent decisions.

    ``cats`` / ``eids``: when non-empty, only matching entries are kept.
    """

    max_entries: int = 500
    cats: set[str] = field(default_factory=set)
    eids: set[int] = field(default_factory=set)
    paused: bool = False
    entries: deque[LogEntry] = field(init=False)

    def __post_init__(self):
        self.entries = deque(maxlen=self.max_entries)

    def record(self, eid: int, cat: str, msg: str, *,
               name: str = "", t: float = 0.0,
               details: dict | None = None) -> None:
        if self.paused:
            return
        if self.cats and cat not in self.cats:
            return
        if self.eids and eid not in self.eids:
            return
        self.entries.append(LogEntry(t, eid, name, cat, msg, details))

    def clear(self) -> None:
        self.entries.clear()

    def recent(self, n: int = 50) -> list[LogEntry]:
        """The *n* newest entries, oldest first."""
        if n <= 0:
            return []
        return list(self.entries)[-n:]

    def for_eid(self, eid: int) -> list[LogEntry]:
        return [e for e in self.entries if e.eid == eid]

    def for_cat(self, cat: str, msg: str | None = None) -> list[LogEntry]:
        """Entries in *cat*, optionally only those whose message is *msg*."""
        return [e for e in self.entries
                if e.cat == cat and (msg is None or e.msg == msg)]

    def count(self, cat: str, msg: str | None = None) -> int:
        return len(self.for_cat(cat, msg))

    def __len__(self) -> int:
        return len(self.entries)
