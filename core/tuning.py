"""core/tuning.py — Tuning tables for the bike, motorcycles and encounter.

Numbers live in TOML tables, one per agent kind::

    [bike]          BikeConfig
    [motorcycle]    MotorcycleConfig
    [encounter]     EncounterConfig

The file is ``data/tuning.toml`` unless the ``ROAD_CHASE_TUNING``
environment variable names another one.  Nothing is read at import
time; hosts call ``load()`` once, configs copy what they need in
``from_tuning()``.  A later ``load()`` / ``reload()`` only affects
configs built afterwards.

    from core import tuning
    tuning.load()
    tuning.get("motorcycle", "chase_range", 8.0)
"""

from __future__ import annotations
import os
import tomllib
from pathlib import Path


ENV_VAR = "ROAD_CHASE_TUNING"

_tables: dict = {}
_source: Path | None = None


def default_path() -> Path:
    """``$ROAD_CHASE_TUNING`` if set, else ``data/tuning.toml`` in the project."""
    env = os.environ.get(ENV_VAR)
    if env:
        return Path(env)
    return Path(__file__).resolve().parent.parent / "data" / "tuning.toml"


def load(path: str | Path | None = None) -> int:
    """Replace the loaded tables with the contents of *path*.

    A missing file leaves every table empty (configs fall back to their
    dataclass defaults).  Top-level keys that aren't tables are skipped
    with a warning.  Returns the number of values loaded.
    """
    global _tables, _source

    path = Path(path) if path is not None else default_path()
    _source = path

    if not path.exists():
        print(f"[TUNING] {path} not found, using defaults")
        _tables = {}
        return 0

    with open(path, "rb") as f:
        raw = tomllib.load(f)

    tables = {}
    for name, value in raw.items():
        if isinstance(value, dict):
            tables[name] = value
        else:
            print(f"[TUNING] ignoring top-level key {name!r} in {path} (not a table)")
    _tables = tables

    count = sum(_count_values(t) for t in tables.values())
    print(f"[TUNING] {count} values in {len(tables)} tables from {path}")
    return count


def reload() -> int:
    """Re-read the file last passed to ``load()``."""
    return load(_source)


def clear() -> None:
    """Forget every loaded table (back to pure dataclass defaults)."""
    global _tables, _source
    _tables = {}
    _source = None


def loaded_from() -> Path | None:
    return _source


def section(name: str) -> dict:
    """Shallow copy of table *name* (dotted for nested tables), or ``{}``."""
    node = _walk(name)
    return dict(node) if isinstance(node, dict) else {}


def get(table: str, key: str, default=None):
    """One value from *table*, or *default* when the table or key is absent."""
    node = _walk(table)
    if not isinstance(node, dict):
        return default
    return node.get(key, default)


def _walk(dotted: str):
    node = _tables
    for part in dotted.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node


def _count_values(table: dict) -> int:
    return sum(_count_values(v) if isinstance(v, dict) else 1
               for v in table.values())
