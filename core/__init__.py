"""core package initialization.

Making `core` an explicit package so imports like `import core.grid`
work reliably when running from the project root.
"""

__all__ = ["constants", "events", "grid", "tuning"]
