"""Process-scoped resource registry.

Resources stored here outlive reloads of the modules that create them, so a
hot-reloading dev server keeps reusing one database handle instead of opening
a new pool on every reload. Nothing in this module is reloaded by the
application.
"""
from typing import Any


class ProcessScope:
    """Named slots holding long-lived resources for the current process."""

    def __init__(self) -> None:
        self._slots: dict[str, Any] = {}

    def get(self, name: str) -> Any | None:
        return self._slots.get(name)

    def set(self, name: str, resource: Any) -> None:
        self._slots[name] = resource

    def pop(self, name: str) -> Any | None:
        return self._slots.pop(name, None)

    def __contains__(self, name: str) -> bool:
        return name in self._slots


process_scope = ProcessScope()
