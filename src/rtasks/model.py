"""Entity model: typed instances backed by a TypeDef member table."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .typedef import TypeDef


# -- Unassigned marker ------------------------------------------------------

class _EmptyType:
    """Value of a stored member that was never assigned.

    There is exactly one instance, ``Empty``; test for it with ``is``.
    """

    __slots__ = ()

    def __new__(cls) -> _EmptyType:
        if "_singleton" not in vars(cls):
            cls._singleton = object.__new__(cls)
        return cls._singleton

    def __repr__(self) -> str:
        return "Empty"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "Empty"


Empty = _EmptyType()


def is_absent(value: Any) -> bool:
    """True for ``None`` and ``Empty``."""
    return value is None or value is Empty


# -- Entity ----------------------------------------------------------------

@dataclass(slots=True)
class Entity:
    typedef: TypeDef
    fields: dict[str, Any] = field(default_factory=dict)

    @property
    def type_name(self) -> str:
        return self.typedef.name

    def __repr__(self) -> str:
        return f"Entity({self.typedef.name})"
