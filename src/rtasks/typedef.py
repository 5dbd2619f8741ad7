"""TypeDef and MemberDef: per-type member tables linked through a base type."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator


@dataclass
class MemberDef:
    name: str
    kind: str = "any"  # free-form type label, e.g. "text" | "number" | typename
    getter: Callable[[Any], Any] | None = None
    setter: Callable[[Any, Any], None] | None = None
    readonly: bool = False  # only meaningful for stored members

    @property
    def stored(self) -> bool:
        """True when the member reads and writes the entity's ``fields`` dict."""
        return self.getter is None and self.setter is None

    @property
    def writable(self) -> bool:
        if self.setter is not None:
            return True
        return self.stored and not self.readonly

    def read(self, entity) -> Any:
        if self.getter is not None:
            return self.getter(entity)
        from .model import Empty
        return entity.fields.get(self.name, Empty)

    def write(self, entity, value: Any) -> None:
        if self.setter is not None:
            self.setter(entity, value)
        else:
            entity.fields[self.name] = value


@dataclass
class TypeDef:
    name: str
    members: list[MemberDef] = field(default_factory=list)
    base: "TypeDef | None" = None
    kind: str = "class"  # "class" | "interface" | "struct"
    public: bool = True
    markers: set[str] = field(default_factory=set)

    def declared(self, name: str) -> MemberDef | None:
        """Return the member this type itself declares, ignoring the base chain."""
        for member in self.members:
            if member.name == name:
                return member
        return None

    def find(self, name: str) -> MemberDef | None:
        """Return the nearest declaration of *name* along the base chain."""
        for td in self.chain():
            member = td.declared(name)
            if member is not None:
                return member
        return None

    def chain(self) -> Iterator[TypeDef]:
        """Yield this type, its base, the base of its base, and so on."""
        td: TypeDef | None = self
        while td is not None:
            yield td
            td = td.base

    def member_names(self) -> list[str]:
        names: list[str] = []
        for td in self.chain():
            for member in td.members:
                if member.name not in names:
                    names.append(member.name)
        return names
