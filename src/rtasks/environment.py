"""Type tables: a named collection of TypeDefs and entity creation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .errors import MemberNotFoundError
from .model import Empty, Entity
from .typedef import TypeDef

logger = logging.getLogger(__name__)

DEPRECATED = "deprecated"


@dataclass
class Environment:
    """Holds the type definitions exported by one module."""

    name: str = ""
    typedefs: dict[str, TypeDef] = field(default_factory=dict)

    # -- TypeDef --------------------------------------------------------

    def register_typedef(self, td: TypeDef) -> None:
        self.typedefs[td.name] = td

    def resolve_typedef(self, name: str) -> TypeDef | None:
        return self.typedefs.get(name)

    def exported_types(self) -> list[TypeDef]:
        return [td for td in self.typedefs.values() if td.public]

    def obsolete_classes(self) -> list[str]:
        """Names of public classes carrying the deprecated marker."""
        return [
            td.name
            for td in self.exported_types()
            if td.kind == "class" and DEPRECATED in td.markers
        ]

    # -- Entity creation ------------------------------------------------

    def create_entity(self, type_name: str, **values: Any) -> Entity:
        """Instantiate an Entity of *type_name* with initial field values.

        Stored members start out as ``Empty``. Initial values are written
        straight into ``fields`` and must name a member of the type.
        """
        td = self.resolve_typedef(type_name)
        if td is None:
            raise MemberNotFoundError(self.name, type_name)

        fields: dict[str, Any] = {}
        for name in td.member_names():
            member = td.find(name)
            if member is not None and member.stored:
                fields[name] = Empty
        for name, value in values.items():
            if td.find(name) is None:
                raise MemberNotFoundError(td.name, name)
            fields[name] = value
        logger.debug("created %s with %d field(s)", td.name, len(fields))
        return Entity(typedef=td, fields=fields)
