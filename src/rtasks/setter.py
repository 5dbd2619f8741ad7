"""Setter resolution: assign a member, or the member at a dotted path."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

from .errors import MemberNotFoundError
from .getter import resolve_owner
from .model import Entity

logger = logging.getLogger(__name__)

_MISSING = object()


def set_member(obj: Any, name: str, value: Any) -> None:
    """Assign *value* to the member *name* of *obj*.

    When the member is read-only on the object's own type, the base chain
    is walked until a type declaring a writable member of that name is
    found, and the value is written through that type's member. This
    skips whatever the derived type does on read.
    """
    if isinstance(obj, Entity):
        _set_entity_member(obj, name, value)
        return

    if isinstance(obj, MutableMapping):
        if name not in obj:
            raise MemberNotFoundError(type(obj).__name__, name, writable=True)
        obj[name] = value
        return

    _set_attribute(obj, name, value)


def set_property_value(obj: Any, path: str, value: Any) -> None:
    """Assign *value* at *path*, e.g. ``set_property_value(o, "a.b.c", v)``.

    Equivalent to ``o.a.b.c = v``, with the ancestor fallback of
    :func:`set_member` applied to the last segment.
    """
    owner, last = resolve_owner(obj, path)
    set_member(owner, last, value)
    logger.debug("wrote %s <- %r", path, value)


# ---------------------------------------------------------------------------
# Entity members
# ---------------------------------------------------------------------------

def _set_entity_member(entity: Entity, name: str, value: Any) -> None:
    for td in entity.typedef.chain():
        member = td.declared(name)
        if member is None or not member.writable:
            continue
        if td is not entity.typedef:
            logger.debug(
                "%s.%s is read-only, writing through %s", entity.type_name, name, td.name
            )
        member.write(entity, value)
        return
    raise MemberNotFoundError(entity.type_name, name, writable=True)


# ---------------------------------------------------------------------------
# Plain Python attributes
# ---------------------------------------------------------------------------

def _set_attribute(obj: Any, name: str, value: Any) -> None:
    cls = type(obj)
    shadowed = False
    for klass in cls.__mro__:
        attr = vars(klass).get(name, _MISSING)
        if attr is _MISSING:
            continue
        if isinstance(attr, property):
            if attr.fset is None:
                # read-only at this level; an ancestor may still declare a setter
                shadowed = True
                continue
            if shadowed:
                logger.debug(
                    "%s.%s is read-only, writing through %s",
                    cls.__name__, name, klass.__name__,
                )
            attr.__set__(obj, value)
            return
        if hasattr(type(attr), "__set__"):
            attr.__set__(obj, value)
            return
        if shadowed:
            # an instance value would stay hidden behind the read-only property
            break
        # plain class attribute or method: lands in the instance dict
        setattr(obj, name, value)
        return
    else:
        if not shadowed and name in getattr(obj, "__dict__", {}):
            setattr(obj, name, value)
            return
    raise MemberNotFoundError(cls.__name__, name, writable=True)
