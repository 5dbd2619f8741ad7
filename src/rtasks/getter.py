"""Getter resolution: read a member, or a dotted path of members."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from typing import Any

from .errors import InvalidPathError, MemberNotFoundError, NullIntermediateError
from .model import Entity, is_absent

logger = logging.getLogger(__name__)

_MISSING = object()


def split_path(path: str) -> list[str]:
    """Split a dot-separated property path into its segments."""
    segments = path.split(".") if path else []
    if not segments or any(not s for s in segments):
        raise InvalidPathError(path)
    return segments


def get_member(value: Any, name: str) -> Any:
    """Read the member *name* of a single value.

    - Entity: nearest declaration along the TypeDef base chain
    - Mapping: key lookup
    - anything else: attribute lookup on the runtime type

    An AttributeError raised inside an existing property getter propagates
    unchanged rather than being reported as a missing member.
    """
    if isinstance(value, Entity):
        member = value.typedef.find(name)
        if member is None:
            raise MemberNotFoundError(value.type_name, name)
        return member.read(value)

    if isinstance(value, Mapping):
        try:
            return value[name]
        except KeyError:
            raise MemberNotFoundError(type(value).__name__, name) from None

    try:
        return getattr(value, name)
    except AttributeError as exc:
        if inspect.getattr_static(value, name, _MISSING) is not _MISSING:
            # the member exists; its getter raised
            raise
        raise MemberNotFoundError(type(value).__name__, name) from exc


def resolve_owner(obj: Any, path: str) -> tuple[Any, str]:
    """Resolve every segment but the last.

    Returns ``(owner, last_segment)`` where *owner* is the object holding
    the member named by the last segment.
    """
    segments = split_path(path)
    current = obj
    for segment in segments[:-1]:
        current = _step(current, segment, path)
    if is_absent(current):
        raise NullIntermediateError(path, segments[-1])
    return current, segments[-1]


def get_property_value(obj: Any, path: str) -> Any:
    """Return the value at *path*, e.g. ``get_property_value(o, "a.b.c")``.

    The result equals reading ``o.a.b.c`` one member at a time. The last
    segment may resolve to ``None`` or ``Empty``; an intermediate one may not.
    """
    owner, last = resolve_owner(obj, path)
    value = get_member(owner, last)
    logger.debug("read %s -> %r", path, value)
    return value


def _step(current: Any, segment: str, path: str) -> Any:
    if is_absent(current):
        raise NullIntermediateError(path, segment)
    return get_member(current, segment)
