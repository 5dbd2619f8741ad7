"""Discovery of public deprecated classes in a Python module."""

from __future__ import annotations

import enum
import importlib
import inspect
import logging
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=type)


def obsolete(message: str):
    """Class decorator marking a class as deprecated.

    Sets ``__deprecated__`` the same way ``warnings.deprecated`` does, so
    both are picked up by :func:`public_obsolete_classes`.
    """
    def decorate(cls: T) -> T:
        cls.__deprecated__ = message
        return cls
    return decorate


def is_obsolete(cls: type) -> bool:
    # __deprecated__ must be set on the class itself, not inherited
    return "__deprecated__" in vars(cls)


def public_obsolete_classes(module_name: str) -> list[str]:
    """Return names of the public, deprecated classes defined in *module_name*.

    Protocols and enums are not counted as classes. Classes imported into
    the module from elsewhere are ignored.
    """
    module = importlib.import_module(module_name)
    names = []
    for name, obj in vars(module).items():
        if not inspect.isclass(obj) or name.startswith("_"):
            continue
        if obj.__module__ != module.__name__:
            continue
        if _is_protocol(obj) or issubclass(obj, enum.Enum):
            continue
        if is_obsolete(obj):
            names.append(name)
    logger.debug("%s: %d obsolete class(es)", module_name, len(names))
    return names


def _is_protocol(cls: type) -> bool:
    return bool(getattr(cls, "_is_protocol", False))
