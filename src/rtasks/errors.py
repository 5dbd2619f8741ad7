"""Exception types for rtasks."""

from __future__ import annotations


class RTasksError(Exception):
    """Base class for all rtasks errors."""


class InvalidPathError(RTasksError, ValueError):
    """A property path is empty or contains an empty segment."""

    def __init__(self, path: str) -> None:
        super().__init__(f"invalid property path: {path!r}")
        self.path = path


class MemberNotFoundError(RTasksError, AttributeError):
    """A path segment does not name a (readable or writable) member."""

    def __init__(self, type_name: str, member: str, *, writable: bool = False) -> None:
        what = "writable member" if writable else "member"
        super().__init__(f"{type_name!r} has no {what} {member!r}")
        self.type_name = type_name
        self.member = member


class NullIntermediateError(RTasksError):
    """Path traversal reached an absent reference before the last segment."""

    def __init__(self, path: str, segment: str) -> None:
        super().__init__(f"{path!r}: cannot read {segment!r} from an empty reference")
        self.path = path
        self.segment = segment


class UnsupportedAlgorithmError(RTasksError, ValueError):
    """Unknown hash algorithm, decompression method or text encoding."""

    def __init__(self, name: object) -> None:
        super().__init__(f"unsupported algorithm: {name!r}")
        self.name = name
