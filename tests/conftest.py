"""Shared fixtures: a small type table and plain Python object graphs."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from rtasks import Environment, MemberDef, TypeDef
from rtasks.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@dataclass
class Address:
    city: str
    street: str = ""


@dataclass
class Person:
    name: str
    address: Address | None = None
    tags: dict = field(default_factory=dict)


class Named:
    def __init__(self, name: str = "") -> None:
        self._name = name
        self.setter_calls = 0

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self.setter_calls += 1
        self._name = value


class ShoutingNamed(Named):
    """Overrides ``name`` as read-only."""

    @property
    def name(self) -> str:
        return self._name.upper()


class Frozen:
    __slots__ = ("value",)

    def __init__(self, value) -> None:
        self.value = value

    @property
    def double(self):
        return self.value * 2


@pytest.fixture
def person() -> Person:
    return Person(name="Joe", address=Address(city="NY", street="5th Ave"))


@pytest.fixture
def env() -> Environment:
    """Person <- Employee, where Employee re-declares ``name`` read-only."""
    env = Environment(name="people")
    address = TypeDef("Address", [MemberDef("City", kind="text"), MemberDef("Street", kind="text")])
    person = TypeDef("Person", [
        MemberDef("Name", kind="text"),
        MemberDef("Address", kind="Address"),
        MemberDef("Id", kind="number", readonly=True),
    ])
    employee = TypeDef(
        "Employee",
        [
            MemberDef("Name", kind="text", getter=lambda e: str(e.fields["Name"]).upper()),
            MemberDef("Title", kind="text"),
        ],
        base=person,
    )
    for td in (address, person, employee):
        env.register_typedef(td)
    return env
