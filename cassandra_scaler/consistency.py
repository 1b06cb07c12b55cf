"""Cassandra consistency levels accepted by the scaler metadata."""

from __future__ import annotations

from enum import Enum


class ConsistencyNotFoundError(LookupError):
    """Raised when a consistency name does not match any known level."""

    def __init__(self, name: str) -> None:
        super().__init__(f"consistency level not found: {name!r}")
        self.name = name


class Consistency(Enum):
    """Named consistency levels with their native protocol codes."""

    Any = 0
    One = 1
    Two = 2
    Three = 3
    Quorum = 4
    All = 5
    LocalQuorum = 6
    EachQuorum = 7
    Serial = 8
    LocalSerial = 9
    LocalOne = 10

    @property
    def wire_code(self) -> int:
        return int(self.value)

    def __str__(self) -> str:
        return self.name


def parse_consistency(name: str) -> Consistency:
    """Resolve an exact, case-sensitive level name such as ``"Quorum"``."""
    try:
        return Consistency[name]
    except KeyError:
        raise ConsistencyNotFoundError(name) from None
