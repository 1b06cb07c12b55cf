"""Errors raised while parsing Cassandra trigger metadata."""

from __future__ import annotations

_MISSING_MESSAGES: dict[str, str] = {
    "query": "no query given",
    "targetQueryValue": "no targetQueryValue given",
    "username": "no username given",
    "clusterIPAddress": "no cluster IP address given",
    "password": "no password given",
}


class CassandraMetadataError(ValueError):
    """Base class for invalid trigger metadata."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class MissingFieldError(CassandraMetadataError):
    """A required field is absent or empty."""

    def __init__(self, field: str) -> None:
        super().__init__(field, _MISSING_MESSAGES.get(field, f"no {field} given"))


class InvalidIntegerError(CassandraMetadataError):
    """A numeric field holds text that is not a non-negative integer."""

    def __init__(self, field: str, raw_value: str) -> None:
        super().__init__(field, f"{field} must be a non-negative integer, got {raw_value!r}")
        self.raw_value = raw_value


class InvalidEnumerationError(CassandraMetadataError):
    """An enumerated field holds an unknown name."""

    def __init__(self, field: str, raw_value: str, allowed: list[str] | None = None) -> None:
        message = f"{field} {raw_value!r} is not a valid value"
        if allowed:
            message = f"{message}; expected one of {allowed}"
        super().__init__(field, message)
        self.raw_value = raw_value
