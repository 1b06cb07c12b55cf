"""Runtime settings for the Cassandra scaler."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cassandra_scaler.consistency import Consistency, ConsistencyNotFoundError, parse_consistency


class CassandraScalerSettings(BaseSettings):
    """Defaults applied when optional trigger metadata is absent."""

    default_consistency: str = Field(default="One")
    default_protocol_version: int = Field(default=4, ge=1, le=5)
    redact_logs: bool = Field(default=True)

    model_config = SettingsConfigDict(
        env_prefix="CASSANDRA_SCALER_",
        extra="ignore",
    )

    @field_validator("default_consistency")
    @classmethod
    def _known_consistency(cls, value: str) -> str:
        try:
            parse_consistency(value)
        except ConsistencyNotFoundError as exc:
            raise ValueError(f"unknown consistency level {value!r}") from exc
        return value

    @property
    def consistency(self) -> Consistency:
        return parse_consistency(self.default_consistency)

    @classmethod
    def defaults(cls) -> CassandraScalerSettings:
        """Built-in defaults, ignoring the process environment."""
        return cls.model_construct()

    @classmethod
    def from_env(cls) -> CassandraScalerSettings:
        """Read ``CASSANDRA_SCALER_*`` variables from the environment."""
        return cls()
