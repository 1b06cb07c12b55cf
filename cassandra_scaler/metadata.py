"""Parse Cassandra trigger metadata into a validated scaler configuration.

The parser takes the trigger metadata and the authentication parameters of one
trigger definition, both plain ``str -> str`` mappings, and returns an
immutable :class:`CassandraMetadata`. Fields are validated in a fixed order and
the first failure is raised; no partial configuration is ever returned.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field

from cassandra_scaler.consistency import Consistency, ConsistencyNotFoundError, parse_consistency
from cassandra_scaler.errors import InvalidEnumerationError, InvalidIntegerError, MissingFieldError
from cassandra_scaler.settings import CassandraScalerSettings

METRIC_NAME_PREFIX = "cassandra"

# signed 64-bit upper bound
MAX_INTEGER = 2**63 - 1

_UNSIGNED_INT = re.compile(r"[0-9]+")
_METRIC_NAME_UNSAFE = re.compile(r"[/.:%]")


@dataclass(frozen=True, slots=True)
class ScalerConfig:
    """Raw inputs of one trigger definition."""

    trigger_metadata: Mapping[str, str]
    auth_params: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class CassandraMetadata:
    """Validated configuration for running a count query against Cassandra."""

    query: str
    target_query_value: int
    username: str
    password: str = field(repr=False)
    cluster_ip_address: str
    consistency: Consistency
    protocol_version: int
    keyspace: str
    metric_name: str

    def to_redacted_dict(self) -> dict[str, object]:
        data = asdict(self)
        data["password"] = "***"
        data["consistency"] = self.consistency.name
        return data


def _lookup(values: Mapping[str, str], key: str) -> str:
    value = values.get(key)
    return value if value else ""


def _require(values: Mapping[str, str], key: str) -> str:
    value = _lookup(values, key)
    if not value:
        raise MissingFieldError(key)
    return value


def _parse_int(key: str, raw: str) -> int:
    if not _UNSIGNED_INT.fullmatch(raw):
        raise InvalidIntegerError(key, raw)
    digits = raw.lstrip("0")
    if len(digits) > len(str(MAX_INTEGER)) or int(digits or "0") > MAX_INTEGER:
        raise InvalidIntegerError(key, raw)
    return int(digits or "0")


def _normalize_metric_name(name: str) -> str:
    return _METRIC_NAME_UNSAFE.sub("-", name)


def _metric_name(trigger_metadata: Mapping[str, str]) -> str:
    suffix = (
        _lookup(trigger_metadata, "metricName")
        or _lookup(trigger_metadata, "keyspace")
        or METRIC_NAME_PREFIX
    )
    return f"{METRIC_NAME_PREFIX}-{_normalize_metric_name(suffix)}"


def parse_cassandra_metadata(
    trigger_metadata: Mapping[str, str],
    auth_params: Mapping[str, str],
    *,
    settings: CassandraScalerSettings | None = None,
) -> CassandraMetadata:
    """Validate trigger metadata and auth params into :class:`CassandraMetadata`.

    Raises:
        MissingFieldError: a required field is absent or empty.
        InvalidIntegerError: ``targetQueryValue`` or ``protoVersion`` is malformed.
        InvalidEnumerationError: ``consistency`` names an unknown level.
    """
    resolved = settings if settings is not None else CassandraScalerSettings.defaults()

    query = _require(trigger_metadata, "query")
    target_query_value = _parse_int("targetQueryValue", _require(trigger_metadata, "targetQueryValue"))
    metric_name = _metric_name(trigger_metadata)
    username = _require(trigger_metadata, "username")
    cluster_ip_address = _require(trigger_metadata, "clusterIPAddress")

    raw_consistency = _lookup(trigger_metadata, "consistency")
    if raw_consistency:
        try:
            consistency = parse_consistency(raw_consistency)
        except ConsistencyNotFoundError:
            raise InvalidEnumerationError(
                "consistency", raw_consistency, [level.name for level in Consistency]
            ) from None
    else:
        consistency = resolved.consistency

    raw_protocol_version = _lookup(trigger_metadata, "protoVersion")
    if raw_protocol_version:
        protocol_version = _parse_int("protoVersion", raw_protocol_version)
    else:
        protocol_version = resolved.default_protocol_version

    # secrets come from auth params only
    password = _require(auth_params, "password")

    return CassandraMetadata(
        query=query,
        target_query_value=target_query_value,
        username=username,
        password=password,
        cluster_ip_address=cluster_ip_address,
        consistency=consistency,
        protocol_version=protocol_version,
        keyspace=_lookup(trigger_metadata, "keyspace"),
        metric_name=metric_name,
    )


def parse_scaler_config(
    config: ScalerConfig,
    *,
    settings: CassandraScalerSettings | None = None,
) -> CassandraMetadata:
    """Parse the metadata carried by a :class:`ScalerConfig`."""
    return parse_cassandra_metadata(config.trigger_metadata, config.auth_params, settings=settings)
