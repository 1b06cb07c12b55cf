from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from cassandra_scaler import Consistency, MissingFieldError, parse_cassandra_metadata

_SAFE_TEXT = st.text(alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_-", min_size=1, max_size=20)
_REQUIRED_KEYS = ["query", "targetQueryValue", "username", "clusterIPAddress"]


def _metadata(**overrides: str) -> dict[str, str]:
    metadata = {
        "query": "SELECT COUNT(*) FROM ks.tbl;",
        "targetQueryValue": "5",
        "username": "cassandra",
        "clusterIPAddress": "cassandra.default:9042",
    }
    metadata.update(overrides)
    return metadata


@given(
    query=_SAFE_TEXT,
    target=st.integers(min_value=0, max_value=10**12),
    username=_SAFE_TEXT,
    address=_SAFE_TEXT,
    password=_SAFE_TEXT,
    consistency=st.sampled_from([level.name for level in Consistency]),
    protocol_version=st.integers(min_value=1, max_value=5),
    keyspace=_SAFE_TEXT,
)
@settings(max_examples=50, deadline=None)
def test_property_valid_metadata_round_trips_into_config(
    query: str,
    target: int,
    username: str,
    address: str,
    password: str,
    consistency: str,
    protocol_version: int,
    keyspace: str,
) -> None:
    """Every well-formed input parses and keeps its typed values."""
    metadata = _metadata(
        query=query,
        targetQueryValue=str(target),
        username=username,
        clusterIPAddress=address,
        consistency=consistency,
        protoVersion=str(protocol_version),
        keyspace=keyspace,
    )

    config = parse_cassandra_metadata(metadata, {"password": password})

    assert config.query == query
    assert config.target_query_value == target
    assert config.username == username
    assert config.cluster_ip_address == address
    assert config.password == password
    assert config.consistency is Consistency[consistency]
    assert config.protocol_version == protocol_version
    assert config.keyspace == keyspace
    assert config.metric_name == f"cassandra-{keyspace}"


@given(metric_name=st.one_of(st.none(), _SAFE_TEXT), keyspace=st.one_of(st.none(), _SAFE_TEXT))
@settings(max_examples=50, deadline=None)
def test_property_metric_name_always_has_prefix(metric_name: str | None, keyspace: str | None) -> None:
    metadata = _metadata()
    if metric_name is not None:
        metadata["metricName"] = metric_name
    if keyspace is not None:
        metadata["keyspace"] = keyspace

    config = parse_cassandra_metadata(metadata, {"password": "secret"})

    assert config.metric_name.startswith("cassandra-")


@given(password=_SAFE_TEXT)
@settings(max_examples=25, deadline=None)
def test_property_parsing_is_deterministic(password: str) -> None:
    metadata = _metadata(metricName="myMetric")
    auth = {"password": password}

    assert parse_cassandra_metadata(metadata, auth) == parse_cassandra_metadata(metadata, auth)


@given(missing=st.sets(st.sampled_from(_REQUIRED_KEYS), min_size=1))
@settings(max_examples=30, deadline=None)
def test_property_first_missing_field_is_reported(missing: set[str]) -> None:
    metadata = {key: value for key, value in _metadata().items() if key not in missing}
    expected = next(key for key in _REQUIRED_KEYS if key in missing)

    try:
        parse_cassandra_metadata(metadata, {"password": "secret"})
    except MissingFieldError as exc:
        assert exc.field == expected
    else:
        raise AssertionError("expected MissingFieldError")


@given(raw=st.text(min_size=1, max_size=8).filter(lambda value: not value.isascii() or not value.isdigit()))
@settings(max_examples=50, deadline=None)
def test_property_non_digit_target_is_rejected(raw: str) -> None:
    metadata = _metadata(targetQueryValue=raw)

    try:
        parse_cassandra_metadata(metadata, {"password": "secret"})
    except ValueError as exc:
        assert "targetQueryValue" in str(exc)
    else:
        raise AssertionError("expected InvalidIntegerError")
