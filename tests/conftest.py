"""Shared fixtures for Cassandra scaler tests."""

from __future__ import annotations

import pytest

QUERY = "SELECT COUNT(*) FROM sleep_centre.sleep_study;"


@pytest.fixture
def trigger_metadata() -> dict[str, str]:
    return {
        "query": QUERY,
        "targetQueryValue": "1",
        "username": "cassandra",
        "clusterIPAddress": "my-release-cassandra.default:9042",
        "consistency": "Quorum",
        "protoVersion": "4",
        "metricName": "myMetric",
    }


@pytest.fixture
def auth_params() -> dict[str, str]:
    return {"password": "enZGaEJkTlVPVA=="}
