"""External metric description derived from parsed Cassandra metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cassandra_scaler.metadata import CassandraMetadata


@dataclass(frozen=True, slots=True)
class ExternalMetricSpec:
    """Metric the autoscaler compares against the count query result."""

    metric_name: str
    target_average_value: int
    metric_type: str = "External"

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.metric_type,
            "external": {
                "metric": {"name": self.metric_name},
                "target": {"type": "AverageValue", "averageValue": self.target_average_value},
            },
        }


def metric_spec_for(metadata: CassandraMetadata) -> ExternalMetricSpec:
    return ExternalMetricSpec(
        metric_name=metadata.metric_name,
        target_average_value=metadata.target_query_value,
    )
