"""Cassandra count-query scaler metadata, validation, and metric description."""

from cassandra_scaler.consistency import Consistency, ConsistencyNotFoundError, parse_consistency
from cassandra_scaler.errors import (
    CassandraMetadataError,
    InvalidEnumerationError,
    InvalidIntegerError,
    MissingFieldError,
)
from cassandra_scaler.metadata import (
    CassandraMetadata,
    ScalerConfig,
    parse_cassandra_metadata,
    parse_scaler_config,
)
from cassandra_scaler.metric import ExternalMetricSpec, metric_spec_for
from cassandra_scaler.registry import CassandraTriggerRegistry
from cassandra_scaler.security import PasswordMaskingFilter, mask_password_field, mask_password_text
from cassandra_scaler.settings import CassandraScalerSettings

__all__ = [
    "CassandraMetadata",
    "CassandraMetadataError",
    "CassandraScalerSettings",
    "CassandraTriggerRegistry",
    "Consistency",
    "ConsistencyNotFoundError",
    "ExternalMetricSpec",
    "InvalidEnumerationError",
    "InvalidIntegerError",
    "MissingFieldError",
    "PasswordMaskingFilter",
    "ScalerConfig",
    "mask_password_field",
    "mask_password_text",
    "metric_spec_for",
    "parse_cassandra_metadata",
    "parse_consistency",
    "parse_scaler_config",
]
