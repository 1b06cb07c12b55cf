"""Per-trigger lifecycle of parsed Cassandra metadata."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from cassandra_scaler.errors import CassandraMetadataError
from cassandra_scaler.metadata import CassandraMetadata, parse_cassandra_metadata
from cassandra_scaler.metric import ExternalMetricSpec, metric_spec_for
from cassandra_scaler.security import PasswordMaskingFilter
from cassandra_scaler.settings import CassandraScalerSettings

logger = logging.getLogger(__name__)
logger.addFilter(PasswordMaskingFilter())


class CassandraTriggerRegistry:
    """Registry of parsed metadata keyed by trigger name.

    Each trigger definition is parsed once on :meth:`register`. Registering the
    same name again re-parses and replaces the stored entry; a failed re-parse
    leaves the previous entry in place. :meth:`remove` discards it.

    Lookups with a blank name find nothing; only :meth:`register` rejects them.
    """

    def __init__(self, settings: CassandraScalerSettings | None = None) -> None:
        self._settings = settings if settings is not None else CassandraScalerSettings.defaults()
        self._triggers: dict[str, CassandraMetadata] = {}

    @property
    def settings(self) -> CassandraScalerSettings:
        return self._settings

    @property
    def _log_extra(self) -> dict[str, bool]:
        return {"mask_password": self._settings.redact_logs}

    @staticmethod
    def _normalize_name(name: object) -> str:
        return name.strip() if isinstance(name, str) else ""

    def register(
        self,
        name: str,
        trigger_metadata: Mapping[str, str],
        auth_params: Mapping[str, str],
    ) -> CassandraMetadata:
        """Parse and store metadata for *name*, replacing any earlier entry."""
        trigger_name = self._normalize_name(name)
        if not trigger_name:
            raise ValueError("trigger name must be a non-empty string")
        try:
            metadata = parse_cassandra_metadata(trigger_metadata, auth_params, settings=self._settings)
        except CassandraMetadataError as exc:
            logger.warning(
                "Rejected cassandra trigger name=%s field=%s error=%s",
                trigger_name,
                exc.field,
                exc,
                extra=self._log_extra,
            )
            raise

        replaced = trigger_name in self._triggers
        self._triggers[trigger_name] = metadata
        logger.info(
            "%s cassandra trigger name=%s metadata=%s",
            "Replaced" if replaced else "Registered",
            trigger_name,
            metadata.to_redacted_dict(),
            extra=self._log_extra,
        )
        return metadata

    def get(self, name: str) -> CassandraMetadata | None:
        return self._triggers.get(self._normalize_name(name))

    def remove(self, name: str) -> bool:
        trigger_name = self._normalize_name(name)
        removed = self._triggers.pop(trigger_name, None) is not None
        if removed:
            logger.info("Removed cassandra trigger name=%s", trigger_name, extra=self._log_extra)
        return removed

    def names(self) -> list[str]:
        return sorted(self._triggers)

    def metric_specs(self) -> dict[str, ExternalMetricSpec]:
        return {name: metric_spec_for(metadata) for name, metadata in sorted(self._triggers.items())}

    def __len__(self) -> int:
        return len(self._triggers)

    def __contains__(self, name: object) -> bool:
        return self._normalize_name(name) in self._triggers
