"""Password masking for registry log records."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

MASK = "***"

_PASSWORD_PAIR = re.compile(r"(?i)(['\"]?password['\"]?\s*[:=]\s*)(['\"]?)[^\s,;'\"}]+")


def mask_password_text(text: str) -> str:
    """Mask values written as ``password=...`` or ``'password': '...'``."""
    return _PASSWORD_PAIR.sub(lambda match: f"{match.group(1)}{match.group(2)}{MASK}", text)


def mask_password_field(value: Any) -> Any:
    """Return a copy of a mapping with its ``password`` entry masked."""
    if isinstance(value, Mapping):
        return {key: MASK if str(key).lower() == "password" else item for key, item in value.items()}
    if isinstance(value, str):
        return mask_password_text(value)
    return value


class PasswordMaskingFilter(logging.Filter):
    """Mask passwords in records unless the record opts out with ``extra={"mask_password": False}``."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "mask_password", True):
            return True
        if isinstance(record.args, tuple) and record.args:
            record.msg = str(record.msg) % tuple(mask_password_field(arg) for arg in record.args)
        elif isinstance(record.args, Mapping) and record.args:
            record.msg = str(record.msg) % mask_password_field(record.args)
        record.msg = mask_password_text(str(record.msg))
        record.args = ()
        return True
