"""Errors raised while loading ``OPTVAL_*`` settings."""
from __future__ import annotations

from typing import Any

from optval.errors import BaseError


class ConfigError(BaseError):
    """An environment variable could not be parsed into its setting type."""
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A setting parsed fine but is out of range, e.g. a negative indent."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: Any, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "value": repr(value)},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
