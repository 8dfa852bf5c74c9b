"""Config settings – Settings base class and the library's own settings."""
from __future__ import annotations

import dataclasses
import functools
import logging
from typing import ClassVar

from optval.config.errors import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class OptvalSettings(Settings):
    """Environment-driven defaults, read from ``OPTVAL_*`` variables."""

    _prefix: ClassVar[str] = "OPTVAL"

    log_level: str = "INFO"
    log_json: bool = True
    json_indent: int | None = None

    def _validate(self) -> None:
        if self.log_level.upper() not in logging.getLevelNamesMapping():
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")
        if self.json_indent is not None and self.json_indent < 0:
            raise InvalidSettingValueError("json_indent", self.json_indent, "must be >= 0")


@functools.lru_cache(maxsize=1)
def load_settings() -> OptvalSettings:
    """Return the process-wide settings; ``load_settings.cache_clear()`` reloads."""
    from optval.config.loaders import EnvSettingsLoader

    return EnvSettingsLoader().load(OptvalSettings)


__all__ = ["OptvalSettings", "Settings", "load_settings"]
