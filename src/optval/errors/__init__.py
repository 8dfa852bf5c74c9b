"""Error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── NoValueError                  (value.py)
    └── ConfigError                   (optval.config.errors)
        └── InvalidSettingValueError
    MissingValuePanic (BaseException) (value.py)
"""

from optval.errors.base import BaseError
from optval.errors.value import MissingValuePanic, NoValueError

__all__ = [
    "BaseError",
    "MissingValuePanic",
    "NoValueError",
]
