"""
optval – optional value container.

Import path convention::

    from optval import Value, some, none
    from optval.serde import serialize, deserialize
    from optval.errors import NoValueError, MissingValuePanic
"""

from optval.errors import MissingValuePanic, NoValueError
from optval.result import Err, Ok, Result
from optval.value import Renderable, Value, from_nullable, map2, none, some, unpack

__version__ = "0.1.0"
__all__ = [
    "Err",
    "MissingValuePanic",
    "NoValueError",
    "Ok",
    "Renderable",
    "Result",
    "Value",
    "__version__",
    "from_nullable",
    "map2",
    "none",
    "some",
    "unpack",
]
