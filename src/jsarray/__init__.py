"""jsarray: JavaScript array methods over ordered, possibly sparse mappings.

Example:
    >>> from jsarray import JsArray
    >>>
    >>> scores = JsArray({"ann": 3, "bob": 7, "cid": 5})
    >>> scores.filter(lambda v: v > 4)
    JsArray({'bob': 7, 'cid': 5})
    >>> scores.reduce(lambda total, v: total + v)
    15
    >>> JsArray.of("a", "b").concat(["c"]).to_list()
    ['a', 'b', 'c']
"""

from __future__ import annotations

from jsarray.array import NO_INITIAL, JsArray
from jsarray.config import JsArrayConfig, clear_config_cache, get_config
from jsarray.errors import EmptyReduceError, JsArrayError
from jsarray.log import configure_logging

__version__ = "0.1.0"

__all__ = [
    "NO_INITIAL",
    "EmptyReduceError",
    "JsArray",
    "JsArrayConfig",
    "JsArrayError",
    "__version__",
    "clear_config_cache",
    "configure_logging",
    "get_config",
]
