"""lazyvoids: small static helpers.

The centerpiece is `when`, a chainable key-value match resolver:

Example:
    >>> from lazyvoids import when
    >>> when("GET").match("GET", "read").match("POST", "write").or_else("other")
    'read'
"""

from __future__ import annotations

from lazyvoids._internal.frozen import FrozenDict
from lazyvoids.functions import ThrowingRunnable, ThrowingSupplier, identity
from lazyvoids.maps import MapBuildError, enum_entry_map, map_of, map_of_pairs
from lazyvoids.rng import PseudoRandom
from lazyvoids.streams import key_stream, reverse_stream, stream, value_stream
from lazyvoids.throwables import RuntimeThrowable, runtime_throwing, runtime_throws
from lazyvoids.when import When, when

__version__ = "0.1.0"

__all__ = [
    "FrozenDict",
    "MapBuildError",
    "PseudoRandom",
    "RuntimeThrowable",
    "ThrowingRunnable",
    "ThrowingSupplier",
    "When",
    "__version__",
    "enum_entry_map",
    "identity",
    "key_stream",
    "map_of",
    "map_of_pairs",
    "reverse_stream",
    "runtime_throwing",
    "runtime_throws",
    "stream",
    "value_stream",
    "when",
]
