"""algoblocks library initialization."""

from .errors import IndexOutOfRangeError
from .graph import INFINITY, floyd_warshall
from .numeric import gcd, sieve
from .pipeline import (
    ComponentsConfig,
    ComponentsPipeline,
    ComponentsResult,
    ComponentsStats,
    PrefixSumConfig,
    PrefixSumPipeline,
)
from .runner import components_file, prefix_sums_file
from .structures import DisjointSet, FenwickTree

__all__ = [
    "DisjointSet",
    "FenwickTree",
    "IndexOutOfRangeError",
    "gcd",
    "sieve",
    "floyd_warshall",
    "INFINITY",
    "ComponentsConfig",
    "ComponentsPipeline",
    "ComponentsResult",
    "ComponentsStats",
    "PrefixSumConfig",
    "PrefixSumPipeline",
    "components_file",
    "prefix_sums_file",
]
