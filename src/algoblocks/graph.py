"""All-pairs shortest paths."""

from __future__ import annotations

import numpy as np

INFINITY = int(np.iinfo(np.int64).max)


def floyd_warshall(adjacency) -> np.ndarray:
    """Return the shortest distance between every pair of nodes.

    `adjacency` is a square matrix of integer edge weights where ``0`` off
    the diagonal means there is no edge. Unreachable pairs are reported as
    :data:`INFINITY`. A relaxation whose sum would overflow int64 is skipped.
    """

    weights = np.asarray(adjacency)
    if weights.size == 0:
        return np.zeros((0, 0), dtype=np.int64)
    if weights.dtype.kind == "f":
        if not (np.isfinite(weights).all() and np.array_equal(weights, np.floor(weights))):
            raise ValueError("adjacency weights must be integers")
    elif weights.dtype.kind not in "iub":
        raise ValueError(f"adjacency weights must be integers, got dtype {weights.dtype}")
    weights = weights.astype(np.int64)
    if weights.ndim != 2 or weights.shape[0] != weights.shape[1]:
        raise ValueError(f"adjacency must be a square matrix, got shape {weights.shape}")

    dist = np.where(weights != 0, weights, np.int64(INFINITY))
    np.fill_diagonal(dist, 0)

    for k in range(dist.shape[0]):
        via_col = dist[:, k : k + 1]
        via_row = dist[k : k + 1, :]
        # int64 addition wraps; a sign flip against both operands marks overflow
        total = via_col + via_row
        overflowed = ((via_col ^ total) & (via_row ^ total)) < 0
        dist = np.where(overflowed, dist, np.minimum(dist, total))
    return dist
