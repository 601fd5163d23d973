"""Number theory helpers."""

from __future__ import annotations

from typing import List

import numpy as np


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two non-negative integers."""

    if a < 0 or b < 0:
        raise ValueError("gcd is defined here for non-negative integers only")
    x, y = max(a, b), min(a, b)
    while y > 0:
        x, y = y, x % y
    return x


def sieve(n: int) -> List[int]:
    """Return all primes in ``[2, n]`` in ascending order."""

    if n < 0:
        raise ValueError("n must be non-negative")
    if n < 2:
        return []

    is_prime = np.ones(n + 1, dtype=bool)
    is_prime[:2] = False
    candidate = 2
    while candidate * candidate <= n:
        if is_prime[candidate]:
            is_prime[candidate * candidate :: candidate] = False
        candidate += 1
    return [int(p) for p in np.flatnonzero(is_prime)]
