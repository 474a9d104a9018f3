# detprime/miller_rabin.py
# Deterministic Miller–Rabin for odd 64-bit n > 3
#
# If n < 2^64 it is enough to test a = 2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37.
# The same 12 bases are sufficient for every n < 3,317,044,064,679,887,385,961,981.

from __future__ import annotations
from enum import IntEnum
from typing import Iterable, Tuple

from .modarith import InvalidInput, check_u64, _mul, _pow

WITNESS_BASES: Tuple[int, ...] = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)

STRATEGIES = ("squaring", "recompute")


class Verdict(IntEnum):
    COMPOSITE = 0
    PRIME = 1

    def __str__(self) -> str:
        return self.name.lower()


# ---------- Helpers ----------

def _check_candidate(n) -> int:
    check_u64("n", n)
    if n <= 3 or n % 2 == 0:
        raise InvalidInput("n must be an odd integer > 3")
    return n

def _check_strategy(strategy: str) -> None:
    if strategy not in STRATEGIES:
        raise InvalidInput(f"unknown strategy {strategy!r} (expected one of {', '.join(STRATEGIES)})")

def decompose(m: int) -> Tuple[int, int]:
    """Split m >= 1 as 2^k * q with q odd. Returns (k, q); decompose(30) == (1, 15)."""
    if check_u64("m", m) == 0:
        raise InvalidInput("m must be >= 1")
    k = 0
    while m & 1 == 0:
        k += 1
        m >>= 1
    return k, m

def _round(a: int, k: int, q: int, n: int, strategy: str) -> bool:
    """One strong round for base a; True means a found no evidence of compositeness."""
    x = _pow(a, q, n)
    if x == 1:
        return True
    if strategy == "recompute":
        # a^(q*2^j) rebuilt from scratch for each j
        for j in range(k):
            if _pow(_pow(a, q, n), _pow(2, j, n), n) == n - 1:
                return True
        return False
    for _ in range(k):
        if x == n - 1:
            return True
        x = _mul(x, x, n)
    return False

# ---------- Public API ----------

def witness(a: int, n: int, strategy: str = "squaring") -> bool:
    """
    Run a single Miller–Rabin round of base a against n.
    Returns True when a certifies n (no evidence of compositeness),
    False when a proves n composite. A base divisible by n says nothing
    and certifies trivially.
    """
    check_u64("a", a)
    _check_candidate(n)
    _check_strategy(strategy)
    if a % n == 0:
        return True
    k, q = decompose(n - 1)
    return _round(a, k, q, n, strategy)

def is_strong_probable_prime(n: int, bases: Iterable[int],
                             strategy: str = "squaring") -> Verdict:
    """Strong probable-prime test of n over the given bases, in order."""
    _check_candidate(n)
    _check_strategy(strategy)
    bases = [check_u64("base", a) for a in bases]
    k, q = decompose(n - 1)
    for a in bases:
        # only when n is itself one of the bases
        if a % n == 0:
            continue
        if not _round(a, k, q, n, strategy):
            return Verdict.COMPOSITE
    return Verdict.PRIME

def is_prime(n: int, strategy: str = "squaring") -> Verdict:
    """
    Deterministic Miller–Rabin (n odd, 3 < n < 2^64).
    Returns Verdict.PRIME if n is prime, Verdict.COMPOSITE otherwise.
    Raises InvalidInput for even n, n <= 3 or values outside 64 bits.
    """
    return is_strong_probable_prime(n, WITNESS_BASES, strategy=strategy)
