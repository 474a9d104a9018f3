# detprime/modarith.py
# Overflow-safe modular arithmetic on unsigned 64-bit values
# - add / sub never form a value >= m
# - mul by double-and-add (only ever calls modular_add)
# - pow by square-and-multiply (only ever calls modular_mul)

from __future__ import annotations

U64_MAX = 0xFFFFFFFFFFFFFFFF


class InvalidInput(ValueError):
    """An argument violates a documented precondition."""


# ---------- Argument checks ----------

def check_u64(name: str, x) -> int:
    # bool is an int subclass; True/False are not numbers here
    if not isinstance(x, int) or isinstance(x, bool):
        raise InvalidInput(f"{name} must be an integer, got {type(x).__name__}")
    if x < 0 or x > U64_MAX:
        raise InvalidInput(f"{name} must be a 64-bit unsigned integer (0..2^64-1)")
    return x

def _check(a: int, b: int, m: int) -> None:
    check_u64("a", a)
    check_u64("b", b)
    if check_u64("m", m) == 0:
        raise InvalidInput("modulus must be >= 1")

# ---------- Primitives ----------

def _add(a: int, b: int, m: int) -> int:
    a %= m
    b %= m
    # a + b >= m, tested without forming a + b
    if a >= m - b:
        return a - (m - b)
    return a + b

def _sub(a: int, b: int, m: int) -> int:
    a %= m
    b %= m
    if a < b:
        return m - b + a
    return a - b

def _mul(a: int, b: int, m: int) -> int:
    r = 0
    a %= m
    b %= m
    while b > 0:
        if b & 1:
            r = _add(r, a, m)
        b >>= 1
        a = _add(a, a, m)
    return r

def _pow(a: int, b: int, m: int) -> int:
    r = 1 % m
    # the exponent is a bit count, not a residue: only the base is reduced
    a %= m
    while b > 0:
        if b & 1:
            r = _mul(r, a, m)
        b >>= 1
        a = _mul(a, a, m)
    return r

# ---------- Public API ----------

def modular_add(a: int, b: int, m: int) -> int:
    """(a + b) mod m."""
    _check(a, b, m)
    return _add(a, b, m)

def modular_sub(a: int, b: int, m: int) -> int:
    """(a - b) mod m, always in [0, m)."""
    _check(a, b, m)
    return _sub(a, b, m)

def modular_mul(a: int, b: int, m: int) -> int:
    """
    (a * b) mod m by double-and-add.
    O(log b) modular additions; no 128-bit product is ever formed.
    """
    _check(a, b, m)
    return _mul(a, b, m)

def modular_pow(a: int, b: int, m: int) -> int:
    """
    (a ** b) mod m by square-and-multiply.
    modular_pow(a, 0, m) == 1 % m, so 0 when m == 1.
    """
    _check(a, b, m)
    return _pow(a, b, m)
