from .modarith import (
    InvalidInput,
    U64_MAX,
    modular_add,
    modular_mul,
    modular_pow,
    modular_sub,
)
from .miller_rabin import (
    WITNESS_BASES,
    Verdict,
    decompose,
    is_prime,
    is_strong_probable_prime,
    witness,
)
__all__ = [
    "InvalidInput", "U64_MAX", "modular_add", "modular_sub", "modular_mul", "modular_pow",
    "WITNESS_BASES", "Verdict", "decompose", "is_prime", "is_strong_probable_prime", "witness",
]
