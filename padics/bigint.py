"""Integer helpers backing the p-adic types.

Python's ``int`` is the arbitrary precision integer. Primality is decided by
sympy and base 2..62 conversion goes through gmpy2, which speaks the same
digit alphabet as GMP.

``sympy.isprime`` is deterministic below 2**64. Above that it runs the
Baillie-PSW test, which has no known counterexample but is not a proof of
primality.
"""
import gmpy2
from sympy import isprime

from .errors import InvalidBase

MIN_BASE = 2
MAX_BASE = 62
MAX_UI = 2**64 - 1
MIN_SI = -2**63
MAX_SI = 2**63 - 1


def is_prime(n):
    return n >= 2 and bool(isprime(n))


def check_base(base):
    if isinstance(base, bool) or not isinstance(base, int) \
            or not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(f"Base must be between {MIN_BASE} and {MAX_BASE}, "
                          f"got {base!r}.")
    return base


def to_str(n, base=10):
    return gmpy2.mpz(n).digits(check_base(base))


def from_str(text, base=10):
    return int(gmpy2.mpz(text.strip(), check_base(base)))


def valuation(i, p, cap):
    """Exponent of the largest power of ``p`` dividing ``i``, at most ``cap``.

    Zero has infinite valuation, so it reports ``cap``.
    """
    if i == 0:
        return cap
    val = 0
    while val < cap and i % p == 0:
        i = i // p
        val += 1
    return val


def ilog(n, p):
    """floor(log_p(n)) for n >= 1."""
    k = 0
    while n >= p:
        n = n // p
        k += 1
    return k


def invmod(a, p, power):
    return pow(a, -1, p**power)
