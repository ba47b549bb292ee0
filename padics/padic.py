import logging

from .bigint import MAX_SI, MAX_UI, MIN_SI, invmod, ilog, valuation
from .context import DEFAULT_PRECISION
from .errors import (ContextMismatch, DomainError, InvalidPrecision,
                     PadicOverflowError)

_logger = logging.getLogger(__name__)


def _check_precision(prec):
    if isinstance(prec, bool) or not isinstance(prec, int) or prec <= 0:
        raise InvalidPrecision(f"Precision must be a positive integer, "
                               f"got {prec!r}.")
    return prec


def _check_int(n):
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Cannot create p-adic from type {type(n)}")
    return n


class PAdicNumber():
    """An element of Z_p known modulo ``p**prec``.

    Stored as ``unit * p**val`` with ``unit`` prime to p and smaller than
    ``p**(prec - val)``. Exact zero is ``val == prec`` with ``unit == 0``.
    The context is shared with every other value built against it and is
    never replaced.
    """

    def __init__(self, ctx, prec=DEFAULT_PRECISION, value=None):
        self.ctx = ctx
        self.prec = _check_precision(prec)
        self.val = self.prec
        self.unit = 0
        if value is not None:
            self.set(value)

    @classmethod
    def _from_residue(cls, ctx, prec, r):
        obj = cls(ctx, prec)
        obj.val, obj.unit = obj._decompose(r)
        return obj

    def _decompose(self, n):
        p = self.ctx.prime
        val = valuation(n, p, self.prec)
        if val == self.prec:
            return self.prec, 0
        unit = (n // self.ctx.pow(val)) % self.ctx.pow(self.prec - val)
        return val, unit

    def set(self, n):
        self.val, self.unit = self._decompose(_check_int(n))
        return self

    def set_ui(self, n):
        if not 0 <= _check_int(n) <= MAX_UI:
            raise PadicOverflowError(f"{n} does not fit an unsigned word.")
        return self.set(n)

    def set_si(self, n):
        if not MIN_SI <= _check_int(n) <= MAX_SI:
            raise PadicOverflowError(f"{n} does not fit a signed word.")
        return self.set(n)

    def valuation(self):
        return self.val

    def residue(self):
        """The canonical integer in ``[0, p**prec)`` congruent to self."""
        if self.is_zero():
            return 0
        return self.unit * self.ctx.pow(self.val)

    def is_zero(self):
        return self.unit == 0

    def is_one(self):
        return self.val == 0 and self.unit == 1

    def copy(self):
        obj = PAdicNumber(self.ctx, self.prec)
        obj.val = self.val
        obj.unit = self.unit
        return obj

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        # the context is shared, never duplicated
        return self.copy()

    def _coerce(self, other):
        if isinstance(other, PAdicNumber):
            if self.ctx != other.ctx:
                raise ContextMismatch(
                    f"Operands live over different primes "
                    f"({self.ctx.prime} and {other.ctx.prime}).")
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return PAdicNumber(self.ctx, self.prec, other)
        return None

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return add(self, other)

    def __radd__(self, other):
        return self+other

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return sub(self, other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return sub(other, self)

    def __neg__(self):
        return sub(PAdicNumber(self.ctx, self.prec), self)

    def __eq__(self, other):
        try:
            other = self._coerce(other)
        except ContextMismatch:
            return False
        if other is None:
            return NotImplemented
        return sub(self, other).is_zero()

    __hash__ = None

    def __bool__(self):
        return not self.is_zero()

    def __repr__(self):
        return f"({self.val}, {self.unit})_{self.ctx.prime}^{self.prec}"

    def __str__(self):
        from .codec import get_str
        return get_str(self)


def _binary_residues(x, y):
    if x.ctx != y.ctx:
        raise ContextMismatch(f"Operands live over different primes "
                              f"({x.ctx.prime} and {y.ctx.prime}).")
    return min(x.prec, y.prec), x.residue(), y.residue()


def add(x, y):
    prec, a, b = _binary_residues(x, y)
    return PAdicNumber._from_residue(x.ctx, prec,
                                     (a + b) % x.ctx.pow(prec))


def sub(x, y):
    prec, a, b = _binary_residues(x, y)
    return PAdicNumber._from_residue(x.ctx, prec,
                                     (a - b) % x.ctx.pow(prec))


def plog(padicNumber, prec=DEFAULT_PRECISION):
    """p-adic logarithm of a principal unit, modulo ``p**prec``.

    Sums ``(-1)**(n+1) * t**n / n`` with ``t = x - 1``. The n-th term has
    valuation ``n*v(t) - v(n) >= n*v(t) - floor(log_p(n))``, which never
    decreases with n, so summation stops at the first n where that bound
    reaches ``prec``.
    """
    prec = _check_precision(prec)
    ctx = padicNumber.ctx
    p = ctx.prime
    t = padicNumber.residue() - 1
    # the domain test needs v(x - 1) up to 2 whatever the target precision
    texp = valuation(t, p, max(prec, 2))
    if texp < (2 if p == 2 else 1):
        raise DomainError("p-adic logarithm only defined for "
                          + ("1 + 4Z_2." if p == 2 else "1 + pZp."))
    target = 1
    while target*texp - ilog(target, p) < prec:
        target += 1
    # t**n is reduced modulo p**(prec + extra) so that dividing out the
    # p-part of n still leaves prec correct digits
    extra = ilog(target, p)
    modulus = ctx.pow(prec + extra)
    log = 0
    power = 1
    for i in range(1, target):
        power = (power * t) % modulus
        iexp = valuation(i, p, extra)
        ifactor = i // ctx.pow(iexp)
        summand = (power // ctx.pow(iexp)) * invmod(ifactor, p, prec)
        if i % 2 == 0:
            summand = -summand
        log += summand
    _logger.debug("log: %d terms for p=%d, v(x-1)=%d, modulus p^%d",
                  target - 1, p, texp, prec + extra)
    return PAdicNumber._from_residue(ctx, prec, log % ctx.pow(prec))


def pexp(padicNumber, prec=DEFAULT_PRECISION):
    """p-adic exponential, modulo ``p**prec``.

    Converges when ``v(x) > 1/(p-1)``. By Legendre, ``v(n!) <=
    (n-1)/(p-1)``, so the n-th term has valuation at least
    ``n*v(x) - (n-1)//(p-1)``; that bound never decreases with n.
    """
    prec = _check_precision(prec)
    ctx = padicNumber.ctx
    p = ctx.prime
    if padicNumber.is_zero():
        return PAdicNumber(ctx, prec, 1)
    t = padicNumber.residue()
    texp = padicNumber.valuation()
    if p == 2 and texp < 2:
        raise DomainError("p-adic exponential only defined for 4Z_2")
    if p != 2 and texp < 1:
        raise DomainError("p-adic exponential only defined for pZp")
    target = 1
    while target*texp - (target - 1)//(p - 1) < prec:
        target += 1
    extra = (target - 1)//(p - 1)
    modulus = ctx.pow(prec + extra)
    exp = 1
    power = 1
    factexp = 0
    factsig = 1
    for i in range(1, target):
        power = (power * t) % modulus
        iexp = valuation(i, p, extra)
        factexp += iexp
        factsig = (factsig * (i // ctx.pow(iexp))) % ctx.pow(prec)
        exp += (power // ctx.pow(factexp)) * invmod(factsig, p, prec)
    _logger.debug("exp: %d terms for p=%d, v(x)=%d, modulus p^%d",
                  target, p, texp, prec + extra)
    return PAdicNumber._from_residue(ctx, prec, exp % ctx.pow(prec))
