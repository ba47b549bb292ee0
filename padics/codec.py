"""Text encodings of p-adic numbers.

Three encodings of ``x = unit * p**val (mod p**prec)`` are supported:

* TERSE, the canonical residue in ``[0, p**prec)`` as an integer string;
* SERIES, the base-p digit expansion ``d_val*p^val + ... + d_{prec-1}*p^{prec-1}``
  with zero digits left out;
* VAL_UNIT, the unit and the valuation, e.g. ``3*7^2``.

Exact zero reads ``0`` in all of them. Rendering never touches the
context; its mode is only the default used when none is passed.
"""
import re

from .bigint import check_base, from_str, to_str
from .context import DEFAULT_PRECISION, PrintMode
from .errors import PadicParseError
from .padic import PAdicNumber

_TERM = re.compile(r'^(\d+)(?:\*(\d+)(?:\^(\d+))?)?$')


def _series(x):
    p = x.ctx.prime
    terms = []
    n = x.unit
    for j in range(x.val, x.prec):
        n, d = divmod(n, p)
        if d == 0:
            continue
        if j == 0:
            terms.append(str(d))
        else:
            terms.append(f"{d}*{p}^{j}")
    return ' + '.join(terms)


def _val_unit(x):
    if x.val == 0:
        return str(x.unit)
    if x.val == 1:
        return f"{x.unit}*{x.ctx.prime}"
    return f"{x.unit}*{x.ctx.prime}^{x.val}"


def get_str(x, mode=None, base=10):
    """Render ``x`` in ``mode`` (the context default when None).

    ``base`` applies to the TERSE encoding only.
    """
    mode = x.ctx.mode if mode is None else PrintMode(mode)
    if mode is PrintMode.TERSE:
        return to_str(x.residue(), base)
    if x.is_zero():
        return '0'
    if mode is PrintMode.SERIES:
        return _series(x)
    return _val_unit(x)


def _read_term(text, p):
    """Coefficient and exponent of a ``c``, ``c*p`` or ``c*p^e`` term."""
    m = _TERM.match(text.strip())
    if m is None:
        raise PadicParseError(f"Malformed term {text!r}.")
    coeff, prime, exponent = m.groups()
    if prime is None:
        return int(coeff), 0
    if int(prime) != p:
        raise PadicParseError(f"Term {text!r} is not over the prime {p}.")
    return int(coeff), (1 if exponent is None else int(exponent))


def _read_series(text, p):
    if text.strip() == '0':
        return 0
    n = 0
    last = -1
    for term in text.split('+'):
        coeff, exponent = _read_term(term, p)
        if not 0 < coeff < p:
            raise PadicParseError(f"Digit {coeff} of {term.strip()!r} is "
                                  f"not in 1..{p - 1}.")
        if exponent > 0 and '^' not in term:
            raise PadicParseError(f"Term {term.strip()!r} has no exponent.")
        if exponent <= last:
            raise PadicParseError(f"Exponents must increase, got "
                                  f"{exponent} after {last}.")
        last = exponent
        n += coeff * p**exponent
    return n


def read_int(text, p, mode=PrintMode.TERSE, base=10):
    """Integer encoded by ``text``, the inverse of ``get_str``."""
    mode = PrintMode(mode)
    if mode is PrintMode.TERSE:
        check_base(base)
        try:
            return from_str(text, base)
        except ValueError as e:
            raise PadicParseError(f"Malformed integer {text!r} in base "
                                  f"{base}.") from e
    if mode is PrintMode.SERIES:
        return _read_series(text, p)
    # a single term, the unit times a power of p
    coeff, exponent = _read_term(text, p)
    return coeff * p**exponent


def parse(ctx, text, mode=PrintMode.TERSE, prec=DEFAULT_PRECISION, base=10):
    return PAdicNumber(ctx, prec, read_int(text, ctx.prime, mode, base))
