import logging
from enum import Enum
from operator import index

from .bigint import is_prime
from .errors import InvalidPowerWindow, InvalidPrime

_logger = logging.getLogger(__name__)

DEFAULT_PRECISION = 20  # p-adic digits kept when none are asked for
DEFAULT_MIN_POWER = 8
DEFAULT_MAX_POWER = 12


class PrintMode(Enum):
    TERSE = 'terse'
    SERIES = 'series'
    VAL_UNIT = 'val_unit'


class PAdicContext():
    """A validated prime together with a table of its powers.

    The table holds ``p**min`` up to ``p**max``; powers outside that window
    are recomputed on request. ``mode`` is the render mode used by ``str()``
    on values built against this context. It is shared by all of them and
    is not guarded: a context handed to several threads has a single writer.
    """

    def __init__(self, prime, min=DEFAULT_MIN_POWER, max=DEFAULT_MAX_POWER):
        if isinstance(prime, bool):
            raise TypeError("Prime must be an integer, got bool.")
        prime = index(prime)
        if not is_prime(prime):
            raise InvalidPrime(f"{prime} is not a prime number.")
        min, max = index(min), index(max)
        if min < 0 or max < min:
            raise InvalidPowerWindow(f"Expected 0 <= min <= max, got "
                                     f"min={min}, max={max}.")
        self._prime = prime
        self._min = min
        self._max = max
        self._powers = tuple(prime**e for e in range(min, max+1))
        self.mode = PrintMode.TERSE
        _logger.debug("context for p=%d with powers %d..%d", prime, min, max)

    @property
    def prime(self):
        return self._prime

    @property
    def min(self):
        return self._min

    @property
    def max(self):
        return self._max

    def pow(self, e):
        if e < 0:
            raise ValueError(f"Negative exponent {e}.")
        if self._min <= e <= self._max:
            return self._powers[e - self._min]
        return self._prime**e

    def set_print_mode(self, mode):
        self.mode = PrintMode(mode)

    def __eq__(self, other):
        if not isinstance(other, PAdicContext):
            return NotImplemented
        return self._prime == other._prime

    def __hash__(self):
        return hash(self._prime)

    def __repr__(self):
        return f"PAdicContext({self._prime}, min={self._min}, " \
            f"max={self._max})"
