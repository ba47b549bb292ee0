from .codec import get_str, parse, read_int
from .context import (DEFAULT_MAX_POWER, DEFAULT_MIN_POWER, DEFAULT_PRECISION,
                      PAdicContext, PrintMode)
from .errors import (ContextMismatch, DomainError, InvalidBase,
                     InvalidPowerWindow, InvalidPrecision, InvalidPrime,
                     PadicError, PadicOverflowError, PadicParseError)
from .padic import PAdicNumber, add, pexp, plog, sub
