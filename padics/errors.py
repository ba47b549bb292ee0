class PadicError(Exception):
    """Base class for every error raised by padics."""


class InvalidPrime(PadicError, ValueError):
    pass


class InvalidPowerWindow(PadicError, ValueError):
    pass


class InvalidPrecision(PadicError, ValueError):
    pass


class InvalidBase(PadicError, ValueError):
    pass


class ContextMismatch(PadicError, ValueError):
    pass


class DomainError(PadicError, ValueError):
    """Raised when a series is evaluated outside its convergence domain."""


class PadicOverflowError(PadicError, OverflowError):
    pass


class PadicParseError(PadicError, ValueError):
    pass
