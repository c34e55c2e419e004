"""
Exception hierarchy for the trend engine.

Every error raised by the engine derives from TrendEngineError so callers
can catch the whole family, while the secondary bases (ArithmeticError,
ZeroDivisionError, ValueError) keep the usual builtin semantics.
"""


class TrendEngineError(Exception):
    """Base class for all trend engine errors."""
    pass


class FixedPointDomainError(TrendEngineError, ArithmeticError):
    """Raised when a value cannot be represented or computed in Q16.16."""
    pass


class FixedPointDivisionError(FixedPointDomainError, ZeroDivisionError):
    """Raised on Q16.16 division by zero."""
    pass


class EmptyBookError(TrendEngineError, ValueError):
    """Raised when a snapshot is missing its bid or ask side."""
    pass
