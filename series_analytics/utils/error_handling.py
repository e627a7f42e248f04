"""Error handling utilities."""

import functools
import logging
from typing import Callable

logger = logging.getLogger(__name__)


class DomainError(ValueError):
    """Raised when an input violates the precondition of a computation."""


class InsufficientSamplesError(DomainError):
    """Fewer observations than the statistic requires."""

    def __init__(self, statistic: str, required: int, actual: int):
        self.statistic = statistic
        self.required = required
        self.actual = actual
        super().__init__(
            f"{statistic} requires at least {required} observations, got {actual}"
        )


class DegenerateDistributionError(DomainError):
    """A ratio is undefined because a standard deviation is zero."""


class MisalignedInputError(DomainError):
    """Paired sequences differ in length or index."""


class ZeroActualError(DomainError):
    """MAPE requested where an actual value is zero."""

    def __init__(self, positions):
        self.positions = list(positions)
        super().__init__(
            f"MAPE is undefined: actual value is zero at positions {self.positions}"
        )


class InvalidLagError(DomainError):
    """Negative lag, or a lag the series length cannot support."""


class MissingValueError(DomainError):
    """An undefined value reached a computation that needs fully-defined samples."""


def log_domain_errors(func: Callable) -> Callable:
    """
    Decorator that logs domain errors raised by an operation and re-raises them.

    Nothing is retried or swallowed; the log line records which operation
    rejected the input.

    Args:
        func: Operation to wrap

    Returns:
        Decorated function
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except DomainError as e:
            # Nested operations log once, at the innermost boundary.
            if not getattr(e, "logged", False):
                logger.warning(
                    f"{func.__name__} rejected input ({type(e).__name__}): {e}",
                    extra={"props": {"operation": func.__name__, "error": type(e).__name__}},
                )
                e.logged = True
            raise

    return wrapper
