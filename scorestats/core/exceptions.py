"""
Exception hierarchy for scorestats.

All exceptions inherit from ScoreStatsError to allow catching any
library-specific error at a UI or report boundary. Every error is a
precondition failure: none of them is transient, so none is retried.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class ScoreStatsError(Exception):
    """Base exception for all scorestats errors."""
    pass


class ValidationError(ScoreStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class InvalidInputError(ValidationError):
    """
    Input is malformed for the requested statistic.

    Raised for empty samples, mismatched sample lengths, non-numeric or
    non-finite values, and significance levels outside (0, 1).

    Attributes:
        name: Parameter that failed validation, if known
    """

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name


class InsufficientSampleSizeError(ValidationError):
    """
    Too few observations for the requested statistic.

    Attributes:
        name: Parameter (or derived quantity) that is too small
        required: Minimum size required
        actual: Size actually supplied
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        required: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.name = name
        self.required = required
        self.actual = actual


class InsufficientGroupsError(ValidationError):
    """
    Too few groups to compare.

    Attributes:
        n_groups: Number of groups supplied
        required: Minimum number of groups
    """

    def __init__(self, message: str, n_groups: int, required: int = 2):
        super().__init__(message)
        self.n_groups = n_groups
        self.required = required


class NumericalError(ScoreStatsError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateInputError(NumericalError):
    """
    Input has zero variance where a ratio requires a non-zero denominator.

    Raised instead of letting NaN or Infinity reach the caller.

    Attributes:
        quantity: Name of the vanishing quantity (e.g. 'sd(x)')
    """

    def __init__(self, message: str, quantity: str | None = None):
        super().__init__(message)
        self.quantity = quantity


class NonFiniteResultError(NumericalError):
    """
    An intermediate statistic overflowed to Infinity or became NaN.

    Input values are finite but too large in magnitude for float64
    arithmetic (e.g. squares of values near 1e200).

    Attributes:
        quantity: Name of the first non-finite quantity (e.g. 'sum of squares of x')
    """

    def __init__(self, message: str, quantity: str | None = None):
        super().__init__(message)
        self.quantity = quantity
