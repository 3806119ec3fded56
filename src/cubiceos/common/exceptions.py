"""Common exception types for the cubic equation-of-state solver."""


class CubicEOSError(ValueError):
    """Base class for errors raised while building or solving a cubic EOS."""


class InvalidEquation(CubicEOSError):
    """Raised when the polynomial handed to the solver is not a cubic."""


class InvalidInput(CubicEOSError):
    """Raised when a state quantity is outside its physical domain.

    ``field`` names the first offending quantity so front-ends can point the
    user at it.
    """

    def __init__(self, field: str, value: float):
        self.field = field
        self.value = value
        super().__init__(f"{field} must be greater than 0 (got {value!r})")


class MissingCaseData(RuntimeError):
    """Raised when a JSON case file lacks a quantity required to solve it."""
