"""
Exception types for strikepath.

Valuation never raises for expired contracts (T <= 0 falls back to intrinsic
value). Exceptions are reserved for invalid pricing inputs at the call
boundary, market data provider failures, and invalid configuration.
"""

from typing import Optional


class StrikepathError(Exception):
    """Base exception for strikepath errors."""


class PricingInputError(StrikepathError, ValueError):
    """
    Raised when a pricing call receives an invalid spot or strike.

    Attributes:
        field: Name of the offending input (e.g. "spot", "strike")
        value: Value that failed validation
    """

    def __init__(self, field: str, value: float):
        self.field = field
        self.value = value
        super().__init__(f"{field} must be positive, got {value}")


class MarketDataError(StrikepathError):
    """
    Market data provider failure.

    Attributes:
        message: Human-readable error message
        error_type: Coarse category ('config', 'request', 'http', 'payload')
        status_code: HTTP status code when the provider answered with an error
    """

    def __init__(
        self,
        message: str,
        error_type: str = "request",
        status_code: Optional[int] = None,
    ):
        self.message = message
        self.error_type = error_type
        self.status_code = status_code
        super().__init__(message)


class ConfigError(StrikepathError, ValueError):
    """Raised when configuration validation fails."""
