"""Custom exceptions for phish-risk-engine."""


class RiskEngineError(Exception):
    """Base exception for application-level errors."""


class InputValidationError(RiskEngineError):
    """Raised when a request is rejected before analysis."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigError(RiskEngineError):
    """Raised when configuration cannot be loaded or validated."""
