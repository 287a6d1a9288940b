"""Cross-cutting helpers: errors, logging and request validation."""

from phish_risk_engine.core.errors import ConfigError, InputValidationError, RiskEngineError

__all__ = ["ConfigError", "InputValidationError", "RiskEngineError"]
