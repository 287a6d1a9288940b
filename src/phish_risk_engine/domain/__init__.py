"""Domain models and URL helpers."""

from phish_risk_engine.domain.models import (
    MAX_RISK_SCORE,
    AnalysisInput,
    AnalysisResult,
    Indicator,
    InputKind,
    RiskLevel,
)

__all__ = [
    "MAX_RISK_SCORE",
    "AnalysisInput",
    "AnalysisResult",
    "Indicator",
    "InputKind",
    "RiskLevel",
]
