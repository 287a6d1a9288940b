"""Risk classification and explanation helpers."""

from phish_risk_engine.scoring.classifier import (
    EMAIL_THRESHOLDS,
    URL_THRESHOLDS,
    RiskThresholds,
    classify,
    classify_email_score,
    classify_url_score,
)
from phish_risk_engine.scoring.explanation import caution_sentence, explain, safe_message

__all__ = [
    "EMAIL_THRESHOLDS",
    "URL_THRESHOLDS",
    "RiskThresholds",
    "caution_sentence",
    "classify",
    "classify_email_score",
    "classify_url_score",
    "explain",
    "safe_message",
]
