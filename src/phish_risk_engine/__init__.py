"""Rule-based phishing risk scoring for URLs and email bodies."""

from phish_risk_engine.domain.models import AnalysisResult, InputKind
from phish_risk_engine.engine import analyze, analyze_email, analyze_url

__all__ = ["AnalysisResult", "InputKind", "analyze", "analyze_email", "analyze_url"]

__version__ = "0.1.0"
