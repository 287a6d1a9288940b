"""Score to risk-level mapping."""

from __future__ import annotations

from dataclasses import dataclass

from phish_risk_engine.domain.models import InputKind, RiskLevel


@dataclass(frozen=True)
class RiskThresholds:
    low_max: int
    medium_max: int

    def level(self, score: int) -> RiskLevel:
        if score <= self.low_max:
            return "low"
        if score <= self.medium_max:
            return "medium"
        return "high"


# Email tolerates one more point before "high" than URLs do.
URL_THRESHOLDS = RiskThresholds(low_max=2, medium_max=5)
EMAIL_THRESHOLDS = RiskThresholds(low_max=2, medium_max=6)


def classify_url_score(score: int) -> RiskLevel:
    return URL_THRESHOLDS.level(score)


def classify_email_score(score: int) -> RiskLevel:
    return EMAIL_THRESHOLDS.level(score)


def classify(score: int, kind: InputKind) -> RiskLevel:
    if kind is InputKind.URL:
        return classify_url_score(score)
    return classify_email_score(score)
