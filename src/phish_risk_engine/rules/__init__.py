"""Static rule tables per input kind."""

from phish_risk_engine.domain.models import InputKind
from phish_risk_engine.rules.base import (
    MatchOutcome,
    Rule,
    RuleEvaluation,
    WeightMode,
    evaluate_rules,
)
from phish_risk_engine.rules.email_rules import EMAIL_RULES
from phish_risk_engine.rules.url_rules import URL_RULES

RULE_TABLES: dict[InputKind, tuple[Rule, ...]] = {
    InputKind.URL: URL_RULES,
    InputKind.EMAIL: EMAIL_RULES,
}

__all__ = [
    "EMAIL_RULES",
    "MatchOutcome",
    "RULE_TABLES",
    "Rule",
    "RuleEvaluation",
    "URL_RULES",
    "WeightMode",
    "evaluate_rules",
]
