"""Analyzer entry points and result assembly."""

from __future__ import annotations

import logging

from phish_risk_engine.domain.models import (
    MAX_RISK_SCORE,
    AnalysisInput,
    AnalysisResult,
    InputKind,
)
from phish_risk_engine.rules import RULE_TABLES, RuleEvaluation, evaluate_rules
from phish_risk_engine.scoring import classify, explain

logger = logging.getLogger(__name__)


def cap_score(total_weight: int) -> int:
    return max(0, min(MAX_RISK_SCORE, total_weight))


def assemble_result(item: AnalysisInput, evaluation: RuleEvaluation) -> AnalysisResult:
    score = cap_score(evaluation.total_weight)
    level = classify(score, item.kind)
    indicators = evaluation.texts
    return AnalysisResult(
        risk_score=score,
        risk_level=level,
        indicators=indicators,
        explanation=explain(indicators, level, item.kind),
        type=item.kind.value,
        input=item.raw,
    )


def analyze_input(item: AnalysisInput) -> AnalysisResult:
    evaluation = evaluate_rules(RULE_TABLES[item.kind], item.lowered)
    result = assemble_result(item, evaluation)
    logger.debug(
        "analysis complete kind=%s raw_weight=%d score=%d level=%s indicators=%d",
        item.kind.value,
        evaluation.total_weight,
        result.risk_score,
        result.risk_level,
        len(result.indicators),
    )
    return result


def analyze(kind: InputKind | str, raw: str) -> AnalysisResult:
    """Score ``raw`` with the rule table for ``kind``."""

    return analyze_input(AnalysisInput(kind=InputKind(kind), raw=raw))


def analyze_url(url: str) -> AnalysisResult:
    return analyze(InputKind.URL, url)


def analyze_email(body: str) -> AnalysisResult:
    return analyze(InputKind.EMAIL, body)
