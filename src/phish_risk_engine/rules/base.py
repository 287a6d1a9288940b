"""Declarative rule primitives and the fold that evaluates a rule table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
from typing import Callable, Iterable

from phish_risk_engine.domain.models import Indicator

logger = logging.getLogger(__name__)


class WeightMode(str, Enum):
    FLAT = "flat"
    PER_TOKEN = "per_token"


@dataclass(frozen=True)
class MatchOutcome:
    """Result of a rule predicate. ``tokens`` renders the message template."""

    matched: bool
    tokens: tuple[str, ...] = ()

    @classmethod
    def miss(cls) -> "MatchOutcome":
        return cls(matched=False)

    @classmethod
    def hit(cls, tokens: Iterable[str] = ()) -> "MatchOutcome":
        return cls(matched=True, tokens=tuple(tokens))


NO_MATCH = MatchOutcome.miss()

Predicate = Callable[[str], MatchOutcome]


@dataclass(frozen=True)
class Rule:
    id: str
    category: str
    predicate: Predicate
    weight: int
    message_template: str
    weight_mode: WeightMode = WeightMode.FLAT

    def score(self, outcome: MatchOutcome) -> int:
        if self.weight_mode is WeightMode.PER_TOKEN:
            return self.weight * len(outcome.tokens)
        return self.weight

    def render(self, outcome: MatchOutcome) -> str:
        return self.message_template.format(
            tokens=", ".join(outcome.tokens),
            count=len(outcome.tokens),
        )

    def apply(self, text: str) -> Indicator | None:
        outcome = self.predicate(text)
        if not outcome.matched:
            return None
        return Indicator(text=self.render(outcome), weight=self.score(outcome))


@dataclass(frozen=True)
class RuleEvaluation:
    indicators: tuple[Indicator, ...] = ()
    total_weight: int = 0

    def add(self, indicator: Indicator) -> "RuleEvaluation":
        return RuleEvaluation(
            indicators=self.indicators + (indicator,),
            total_weight=self.total_weight + indicator.weight,
        )

    @property
    def texts(self) -> list[str]:
        return [item.text for item in self.indicators]


def evaluate_rules(rules: Iterable[Rule], text: str) -> RuleEvaluation:
    """Fold ``rules`` over ``text`` in table order."""

    evaluation = RuleEvaluation()
    for rule in rules:
        indicator = rule.apply(text)
        if indicator is None:
            continue
        logger.debug("rule fired id=%s category=%s weight=%d", rule.id, rule.category, indicator.weight)
        evaluation = evaluation.add(indicator)
    return evaluation


def contains_any(needles: Iterable[str]) -> Predicate:
    """Flat predicate: match when any needle is a substring of the text."""

    options = tuple(needles)

    def _predicate(text: str) -> MatchOutcome:
        return MatchOutcome.hit() if any(item in text for item in options) else NO_MATCH

    return _predicate


def distinct_matches(needles: Iterable[str]) -> Predicate:
    """Collect every needle present in the text, in table order."""

    options = tuple(needles)

    def _predicate(text: str) -> MatchOutcome:
        found = [item for item in options if item in text]
        return MatchOutcome.hit(found) if found else NO_MATCH

    return _predicate
