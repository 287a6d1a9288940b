"""Email body rule table."""

from __future__ import annotations

from phish_risk_engine.domain.url import contains_ipv4, extract_urls
from phish_risk_engine.rules.base import (
    NO_MATCH,
    MatchOutcome,
    Rule,
    WeightMode,
    contains_any,
    distinct_matches,
)

URGENCY_PHRASES = ("urgent", "immediate", "expires today", "act now", "limited time", "verify now")
LINK_SHORTENERS = ("bit.ly", "tinyurl")
PERSONAL_INFO_PHRASES = ("social security", "ssn", "password", "pin", "credit card", "bank account")
IMPERSONATION_PHRASES = (
    "verify your account",
    "suspended",
    "locked",
    "unauthorized access",
    "click here to confirm",
)
MISSPELLINGS = ("recieve", "seperate", "occured", "loose", "there account")
FINANCIAL_TERMS = ("$", "money", "payment", "refund", "prize", "lottery", "inheritance")


def is_suspicious_link(url: str) -> bool:
    lowered = url.lower()
    return any(item in lowered for item in LINK_SHORTENERS) or contains_ipv4(lowered)


def _suspicious_links(text: str) -> MatchOutcome:
    # Each occurrence counts, so a repeated link is weighted twice.
    links = [url for url in extract_urls(text) if is_suspicious_link(url)]
    return MatchOutcome.hit(links) if links else NO_MATCH


EMAIL_RULES: tuple[Rule, ...] = (
    Rule(
        id="urgency_language",
        category="urgency",
        predicate=distinct_matches(URGENCY_PHRASES),
        weight=1,
        message_template="Urgent language detected: {tokens}",
        weight_mode=WeightMode.PER_TOKEN,
    ),
    Rule(
        id="suspicious_links",
        category="links",
        predicate=_suspicious_links,
        weight=2,
        message_template="Suspicious links detected: {count} potentially harmful URLs",
        weight_mode=WeightMode.PER_TOKEN,
    ),
    Rule(
        id="personal_info_request",
        category="personal_info",
        predicate=distinct_matches(PERSONAL_INFO_PHRASES),
        weight=2,
        message_template="Requests for personal information: {tokens}",
        weight_mode=WeightMode.PER_TOKEN,
    ),
    Rule(
        id="impersonation",
        category="impersonation",
        predicate=distinct_matches(IMPERSONATION_PHRASES),
        weight=1,
        message_template="Potential impersonation tactics: {tokens}",
        weight_mode=WeightMode.PER_TOKEN,
    ),
    Rule(
        id="grammar_red_flags",
        category="grammar",
        predicate=contains_any(MISSPELLINGS),
        weight=1,
        message_template="Poor grammar or spelling detected",
    ),
    Rule(
        id="financial_references",
        category="financial",
        predicate=distinct_matches(FINANCIAL_TERMS),
        weight=1,
        message_template="Financial references detected: {tokens}",
        weight_mode=WeightMode.PER_TOKEN,
    ),
)
