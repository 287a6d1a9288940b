"""URL rule table."""

from __future__ import annotations

from phish_risk_engine.domain.url import contains_ipv4, parse_absolute_url, subdomain_depth
from phish_risk_engine.rules.base import (
    NO_MATCH,
    MatchOutcome,
    Rule,
    WeightMode,
    contains_any,
    distinct_matches,
)

SUSPICIOUS_TLDS = (".tk", ".ml", ".ga", ".cf", ".pw", ".top")
SHORTENER_DOMAINS = ("bit.ly", "tinyurl", "t.co", "goo.gl", "ow.ly")
SUSPICIOUS_KEYWORDS = ("login", "verify", "secure", "update", "confirm", "urgent")
MAX_SUBDOMAIN_DEPTH = 2


def _ip_literal(text: str) -> MatchOutcome:
    return MatchOutcome.hit() if contains_ipv4(text) else NO_MATCH


def _excessive_subdomains(text: str) -> MatchOutcome:
    parsed = parse_absolute_url(text)
    if parsed is None:
        return NO_MATCH
    return MatchOutcome.hit() if subdomain_depth(parsed) > MAX_SUBDOMAIN_DEPTH else NO_MATCH


def _invalid_url(text: str) -> MatchOutcome:
    return MatchOutcome.hit() if parse_absolute_url(text) is None else NO_MATCH


def _no_https(text: str) -> MatchOutcome:
    return NO_MATCH if text.startswith("https://") else MatchOutcome.hit()


URL_RULES: tuple[Rule, ...] = (
    Rule(
        id="suspicious_tld",
        category="domain",
        predicate=contains_any(SUSPICIOUS_TLDS),
        weight=2,
        message_template="Suspicious top-level domain detected",
    ),
    Rule(
        id="url_shortener",
        category="domain",
        predicate=contains_any(SHORTENER_DOMAINS),
        weight=1,
        message_template="URL shortener detected",
    ),
    Rule(
        id="suspicious_keywords",
        category="keyword",
        predicate=distinct_matches(SUSPICIOUS_KEYWORDS),
        weight=1,
        message_template="Suspicious keywords detected: {tokens}",
        weight_mode=WeightMode.PER_TOKEN,
    ),
    Rule(
        id="ip_literal_host",
        category="host",
        predicate=_ip_literal,
        weight=3,
        message_template="IP address used instead of domain name",
    ),
    Rule(
        id="excessive_subdomains",
        category="host",
        predicate=_excessive_subdomains,
        weight=2,
        message_template="Excessive number of subdomains",
    ),
    Rule(
        id="invalid_url",
        category="structure",
        predicate=_invalid_url,
        weight=1,
        message_template="Invalid URL format",
    ),
    Rule(
        id="no_https",
        category="transport",
        predicate=_no_https,
        weight=1,
        message_template="URL does not use HTTPS",
    ),
)
