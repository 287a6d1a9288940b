"""Deterministic natural-language summaries of an analysis."""

from __future__ import annotations

from typing import Sequence

from phish_risk_engine.domain.models import InputKind, RiskLevel

_CAUTIONS: dict[InputKind, dict[str, str]] = {
    InputKind.URL: {
        "high": "Exercise extreme caution before visiting this link.",
        "medium": "Proceed with caution and verify the source.",
        "low": "This appears to be a relatively safe URL, but always verify the sender.",
    },
    InputKind.EMAIL: {
        "high": (
            "This email is likely a phishing attempt - do not click any links "
            "or provide personal information."
        ),
        "medium": "This email shows concerning patterns - verify the sender before taking any action.",
        "low": "This email shows some minor concerns but appears relatively safe.",
    },
}

_HIGHLIGHT_COUNT = 2
_SUBJECTS = {InputKind.URL: "URL", InputKind.EMAIL: "email"}


def safe_message(kind: InputKind) -> str:
    return f"This {_SUBJECTS[kind]} appears to be safe with no obvious phishing indicators detected."


def caution_sentence(level: RiskLevel, kind: InputKind) -> str:
    return _CAUTIONS[kind][level]


def explain(indicators: Sequence[str], level: RiskLevel, kind: InputKind) -> str:
    """Summarize ``indicators`` for a result classified as ``level``.

    The first two indicators are quoted inline; longer lists are marked with
    "among others". An empty list always yields :func:`safe_message`.
    """

    if not indicators:
        return safe_message(kind)
    highlights = " and ".join(indicators[:_HIGHLIGHT_COUNT])
    suffix = " among others" if len(indicators) > _HIGHLIGHT_COUNT else ""
    return (
        f"This {_SUBJECTS[kind]} shows {level} risk indicators. "
        f"The analysis detected {len(indicators)} potential phishing signals "
        f"including {highlights}{suffix}. {caution_sentence(level, kind)}"
    )
