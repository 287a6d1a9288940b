from __future__ import annotations

import pytest

from phish_risk_engine.domain.models import InputKind
from phish_risk_engine.scoring import (
    classify,
    classify_email_score,
    classify_url_score,
    explain,
    safe_message,
)


@pytest.mark.parametrize(
    ("score", "expected"),
    [(0, "low"), (2, "low"), (3, "medium"), (5, "medium"), (6, "high"), (10, "high")],
)
def test_url_thresholds(score: int, expected: str) -> None:
    assert classify_url_score(score) == expected
    assert classify(score, InputKind.URL) == expected


@pytest.mark.parametrize(
    ("score", "expected"),
    [(0, "low"), (2, "low"), (3, "medium"), (6, "medium"), (7, "high"), (10, "high")],
)
def test_email_thresholds(score: int, expected: str) -> None:
    assert classify_email_score(score) == expected
    assert classify(score, InputKind.EMAIL) == expected


def test_thresholds_diverge_at_six() -> None:
    assert classify(6, InputKind.URL) == "high"
    assert classify(6, InputKind.EMAIL) == "medium"


def test_explain_empty_indicators_uses_safe_message() -> None:
    assert explain([], "low", InputKind.URL) == (
        "This URL appears to be safe with no obvious phishing indicators detected."
    )
    assert explain([], "low", InputKind.EMAIL) == safe_message(InputKind.EMAIL)


def test_explain_two_indicators_has_no_among_others() -> None:
    text = explain(["first", "second"], "low", InputKind.URL)
    assert text == (
        "This URL shows low risk indicators. The analysis detected 2 potential phishing "
        "signals including first and second. This appears to be a relatively safe URL, "
        "but always verify the sender."
    )


def test_explain_single_indicator() -> None:
    text = explain(["only"], "medium", InputKind.EMAIL)
    assert text == (
        "This email shows medium risk indicators. The analysis detected 1 potential phishing "
        "signals including only. This email shows concerning patterns - verify the sender "
        "before taking any action."
    )


def test_explain_quotes_first_two_of_many() -> None:
    text = explain(["a", "b", "c", "d"], "high", InputKind.URL)
    assert "including a and b among others." in text
    assert "detected 4 potential" in text


def test_explain_is_deterministic() -> None:
    args = (["a", "b", "c"], "high", InputKind.EMAIL)
    assert explain(*args) == explain(*args)
