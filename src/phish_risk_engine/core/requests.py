"""Boundary request validation shared by the HTTP app and the CLI."""

from __future__ import annotations

from typing import Any, Mapping

from phish_risk_engine.core.errors import InputValidationError
from phish_risk_engine.domain.models import AnalysisInput, InputKind

_REQUIRED_MESSAGES = {
    InputKind.URL: "URL is required",
    InputKind.EMAIL: "Email content is required",
}


def _present(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def require_field(
    payload: Mapping[str, Any],
    kind: InputKind,
    *,
    max_chars: int | None = None,
) -> AnalysisInput:
    """Build an :class:`AnalysisInput` from ``payload[kind.value]`` or reject it."""

    value = payload.get(kind.value)
    if not _present(value):
        raise InputValidationError(_REQUIRED_MESSAGES[kind])
    if max_chars is not None and len(value) > max_chars:
        raise InputValidationError(f"Input exceeds {max_chars} characters")
    return AnalysisInput(kind=kind, raw=value)


def validate_request(payload: Any, *, max_chars: int | None = None) -> AnalysisInput:
    """Select the analyzer from a ``{"url": ...}`` or ``{"email": ...}`` payload."""

    if not isinstance(payload, Mapping):
        raise InputValidationError("Request body must be a JSON object")
    provided = [kind for kind in InputKind if _present(payload.get(kind.value))]
    if not provided:
        raise InputValidationError("Either url or email is required")
    if len(provided) > 1:
        raise InputValidationError("Provide only one of url or email")
    return require_field(payload, provided[0], max_chars=max_chars)
