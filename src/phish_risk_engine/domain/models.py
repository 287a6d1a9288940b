"""Analysis input/output models."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

RiskLevel = Literal["low", "medium", "high"]

MAX_RISK_SCORE = 10


class InputKind(str, Enum):
    URL = "url"
    EMAIL = "email"


class AnalysisInput(BaseModel):
    """A submitted URL or email body together with its declared kind."""

    model_config = ConfigDict(frozen=True)

    kind: InputKind
    raw: str

    @property
    def lowered(self) -> str:
        return self.raw.lower()


class Indicator(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = Field(min_length=1)
    weight: int = Field(ge=0)


class AnalysisResult(BaseModel):
    """Normalized risk assessment handed to persistence, export and display layers."""

    model_config = ConfigDict(frozen=True)

    risk_score: int = Field(ge=0, le=MAX_RISK_SCORE)
    risk_level: RiskLevel
    indicators: list[str] = Field(default_factory=list)
    explanation: str = Field(min_length=2)
    type: Literal["url", "email"]
    input: str

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(mode="json")
