from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

ClaimVerdict = Literal["REAL", "FAKE", "MISLEADING"]


class Source(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    uri: str


class ClaimAssessment(BaseModel):
    """Formatter schema: the verdict extracted from a grounded answer."""

    model_config = ConfigDict(frozen=True)

    verdict: ClaimVerdict = Field(description="Whether the claim is REAL, FAKE, or MISLEADING")
    correction: str = Field(description="A factual correction if fake, or summary if real.")


class ClaimVerificationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    verdict: ClaimVerdict
    correction: str
    sources: List[Source] = Field(default_factory=list)
