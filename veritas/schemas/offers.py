from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

OfferVerdict = Literal["LEGITIMATE", "SUSPICIOUS", "POTENTIAL_SCAM"]


class OfferVettingResult(BaseModel):
    """Gemini structured output schema for a vetted job offer."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    verdict: OfferVerdict = Field(description="Overall legitimacy of the offer")
    evidence: List[str] = Field(description="Observations supporting the verdict, most important first")
    red_flags: List[str] = Field(
        alias="redFlags",
        description="Scam indicators found in the offer; empty if none",
    )
    company_status: str = Field(
        alias="companyStatus",
        description="Inferred status of the company entity based on text analysis",
    )


class OfferRequest(BaseModel):
    text: str = ""
    deep: bool = False
