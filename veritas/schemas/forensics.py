from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ForensicsVerdict = Literal["LIKELY AUTHENTIC", "MIXED/SUSPICIOUS", "HIGHLY LIKELY AI GENERATED"]


class ForensicsResult(BaseModel):
    """Gemini structured output schema for one image or video frame."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    percent_ai: int = Field(
        alias="percentAI",
        ge=0,
        le=100,
        description="Estimated percentage probability that the image is AI generated (0-100)",
    )
    verdict: ForensicsVerdict = Field(description="Categorical verdict based on the score")
    details: str = Field(
        description="A concise forensic report paragraph detailing specific artifacts found or absence thereof."
    )
