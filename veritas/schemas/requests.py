"""
Provider-neutral request/response value objects for the model service.

The Gemini adapter translates these into `google.genai.types`; tests build them
directly and hand them to a fake service.
"""

from typing import Optional, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from veritas.schemas.chat import ConversationTurn
from veritas.schemas.media import MediaPayload


class TextPart(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str


class MediaPart(BaseModel):
    model_config = ConfigDict(frozen=True)

    inline_media: MediaPayload


Part = Union[TextPart, MediaPart]


class Directives(BaseModel):
    model_config = ConfigDict(frozen=True)

    response_schema: Optional[Type[BaseModel]] = None
    search_grounding: bool = False
    reasoning_budget: Optional[int] = Field(None, gt=0)
    system_instruction: Optional[str] = None

    @model_validator(mode="after")
    def _schema_excludes_grounding(self):
        if self.response_schema is not None and self.search_grounding:
            raise ValueError("a grounded call cannot also request a structured-output schema")
        return self


class ModelRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    model: str
    parts: Tuple[Part, ...]
    history: Tuple[ConversationTurn, ...] = ()
    directives: Directives = Directives()

    @property
    def expects_slow_response(self) -> bool:
        # Reasoning budgets trade latency for quality; callers must not time out early.
        return self.directives.reasoning_budget is not None


class WebReference(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    uri: Optional[str] = None


class GroundingChunk(BaseModel):
    model_config = ConfigDict(frozen=True)

    web: Optional[WebReference] = None


class ModelResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: Optional[str] = None
    grounding_chunks: Tuple[GroundingChunk, ...] = ()
