from veritas.schemas.chat import ChatRequest, ChatResponse, ConversationTurn
from veritas.schemas.claims import ClaimAssessment, ClaimVerificationResult, Source
from veritas.schemas.forensics import ForensicsResult
from veritas.schemas.media import MediaPayload
from veritas.schemas.offers import OfferRequest, OfferVettingResult
from veritas.schemas.requests import (
    Directives,
    GroundingChunk,
    MediaPart,
    ModelRequest,
    ModelResponse,
    TextPart,
    WebReference,
)

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "ConversationTurn",
    "ClaimAssessment",
    "ClaimVerificationResult",
    "Source",
    "ForensicsResult",
    "MediaPayload",
    "OfferRequest",
    "OfferVettingResult",
    "Directives",
    "GroundingChunk",
    "MediaPart",
    "ModelRequest",
    "ModelResponse",
    "TextPart",
    "WebReference",
]
