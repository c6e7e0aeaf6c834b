"""
Gemini API client: construction and the ModelService adapter.

`create_client` is called once from the FastAPI lifespan; the resulting
`GeminiModelService` is injected into routes, never imported as a global.
"""

import logging
from typing import List, Optional

from google import genai
from google.genai import types

from veritas.config import settings
from veritas.core.errors import ServiceError
from veritas.schemas.requests import (
    GroundingChunk,
    MediaPart,
    ModelRequest,
    ModelResponse,
    TextPart,
    WebReference,
)

logger = logging.getLogger(__name__)

_ROLES = {"user": "user", "assistant": "model"}


def create_client(api_key: Optional[str] = None) -> genai.Client:
    # No HttpRetryOptions: a failed call is reported once, retries are user-initiated.
    return genai.Client(
        api_key=api_key or settings.gemini_api_key,
        http_options=types.HttpOptions(timeout=settings.gemini_http_timeout_ms),
    )


def _to_part(part) -> types.Part:
    if isinstance(part, TextPart):
        return types.Part(text=part.text)
    if isinstance(part, MediaPart):
        media = part.inline_media
        return types.Part.from_bytes(data=media.to_bytes(), mime_type=media.content_type)
    raise TypeError(f"Unsupported part: {type(part).__name__}")


def build_contents(request: ModelRequest) -> List[types.Content]:
    contents = [
        types.Content(role=_ROLES[turn.role], parts=[types.Part(text=turn.text)])
        for turn in request.history
    ]
    contents.append(types.Content(role="user", parts=[_to_part(p) for p in request.parts]))
    return contents


def build_config(request: ModelRequest) -> types.GenerateContentConfig:
    directives = request.directives
    config = {}

    if directives.system_instruction:
        config["system_instruction"] = directives.system_instruction
    if directives.response_schema is not None:
        config["response_mime_type"] = "application/json"
        config["response_schema"] = directives.response_schema
    if directives.search_grounding:
        config["tools"] = [types.Tool(google_search=types.GoogleSearch())]
    if directives.reasoning_budget is not None:
        config["thinking_config"] = types.ThinkingConfig(thinking_budget=directives.reasoning_budget)
    if request.expects_slow_response:
        config["http_options"] = types.HttpOptions(timeout=settings.gemini_deep_http_timeout_ms)

    return types.GenerateContentConfig(**config)


def to_model_response(response: types.GenerateContentResponse) -> ModelResponse:
    chunks = []
    candidates = response.candidates or []
    metadata = candidates[0].grounding_metadata if candidates else None
    for chunk in (metadata.grounding_chunks or []) if metadata else []:
        web = None
        if chunk.web is not None:
            web = WebReference(title=chunk.web.title, uri=chunk.web.uri)
        chunks.append(GroundingChunk(web=web))

    return ModelResponse(text=response.text, grounding_chunks=tuple(chunks))


class GeminiModelService:
    def __init__(self, client: genai.Client):
        self.client = client

    async def generate(self, request: ModelRequest) -> ModelResponse:
        try:
            response = await self.client.aio.models.generate_content(
                model=request.model,
                contents=build_contents(request),
                config=build_config(request),
            )
        except Exception as e:
            logger.error(f"[GEMINI] {request.model} call failed: {e}")
            raise ServiceError(f"{request.model} call failed: {e}") from e

        if hasattr(response, "usage_metadata") and response.usage_metadata:
            logger.info(
                f"[GEMINI] {request.model} tokens: "
                f"prompt={response.usage_metadata.prompt_token_count} "
                f"completion={response.usage_metadata.candidates_token_count} "
                f"total={response.usage_metadata.total_token_count}"
            )
        return to_model_response(response)
