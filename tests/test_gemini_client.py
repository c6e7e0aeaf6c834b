"""
Unit tests for veritas/integrations/gemini/client.py.

Translation to `google.genai.types` is checked with real SDK objects; the
network client itself is a MagicMock.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from google.genai import types

from tests.conftest import make_tiny_png

from veritas.analysis.builder import build_chat_request, build_claim_plan, build_forensics_plan, build_offer_plan
from veritas.config import settings
from veritas.core.errors import ServiceError
from veritas.integrations.gemini.client import (
    GeminiModelService,
    build_config,
    build_contents,
    to_model_response,
)
from veritas.schemas.chat import ConversationTurn
from veritas.schemas.forensics import ForensicsResult
from veritas.schemas.media import MediaPayload
from veritas.schemas.requests import WebReference

PNG = MediaPayload.from_bytes(make_tiny_png(), "image/png")


def _response(text, chunks=None) -> types.GenerateContentResponse:
    metadata = None
    if chunks is not None:
        metadata = types.GroundingMetadata(grounding_chunks=chunks)
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(role="model", parts=[types.Part(text=text)]),
                grounding_metadata=metadata,
            )
        ]
    )


# ---------------------------------------------------------------------------
# build_config
# ---------------------------------------------------------------------------


def test_schema_call_sets_json_output():
    config = build_config(build_forensics_plan(PNG).request)

    assert config.response_mime_type == "application/json"
    assert config.response_schema is ForensicsResult
    assert not config.tools
    assert config.thinking_config is None


def test_grounded_call_sets_search_tool_only():
    config = build_config(build_claim_plan("claim").analysis_request)

    assert config.tools[0].google_search is not None
    assert config.response_schema is None
    assert config.response_mime_type is None


def test_deep_call_sets_budget_and_long_timeout():
    config = build_config(build_offer_plan("offer", deep=True).request)

    assert config.thinking_config.thinking_budget == settings.offer_deep_thinking_budget
    assert config.http_options.timeout == settings.gemini_deep_http_timeout_ms


def test_fast_call_keeps_default_timeout():
    config = build_config(build_offer_plan("offer").analysis_request)
    assert config.http_options is None
    assert config.thinking_config is None


def test_chat_call_sets_system_instruction():
    config = build_config(build_chat_request([], "hi"))
    assert config.system_instruction == settings.chat_persona


# ---------------------------------------------------------------------------
# build_contents
# ---------------------------------------------------------------------------


def test_contents_put_media_before_prompt_for_forensics():
    contents = build_contents(build_forensics_plan(PNG).request)

    assert len(contents) == 1
    media, prompt = contents[0].parts
    assert media.inline_data.mime_type == "image/png"
    assert media.inline_data.data == PNG.to_bytes()
    assert prompt.text


def test_contents_map_assistant_turns_to_model_role():
    history = [ConversationTurn(role="user", text="Hi"), ConversationTurn(role="assistant", text="Hello")]
    contents = build_contents(build_chat_request(history, "What is phishing?"))

    assert [c.role for c in contents] == ["user", "model", "user"]
    assert contents[-1].parts[0].text == "What is phishing?"


# ---------------------------------------------------------------------------
# to_model_response
# ---------------------------------------------------------------------------


def test_response_text_and_grounding_chunks():
    raw = _response(
        "The tower stands.",
        chunks=[
            types.GroundingChunk(web=types.GroundingChunkWeb(title="AP", uri="https://apnews.com/x")),
            types.GroundingChunk(),
        ],
    )
    response = to_model_response(raw)

    assert response.text == "The tower stands."
    assert response.grounding_chunks[0].web == WebReference(title="AP", uri="https://apnews.com/x")
    assert response.grounding_chunks[1].web is None


def test_response_without_grounding_metadata():
    response = to_model_response(_response("plain"))
    assert response.grounding_chunks == ()


def test_response_without_candidates():
    response = to_model_response(types.GenerateContentResponse(candidates=[]))
    assert response.text is None
    assert response.grounding_chunks == ()


# ---------------------------------------------------------------------------
# GeminiModelService
# ---------------------------------------------------------------------------


async def test_generate_passes_model_contents_and_config():
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(return_value=_response("ok"))
    request = build_offer_plan("offer").analysis_request

    response = await GeminiModelService(client).generate(request)

    assert response.text == "ok"
    kwargs = client.aio.models.generate_content.call_args.kwargs
    assert kwargs["model"] == settings.offer_fast_model
    assert kwargs["config"].tools


async def test_generate_wraps_sdk_errors():
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(side_effect=RuntimeError("429 RESOURCE_EXHAUSTED"))

    with pytest.raises(ServiceError) as exc:
        await GeminiModelService(client).generate(build_chat_request([], "hi"))

    assert "429" in str(exc.value)
    assert isinstance(exc.value.__cause__, RuntimeError)
