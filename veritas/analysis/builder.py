"""
Request builder: one declarative plan per workflow.

A plan is either a single schema call or a two-stage call (grounded free
text, then a formatting call that re-emits the answer against the schema).
Orchestrators never branch on call shape themselves; they hand the plan to
`veritas.analysis.pipeline.execute_plan`.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Type, Union

from pydantic import BaseModel

from veritas.config import settings
from veritas.integrations.gemini import prompts
from veritas.schemas.chat import ConversationTurn
from veritas.schemas.claims import ClaimAssessment
from veritas.schemas.forensics import ForensicsResult
from veritas.schemas.media import MediaPayload
from veritas.schemas.offers import OfferVettingResult
from veritas.schemas.requests import Directives, MediaPart, ModelRequest, TextPart

logger = logging.getLogger(__name__)


class Workflow(str, enum.Enum):
    FORENSICS = "forensics"
    OFFER_VETTING = "offer_vetting"
    CLAIM_VERIFICATION = "claim_verification"
    CONVERSATION = "conversation"


@dataclass(frozen=True)
class SingleCallPlan:
    request: ModelRequest
    schema: Type[BaseModel]


@dataclass(frozen=True)
class TwoStagePlan:
    analysis_request: ModelRequest
    format_request: Callable[[str], ModelRequest]
    schema: Type[BaseModel]


WorkflowPlan = Union[SingleCallPlan, TwoStagePlan]


def _format_request(prompt: Callable[[str], str], schema: Type[BaseModel]) -> Callable[[str], ModelRequest]:
    def build(analysis_text: str) -> ModelRequest:
        return ModelRequest(
            model=settings.formatter_model,
            parts=(TextPart(text=prompt(analysis_text)),),
            directives=Directives(response_schema=schema),
        )
    return build


def build_forensics_plan(payload: MediaPayload) -> SingleCallPlan:
    request = ModelRequest(
        model=settings.forensics_model,
        parts=(MediaPart(inline_media=payload), TextPart(text=prompts.forensics_prompt())),
        directives=Directives(response_schema=ForensicsResult),
    )
    return SingleCallPlan(request=request, schema=ForensicsResult)


def build_offer_plan(job_text: str, deep: bool = False) -> WorkflowPlan:
    if deep:
        request = ModelRequest(
            model=settings.offer_deep_model,
            parts=(TextPart(text=prompts.offer_deep_prompt(job_text)),),
            directives=Directives(
                response_schema=OfferVettingResult,
                reasoning_budget=settings.offer_deep_thinking_budget,
            ),
        )
        logger.info(
            f"[OFFERS] Deep check with thinking budget {settings.offer_deep_thinking_budget}; expect a slow response"
        )
        return SingleCallPlan(request=request, schema=OfferVettingResult)

    analysis = ModelRequest(
        model=settings.offer_fast_model,
        parts=(TextPart(text=prompts.offer_grounded_prompt(job_text)),),
        directives=Directives(search_grounding=True),
    )
    return TwoStagePlan(
        analysis_request=analysis,
        format_request=_format_request(prompts.offer_format_prompt, OfferVettingResult),
        schema=OfferVettingResult,
    )


def build_claim_plan(claim: str, image: Optional[MediaPayload] = None) -> TwoStagePlan:
    parts = [TextPart(text=prompts.claim_grounded_prompt(claim))]
    if image is not None:
        parts.append(MediaPart(inline_media=image))

    analysis = ModelRequest(
        model=settings.claim_model,
        parts=tuple(parts),
        directives=Directives(search_grounding=True),
    )
    return TwoStagePlan(
        analysis_request=analysis,
        format_request=_format_request(prompts.claim_format_prompt, ClaimAssessment),
        schema=ClaimAssessment,
    )


def build_chat_request(history: Sequence[ConversationTurn], message: str) -> ModelRequest:
    return ModelRequest(
        model=settings.chat_model,
        parts=(TextPart(text=message),),
        history=tuple(history),
        directives=Directives(system_instruction=settings.chat_persona),
    )


def build_plan(
    workflow: Workflow,
    user_input,
    *,
    deep: bool = False,
    image: Optional[MediaPayload] = None,
    history: Sequence[ConversationTurn] = (),
) -> Union[WorkflowPlan, ModelRequest]:
    """Dispatch to the workflow's builder. Mode is always the caller's explicit flag."""
    if workflow is Workflow.FORENSICS:
        return build_forensics_plan(user_input)
    if workflow is Workflow.OFFER_VETTING:
        return build_offer_plan(user_input, deep=deep)
    if workflow is Workflow.CLAIM_VERIFICATION:
        return build_claim_plan(user_input, image=image)
    if workflow is Workflow.CONVERSATION:
        return build_chat_request(history, user_input)
    raise ValueError(f"Unknown workflow: {workflow}")
