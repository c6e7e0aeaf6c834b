"""
Plan executor.

Runs a WorkflowPlan against a ModelService. Two-stage plans are strictly
sequential: the formatting request is only built, and only sent, after the
grounded call has returned a non-empty answer.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from pydantic import BaseModel

from veritas.analysis.builder import SingleCallPlan, TwoStagePlan, WorkflowPlan
from veritas.analysis.normalizer import extract_sources, normalize
from veritas.analysis.service import ModelService
from veritas.core.errors import ServiceError
from veritas.schemas.claims import Source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlanOutcome:
    result: BaseModel
    sources: List[Source] = field(default_factory=list)


async def execute_plan(service: ModelService, plan: WorkflowPlan) -> PlanOutcome:
    if isinstance(plan, SingleCallPlan):
        response = await service.generate(plan.request)
        return PlanOutcome(result=normalize(response.text, plan.schema))

    if isinstance(plan, TwoStagePlan):
        first = await service.generate(plan.analysis_request)

        try:
            sources = extract_sources(first)
        except Exception as e:
            logger.warning(f"[PIPELINE] Source extraction failed, continuing without sources: {e}")
            sources = []

        analysis_text = (first.text or "").strip()
        if not analysis_text:
            raise ServiceError(f"{plan.analysis_request.model} returned no analysis text")

        logger.info(
            f"[PIPELINE] Stage one done ({len(analysis_text)} chars, {len(sources)} sources); formatting"
        )
        second = await service.generate(plan.format_request(analysis_text))
        return PlanOutcome(result=normalize(second.text, plan.schema), sources=sources)

    raise TypeError(f"Unsupported plan type: {type(plan).__name__}")
