"""
Failure collapsing shared by the workflow orchestrators.
"""

import logging
from typing import Awaitable, TypeVar

from veritas.core.errors import AnalysisFailedError, EncodingError, ParseError, ServiceError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def run_workflow(name: str, call: Awaitable[T]) -> T:
    """
    Await one orchestrator call. Encoding, service and parse failures are
    logged with their kind and re-raised as the opaque AnalysisFailedError.
    No retries.
    """
    try:
        return await call
    except (EncodingError, ServiceError, ParseError) as e:
        logger.error(f"[{name}] Analysis failed ({type(e).__name__}): {e}")
        raise AnalysisFailedError() from e
