"""
Response normalizer.

Model text is untrusted even when a response schema was requested: it is
cleaned, parsed and validated, and anything that does not fit is a ParseError.
Source extraction reads only the grounding metadata and does not depend on the
text parsing.
"""

import logging
import re
from typing import List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from veritas.core.errors import ParseError
from veritas.schemas.claims import Source
from veritas.schemas.requests import ModelResponse

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

_LEADING_FENCE = re.compile(r"^\s*```[a-zA-Z]*\s*")
_TRAILING_FENCE = re.compile(r"\s*```\s*$")


def clean_json(text: str) -> str:
    """Strip the ```json ... ``` wrapping the service sometimes adds."""
    text = _LEADING_FENCE.sub("", text)
    text = _TRAILING_FENCE.sub("", text)
    return text.strip()


def normalize(raw_text: Optional[str], schema: Type[T]) -> T:
    if raw_text is None or not raw_text.strip():
        raise ParseError(f"empty response for {schema.__name__}")

    cleaned = clean_json(raw_text)
    try:
        return schema.model_validate_json(cleaned)
    except ValidationError as e:
        logger.debug(f"[NORMALIZER] Rejected {schema.__name__} payload: {cleaned[:500]}")
        raise ParseError(f"response does not match {schema.__name__}: {e.error_count()} error(s)") from e


def extract_sources(response: ModelResponse) -> List[Source]:
    """Web citations from grounding metadata, in the order the service returned them."""
    sources = []
    for chunk in response.grounding_chunks:
        web = chunk.web
        if web is None or not web.uri:
            continue
        sources.append(Source(title=web.title or web.uri, uri=web.uri))
    return sources
