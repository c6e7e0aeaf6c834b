"""
Service status and crawler routes.

/health reports whether the Gemini model service came up in the lifespan;
when it did not, every analysis route answers 503 until the key is fixed.
"""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["System"])


@router.get("/health")
async def health(request: Request):
    model_ready = getattr(request.app.state, "model_service", None) is not None
    return {
        "status": "healthy" if model_ready else "degraded",
        "modelService": "ready" if model_ready else "unavailable",
    }


@router.get("/robots.txt", response_class=PlainTextResponse)
def robots():
    # API only, nothing to index
    return "User-agent: *\nDisallow: /"
