import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Load environment variables at the very beginning
load_dotenv()

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

from veritas.api import actions, chat, claims, forensics, offers, system  # noqa: E402
from veritas.config import settings  # noqa: E402
from veritas.core.action_guard import ActionGuardRegistry  # noqa: E402
from veritas.core.errors import ActionBusyError, AnalysisFailedError, InputError  # noqa: E402
from veritas.integrations.gemini.client import GeminiModelService, create_client  # noqa: E402


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    app.state.guards = ActionGuardRegistry()

    # The Gemini client is process-wide: built once here and injected into routes.
    try:
        app.state.model_service = GeminiModelService(create_client())
        logger.info("[STARTUP] Gemini model service initialized")
    except Exception as e:
        logger.error(f"[STARTUP] Failed to initialize Gemini client: {e}")
        # The app still starts; analysis routes answer 503 until the key is fixed.
        app.state.model_service = None

    yield
    logger.info("[SHUTDOWN] Veritas API stopped")


app = FastAPI(title="Veritas Digital Integrity API", lifespan=lifespan)


@app.exception_handler(InputError)
async def input_error_handler(request: Request, exc: InputError):
    logger.info(f"[ERROR HANDLER] Input rejected on {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(AnalysisFailedError)
async def analysis_failed_handler(request: Request, exc: AnalysisFailedError):
    # The underlying kind is already logged by the orchestrator; clients only see the notice.
    return JSONResponse(status_code=502, content={"detail": settings.analysis_failed_message})


@app.exception_handler(ActionBusyError)
async def action_busy_handler(request: Request, exc: ActionBusyError):
    return JSONResponse(
        status_code=409,
        content={"detail": {"code": "ACTION_IN_PROGRESS", "message": str(exc)}},
    )


# ---- CORS ----
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(system.router)
app.include_router(forensics.router)
app.include_router(offers.router)
app.include_router(claims.router)
app.include_router(chat.router)
app.include_router(actions.router)


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", "8000"))
    uvicorn.run("veritas.main:app", host="0.0.0.0", port=port, log_level="info")
