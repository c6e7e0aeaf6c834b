"""
Shared pytest fixtures for all test modules.

The Gemini client is built during the FastAPI lifespan; a non-empty stub key
prevents the SDK from raising before our overrides are in place. Real API
calls never happen in tests; the model service is always a MockModelService.
"""

import io
import os

os.environ.setdefault("GEMINI_API_KEY", "stub-key-for-tests")

import pillow_heif
import pytest
from fastapi.testclient import TestClient
from PIL import Image

from tests.mocks.model_service_mock import MockModelService

from veritas.core.dependencies import get_model_service  # noqa: E402
from veritas.main import app  # noqa: E402


# ---------------------------------------------------------------------------
# Core infrastructure fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_service():
    """A service with nothing scripted: any model call raises ServiceError."""
    return MockModelService()


@pytest.fixture
def make_client():
    """
    Factory for a TestClient whose model service is the given mock.

    The lifespan runs for real (guards registry, Gemini client construction),
    then the dependency override replaces the service for every route.
    """
    clients = []

    def _make(service):
        app.dependency_overrides[get_model_service] = lambda: service
        c = TestClient(app, raise_server_exceptions=False)
        c.__enter__()
        clients.append(c)
        return c

    yield _make

    for c in clients:
        c.__exit__(None, None, None)
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client, mock_service):
    return make_client(mock_service)


# ---------------------------------------------------------------------------
# Shared test-data helpers
# ---------------------------------------------------------------------------


def make_tiny_jpeg() -> bytes:
    """Create a minimal 10×10 JPEG in memory, fast and valid."""
    buf = io.BytesIO()
    Image.new("RGB", (10, 10), color=(128, 128, 128)).save(buf, format="JPEG")
    return buf.getvalue()


def make_tiny_png() -> bytes:
    buf = io.BytesIO()
    Image.new("RGBA", (8, 6), color=(10, 200, 30, 255)).save(buf, format="PNG")
    return buf.getvalue()


def make_tiny_heic() -> bytes:
    """A 16×16 HEIC still, as phones upload them."""
    buf = io.BytesIO()
    heif_file = pillow_heif.from_pillow(Image.new("RGB", (16, 16), color=(200, 80, 40)))
    heif_file.save(buf, quality=90)
    return buf.getvalue()


FORENSICS_AI = {
    "percentAI": 82,
    "verdict": "HIGHLY LIKELY AI GENERATED",
    "details": "Fingers merge into the cup handle; skin lacks pore texture.",
}

OFFER_SCAM = {
    "verdict": "POTENTIAL_SCAM",
    "evidence": ["Company domain registered last week"],
    "redFlags": ["Upfront equipment fee", "Interview over chat only"],
    "companyStatus": "No registered business found under this name",
}

CLAIM_FAKE = {
    "verdict": "FAKE",
    "correction": "The Eiffel Tower is standing; no demolition has been announced.",
}
