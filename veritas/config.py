"""
Central application configuration.

Every tunable value lives here as a typed, documented field.
Any field can be overridden at runtime via an environment variable of the
same name (case-insensitive), e.g.:

    OFFER_DEEP_THINKING_BUDGET=16384 uvicorn veritas.main:app
    export GEMINI_DEEP_HTTP_TIMEOUT_MS=900000

A `.env` file at the project root is loaded automatically.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,   # GEMINI_API_KEY == gemini_api_key
        extra="ignore",         # silently drop unknown env vars
    )

    # ------------------------------------------------------------------ #
    # Gemini Client                                                       #
    # ------------------------------------------------------------------ #
    gemini_api_key: str = Field(
        "", description="Service credential, read once at startup"
    )
    gemini_http_timeout_ms: int = Field(
        60_000, description="Default HTTP timeout for a model call (ms)"
    )
    gemini_deep_http_timeout_ms: Optional[int] = Field(
        600_000, description="Timeout for reasoning-budget calls (ms); None = transport default"
    )

    # ------------------------------------------------------------------ #
    # Model selection                                                     #
    # ------------------------------------------------------------------ #
    forensics_model: str = Field(
        "gemini-3-pro-preview", description="Vision model for frame/image forensics"
    )
    offer_fast_model: str = Field(
        "gemini-2.5-flash", description="Grounded model for the fast offer check"
    )
    offer_deep_model: str = Field(
        "gemini-3-pro-preview", description="Reasoning model for the deep offer check"
    )
    claim_model: str = Field(
        "gemini-2.5-flash", description="Grounded model for claim verification"
    )
    formatter_model: str = Field(
        "gemini-2.5-flash-lite", description="Cheap model that re-emits free text as JSON"
    )
    chat_model: str = Field(
        "gemini-3-pro-preview", description="Conversational assistant model"
    )

    # ------------------------------------------------------------------ #
    # Reasoning                                                           #
    # ------------------------------------------------------------------ #
    offer_deep_thinking_budget: int = Field(
        32_768, description="Thinking tokens granted to the deep offer check"
    )

    # ------------------------------------------------------------------ #
    # Media Encoding                                                      #
    # ------------------------------------------------------------------ #
    frame_jpeg_quality: int = Field(
        92, description="Fixed JPEG quality for captured video frames"
    )
    frame_ready_timeout_sec: float = Field(
        10.0, description="Max wait for a decodable frame before giving up"
    )
    pil_max_image_pixels: int = Field(
        50_000_000, description="PIL decompression-bomb guard (pixels)"
    )

    # ------------------------------------------------------------------ #
    # File Size Limits                                                    #
    # ------------------------------------------------------------------ #
    max_image_upload_mb: int = Field(
        20, description="Max MB for image uploads"
    )
    max_video_upload_mb: int = Field(
        200, description="Max MB for video uploads"
    )

    # ------------------------------------------------------------------ #
    # Action Guards                                                       #
    # ------------------------------------------------------------------ #
    action_guard_memory_limit: int = Field(
        1000, description="Max idle guards kept before the registry is pruned"
    )

    # ------------------------------------------------------------------ #
    # Conversation & user-facing text                                     #
    # ------------------------------------------------------------------ #
    chat_persona: str = Field(
        "You are Veritas AI, a helpful digital integrity assistant. "
        "Answer questions about deepfakes, scams, and misinformation.",
        description="System instruction for the assistant",
    )
    chat_fallback_message: str = Field(
        "Sorry, I encountered an error. Please try again.",
        description="Reply shown when the assistant call fails",
    )
    analysis_failed_message: str = Field(
        "Analysis failed. Please try again.",
        description="Single user-facing notice for any failed analysis",
    )

    # ------------------------------------------------------------------ #
    # Derived byte-level properties (computed from MB fields)             #
    # ------------------------------------------------------------------ #
    @property
    def max_image_upload_bytes(self) -> int:
        return self.max_image_upload_mb * 1024 * 1024

    @property
    def max_video_upload_bytes(self) -> int:
        return self.max_video_upload_mb * 1024 * 1024


# Single shared instance, import this everywhere.
settings = Settings()
