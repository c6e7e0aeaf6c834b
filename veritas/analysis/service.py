from typing import Protocol

from veritas.schemas.requests import ModelRequest, ModelResponse


class ModelService(Protocol):
    """The only network dependency of the core. Implementations raise ServiceError on failure."""

    async def generate(self, request: ModelRequest) -> ModelResponse: ...
