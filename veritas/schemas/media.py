import base64

from pydantic import BaseModel, ConfigDict, Field


class MediaPayload(BaseModel):
    """Transport-safe media: base64 text plus the content type it encodes."""

    model_config = ConfigDict(frozen=True)

    data: str = Field(description="Standard base64 of the media bytes")
    content_type: str = Field(description="MIME type of the decoded bytes, e.g. image/jpeg")

    @classmethod
    def from_bytes(cls, raw: bytes, content_type: str) -> "MediaPayload":
        return cls(data=base64.b64encode(raw).decode("ascii"), content_type=content_type)

    def to_bytes(self) -> bytes:
        return base64.b64decode(self.data)
