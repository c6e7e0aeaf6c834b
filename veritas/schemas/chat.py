from typing import List, Literal

from pydantic import BaseModel, ConfigDict


class ConversationTurn(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"]
    text: str


class ChatRequest(BaseModel):
    history: List[ConversationTurn] = []
    message: str = ""


class ChatResponse(BaseModel):
    reply: str
