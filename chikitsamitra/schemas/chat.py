from pydantic import BaseModel, Field
from typing import Optional


class ChatRequest(BaseModel):
    message: str = Field(..., max_length=1000)
    speak: bool = False


class ChatResponse(BaseModel):
    reply: str
    transcript: Optional[str] = None
    audio: Optional[str] = Field(None, description="Base64 encoded speech for the reply")
    audio_mimetype: Optional[str] = None
