import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from chikitsamitra.config.knowledge_base_content import GREETING
from chikitsamitra.schemas.chat import ChatRequest, ChatResponse
from chikitsamitra.services.response_resolver import ResponseResolver, response_resolver
from chikitsamitra.services.speech_service import (
    SPEECH_MIMETYPE,
    SpeechToTextService,
    TextToSpeechService,
    get_stt_service,
    get_tts_service,
)
from chikitsamitra.utils.response import APIResponse

logger = logging.getLogger("chatbot")

router = APIRouter(prefix="/chat", tags=["Chatbot"])


def get_response_resolver() -> ResponseResolver:
    return response_resolver


async def _answer(reply: str, speak: bool, tts: TextToSpeechService, transcript: str = None) -> ChatResponse:
    audio = await tts.synthesize(reply) if speak else None
    return ChatResponse(
        reply=reply,
        transcript=transcript,
        audio=audio,
        audio_mimetype=SPEECH_MIMETYPE if audio else None
    )


@router.get("/greeting")
async def greeting(
    speak: bool = False,
    tts: TextToSpeechService = Depends(get_tts_service)
):
    """Opening line shown when the chat widget is opened"""
    return APIResponse.success(await _answer(GREETING, speak, tts))


@router.post("")
async def chat(
    request: ChatRequest,
    resolver: ResponseResolver = Depends(get_response_resolver),
    tts: TextToSpeechService = Depends(get_tts_service)
):
    """Answer a typed message from the knowledge table"""
    message = request.message.strip()
    if not message:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Message cannot be empty"
        )

    reply = resolver.resolve(message)
    return APIResponse.success(await _answer(reply, request.speak, tts))


@router.post("/voice")
async def chat_voice(
    audio: UploadFile = File(...),
    speak: bool = Form(False),
    resolver: ResponseResolver = Depends(get_response_resolver),
    stt: SpeechToTextService = Depends(get_stt_service),
    tts: TextToSpeechService = Depends(get_tts_service)
):
    """Transcribe one recorded clip and answer it like a typed message"""
    clip = await audio.read()
    transcript = await stt.transcribe(clip, audio.content_type)
    if not transcript:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No speech detected. Please try again."
        )

    logger.info(f"Voice message: '{transcript[:50]}'")
    reply = resolver.resolve(transcript)
    return APIResponse.success(await _answer(reply, speak, tts, transcript=transcript))
