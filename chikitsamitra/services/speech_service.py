import base64
import logging
from typing import Optional

import httpx
from fastapi import HTTPException, status

from chikitsamitra.config.settings import settings

logger = logging.getLogger("speech")

DEEPGRAM_BASE_URL = "https://api.deepgram.com"
RECOGNITION_UNSUPPORTED = "Speech recognition not supported."
SPEECH_MIMETYPE = "audio/mpeg"


class SpeechUnavailableError(HTTPException):
    def __init__(self, detail: str = RECOGNITION_UNSUPPORTED):
        super().__init__(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=detail)


class _DeepgramService:
    """Shared plumbing: key detection, one-time notice, HTTP client."""

    capability = "speech"

    def __init__(
        self,
        api_key: Optional[str],
        language: str = "en-US",
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key
        self.language = language
        self.timeout = timeout
        self._client = client
        self._notified = False

    @property
    def available(self) -> bool:
        return bool(self.api_key)

    def notify_unavailable(self) -> bool:
        """Log the missing capability once. True the first time."""
        if self._notified:
            return False
        self._notified = True
        logger.warning(f"{self.capability} -> DEEPGRAM_API_KEY not configured, feature disabled")
        return True

    def _headers(self, content_type: str) -> dict:
        return {
            "Authorization": f"Token {self.api_key}",
            "Content-Type": content_type,
        }

    async def _post(self, path: str, **kwargs) -> httpx.Response:
        url = f"{DEEPGRAM_BASE_URL}{path}"
        if self._client is not None:
            return await self._client.post(url, **kwargs)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.post(url, **kwargs)


class TextToSpeechService(_DeepgramService):

    capability = "TTS"

    def __init__(self, api_key: Optional[str], model: str = "aura-asteria-en", **kwargs):
        super().__init__(api_key, **kwargs)
        self.model = model

    async def synthesize(self, text: str) -> Optional[str]:
        """
        Speak text with the configured voice.

        Returns base64 encoded MP3 audio, or None when the text is blank,
        the capability is missing or the request fails.
        """
        if not text or not text.strip():
            return None
        if not self.available:
            self.notify_unavailable()
            return None

        try:
            response = await self._post(
                "/v1/speak",
                params={"model": self.model},
                headers=self._headers("application/json"),
                json={"text": text},
            )
        except httpx.HTTPError as e:
            logger.error(f"TTS -> Error: {e}")
            return None

        if response.status_code != 200:
            logger.error(f"TTS -> HTTP {response.status_code}: {response.text[:200]}")
            return None

        audio_b64 = base64.b64encode(response.content).decode("utf-8")
        logger.info(f"TTS -> Success ({len(response.content)} bytes)")
        return audio_b64


class SpeechToTextService(_DeepgramService):

    capability = "STT"

    def __init__(self, api_key: Optional[str], model: str = "nova-2", **kwargs):
        super().__init__(api_key, **kwargs)
        self.model = model

    async def transcribe(self, audio: bytes, content_type: str = "audio/webm") -> str:
        """
        One-shot transcription of a recorded clip.

        Raises SpeechUnavailableError when no key is configured; returns ""
        when the request fails or nothing was heard.
        """
        if not self.available:
            self.notify_unavailable()
            raise SpeechUnavailableError()
        if not audio:
            return ""

        try:
            response = await self._post(
                "/v1/listen",
                params={"model": self.model, "language": self.language, "smart_format": "true"},
                headers=self._headers(content_type or "application/octet-stream"),
                content=audio,
            )
        except httpx.HTTPError as e:
            logger.error(f"STT -> Error: {e}")
            return ""

        if response.status_code != 200:
            logger.error(f"STT -> HTTP {response.status_code}: {response.text[:200]}")
            return ""

        try:
            payload = response.json()
            transcript = payload["results"]["channels"][0]["alternatives"][0]["transcript"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error(f"STT -> Unexpected response shape: {e}")
            return ""

        logger.info(f"STT -> '{transcript[:50]}'")
        return transcript.strip()


tts_service = TextToSpeechService(
    settings.deepgram_api_key,
    model=settings.tts_model,
    language=settings.speech_language,
)
stt_service = SpeechToTextService(
    settings.deepgram_api_key,
    model=settings.stt_model,
    language=settings.speech_language,
)


def get_tts_service() -> TextToSpeechService:
    return tts_service


def get_stt_service() -> SpeechToTextService:
    return stt_service
