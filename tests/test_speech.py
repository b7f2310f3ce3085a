import base64
import json

import httpx
import pytest

from chikitsamitra.services.speech_service import (
    SpeechToTextService,
    SpeechUnavailableError,
    TextToSpeechService,
)


def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


async def test_tts_without_key_is_a_noop_with_one_notice(caplog):
    tts = TextToSpeechService(None)

    with caplog.at_level("WARNING", logger="speech"):
        assert await tts.synthesize("hello") is None
        assert await tts.synthesize("hello again") is None

    assert not tts.available
    assert len([r for r in caplog.records if "not configured" in r.getMessage()]) == 1


async def test_tts_returns_base64_audio():
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, content=b"ID3-audio")

    tts = TextToSpeechService("key-123", model="aura-asteria-en", client=mock_client(handler))
    audio = await tts.synthesize("Stay hydrated")

    assert base64.b64decode(audio) == b"ID3-audio"
    assert requests[0].url.path == "/v1/speak"
    assert requests[0].url.params["model"] == "aura-asteria-en"
    assert requests[0].headers["authorization"] == "Token key-123"
    assert json.loads(requests[0].content) == {"text": "Stay hydrated"}


async def test_tts_failure_returns_none():
    tts = TextToSpeechService("key", client=mock_client(lambda request: httpx.Response(401, text="bad key")))
    assert await tts.synthesize("hello") is None


async def test_tts_skips_blank_text():
    tts = TextToSpeechService("key", client=mock_client(lambda request: httpx.Response(500)))
    assert await tts.synthesize("   ") is None


async def test_stt_without_key_raises_unavailable():
    stt = SpeechToTextService(None)

    with pytest.raises(SpeechUnavailableError) as exc_info:
        await stt.transcribe(b"audio")

    assert exc_info.value.status_code == 503
    assert exc_info.value.detail == "Speech recognition not supported."


async def test_stt_returns_first_transcript():
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={
            "results": {"channels": [{"alternatives": [{"transcript": " I have a fever ", "confidence": 0.98}]}]}
        })

    stt = SpeechToTextService("key", language="en-US", client=mock_client(handler))

    assert await stt.transcribe(b"\x00\x01", "audio/wav") == "I have a fever"
    assert requests[0].url.path == "/v1/listen"
    assert requests[0].url.params["language"] == "en-US"
    assert requests[0].headers["content-type"] == "audio/wav"
    assert requests[0].content == b"\x00\x01"


@pytest.mark.parametrize("response", [
    {"status_code": 500, "text": "down"},
    {"status_code": 200, "json": {"results": {"channels": []}}},
])
async def test_stt_failures_return_empty(response):
    stt = SpeechToTextService("key", client=mock_client(lambda request: httpx.Response(**response)))
    assert await stt.transcribe(b"audio") == ""
