"""WhisperTranscriptionAdapter — one adapter for every Whisper-compatible endpoint."""
import io
from dataclasses import dataclass

from openai import AsyncOpenAI, OpenAIError

from src.constants import (
    DEFAULT_LANGUAGE,
    DEFAULT_WHISPER_TIMEOUT,
    GROQ_BASE_URL,
    GROQ_NAME,
    GROQ_WHISPER_MODEL,
    MSG_EMPTY_CONTENT,
    OPENAI_BASE_URL,
    OPENAI_NAME,
    VOICE_FILENAME,
    WHISPER_MODEL,
    WHISPER_RESPONSE_FORMAT,
)
from src.transcription.client import NO_ACCOUNT_HEADERS, ProviderAdapter
from src.transcription.outcome import AdapterResult, Failure, Success


@dataclass(frozen=True)
class WhisperVariant:
    name: str
    base_url: str
    model: str
    credential_field: str


GROQ_WHISPER = WhisperVariant(
    name=GROQ_NAME,
    base_url=GROQ_BASE_URL,
    model=GROQ_WHISPER_MODEL,
    credential_field="groq_api_key",
)
OPENAI_WHISPER = WhisperVariant(
    name=OPENAI_NAME,
    base_url=OPENAI_BASE_URL,
    model=WHISPER_MODEL,
    credential_field="openai_api_key",
)


class WhisperTranscriptionAdapter(ProviderAdapter):

    def __init__(
        self,
        variant: WhisperVariant,
        language: str = DEFAULT_LANGUAGE,
        timeout: float = float(DEFAULT_WHISPER_TIMEOUT),
    ) -> None:
        self._variant = variant
        self._language = language
        self._timeout = timeout
        self.name = variant.name
        self.model = variant.model
        self.credential_field = variant.credential_field

    async def send(self, audio: bytes, api_key: str) -> AdapterResult:
        client = AsyncOpenAI(
            api_key=api_key,
            base_url=self._variant.base_url,
            default_headers=NO_ACCOUNT_HEADERS,
            max_retries=0,
        )
        audio_file = io.BytesIO(audio)
        audio_file.name = VOICE_FILENAME
        try:
            response = await client.audio.transcriptions.create(
                model=self.model,
                file=audio_file,
                language=self._language,
                response_format=WHISPER_RESPONSE_FORMAT,
                timeout=self._timeout,
            )
        except OpenAIError as exc:
            return Failure(f"{type(exc).__name__}: {exc}")
        finally:
            await client.close()

        match (getattr(response, "text", None) or "").strip():
            case "":
                return Failure(MSG_EMPTY_CONTENT)
            case text:
                return Success(text)
