"""OpenRouterTranscriptionAdapter — multimodal chat model asked to transcribe audio verbatim."""
import base64

from openai import AsyncOpenAI, OpenAIError

from src.constants import (
    AUDIO_FORMAT,
    DEFAULT_APP_TITLE,
    DEFAULT_APP_URL,
    MSG_EMPTY_CONTENT,
    MSG_NO_CHOICES,
    OPENROUTER_BASE_URL,
    OPENROUTER_MODEL,
    OPENROUTER_NAME,
    OPENROUTER_REFERER_HEADER,
    OPENROUTER_TITLE_HEADER,
    TRANSCRIBE_PROMPT,
)
from src.transcription.client import NO_ACCOUNT_HEADERS, ProviderAdapter
from src.transcription.outcome import AdapterResult, Failure, Success


def build_messages(audio: bytes) -> list[dict]:
    """One user turn: the instruction, then the base64 audio part."""
    audio_data = base64.standard_b64encode(audio).decode()
    return [
        {
            "role": "user",
            "content": [
                {"type": "text", "text": TRANSCRIBE_PROMPT},
                {
                    "type": "input_audio",
                    "input_audio": {"data": audio_data, "format": AUDIO_FORMAT},
                },
            ],
        }
    ]


class OpenRouterTranscriptionAdapter(ProviderAdapter):

    name = OPENROUTER_NAME
    model = OPENROUTER_MODEL
    credential_field = "openrouter_api_key"

    def __init__(self, app_url: str = DEFAULT_APP_URL, app_title: str = DEFAULT_APP_TITLE) -> None:
        self._headers = {
            OPENROUTER_REFERER_HEADER: app_url,
            OPENROUTER_TITLE_HEADER: app_title,
            **NO_ACCOUNT_HEADERS,
        }

    async def send(self, audio: bytes, api_key: str) -> AdapterResult:
        client = AsyncOpenAI(
            api_key=api_key,
            base_url=OPENROUTER_BASE_URL,
            default_headers=self._headers,
            max_retries=0,
        )
        try:
            response = await client.chat.completions.create(
                model=self.model,
                messages=build_messages(audio),
            )
        except OpenAIError as exc:
            return Failure(f"{type(exc).__name__}: {exc}")
        finally:
            await client.close()

        match getattr(response, "choices", None):
            case [first, *_]:
                content = first.message.content if first.message else None
            case _:
                return Failure(MSG_NO_CHOICES)

        match (content or "").strip():
            case "":
                return Failure(MSG_EMPTY_CONTENT)
            case text:
                return Success(text)
