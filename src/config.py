from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from src.constants import (
    DEFAULT_APP_TITLE,
    DEFAULT_APP_URL,
    DEFAULT_LANGUAGE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_WHISPER_TIMEOUT,
)


def _key(name: str) -> Optional[str]:
    """Blank or whitespace-only keys count as unset."""
    return (os.getenv(name) or "").strip() or None


@dataclass(frozen=True)
class Credentials:
    """Provider API keys. A key that is None is absent."""

    openrouter_api_key: Optional[str] = None
    groq_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None

    def is_empty(self) -> bool:
        return not any((self.openrouter_api_key, self.groq_api_key, self.openai_api_key))


@dataclass(frozen=True)
class Config:
    log_level: str
    credentials: Credentials
    app_url: str
    app_title: str
    language: str
    whisper_timeout: int = int(DEFAULT_WHISPER_TIMEOUT)

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
        openrouter_api_key = _key("OPENROUTER_API_KEY")
        groq_api_key = _key("GROQ_API_KEY")
        openai_api_key = _key("OPENAI_API_KEY")
        app_url = os.getenv("STT_APP_URL") or DEFAULT_APP_URL
        app_title = os.getenv("STT_APP_TITLE") or DEFAULT_APP_TITLE
        language = os.getenv("STT_LANGUAGE") or DEFAULT_LANGUAGE
        raw_timeout = os.getenv("WHISPER_TIMEOUT") or DEFAULT_WHISPER_TIMEOUT

        return cls._validate(
            log_level=log_level,
            credentials=Credentials(
                openrouter_api_key=openrouter_api_key,
                groq_api_key=groq_api_key,
                openai_api_key=openai_api_key,
            ),
            app_url=app_url,
            app_title=app_title,
            language=language,
            raw_timeout=raw_timeout,
        )

    @staticmethod
    def _validate(
        log_level: str,
        credentials: Credentials,
        app_url: str,
        app_title: str,
        language: str,
        raw_timeout: str,
    ) -> "Config":
        try:
            whisper_timeout = int(raw_timeout)
        except ValueError:
            raise ValueError(f"WHISPER_TIMEOUT must be an integer, got {raw_timeout!r}")

        match whisper_timeout:
            case n if n <= 0:
                raise ValueError("WHISPER_TIMEOUT must be a positive number of seconds")
            case _:
                pass

        return Config(
            log_level=log_level,
            credentials=credentials,
            app_url=app_url,
            app_title=app_title,
            language=language,
            whisper_timeout=whisper_timeout,
        )
