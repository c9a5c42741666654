"""TranscriptionOrchestrator — tries providers in priority order until one transcribes."""
import asyncio
import logging
from pathlib import Path

from src.config import Config, Credentials
from src.constants import (
    MSG_ALL_FAILED,
    MSG_AUDIO_UNREADABLE,
    MSG_FALLING_BACK,
    MSG_NO_CREDENTIALS,
    MSG_PROVIDER_CRASHED,
    MSG_PROVIDER_FAILED,
    MSG_PROVIDER_OK,
    MSG_TRYING_PROVIDER,
)
from src.transcription.client import ProviderAdapter
from src.transcription.openrouter import OpenRouterTranscriptionAdapter
from src.transcription.outcome import (
    UNAVAILABLE,
    AdapterResult,
    AttemptRecord,
    AttemptStatus,
    Failure,
    Success,
    TranscriptionOutcome,
    summarize,
)
from src.transcription.whisper import (
    GROQ_WHISPER,
    OPENAI_WHISPER,
    WhisperTranscriptionAdapter,
)

logger = logging.getLogger(__name__)

# A stage holds alternatives; only the first one with a credential is tried.
Stage = tuple[ProviderAdapter, ...]
Chain = tuple[Stage, ...]


def default_chain(config: Config) -> Chain:
    return (
        (OpenRouterTranscriptionAdapter(app_url=config.app_url, app_title=config.app_title),),
        (
            WhisperTranscriptionAdapter(
                GROQ_WHISPER, language=config.language, timeout=config.whisper_timeout
            ),
            WhisperTranscriptionAdapter(
                OPENAI_WHISPER, language=config.language, timeout=config.whisper_timeout
            ),
        ),
    )


def _select(
    stage: Stage, credentials: Credentials
) -> tuple[tuple[ProviderAdapter, str] | None, list[AttemptRecord]]:
    """Pick the first credentialed adapter in a stage; record why the others were passed over."""
    chosen: tuple[ProviderAdapter, str] | None = None
    records: list[AttemptRecord] = []
    for adapter in stage:
        key = adapter.api_key(credentials)
        match (key, chosen):
            case (None, _):
                records.append(AttemptRecord(adapter.name, AttemptStatus.SKIPPED_NO_CREDENTIAL))
            case (_, None):
                chosen = (adapter, key)
            case _:
                records.append(AttemptRecord(adapter.name, AttemptStatus.NOT_ATTEMPTED))
    return chosen, records


class TranscriptionOrchestrator:
    """Runs the fallback chain for one audio file at a time. Holds no per-call state."""

    def __init__(self, chain: Chain) -> None:
        self._chain = chain

    @classmethod
    def from_config(cls, config: Config) -> "TranscriptionOrchestrator":
        return cls(default_chain(config))

    def describe(self, credentials: Credentials) -> list[tuple[str, bool]]:
        """(provider, enabled) pairs in fallback order."""
        return [
            (adapter.name, adapter.api_key(credentials) is not None)
            for stage in self._chain
            for adapter in stage
        ]

    async def transcribe(
        self, audio_path: str | Path, credentials: Credentials
    ) -> TranscriptionOutcome:
        if credentials.is_empty():
            logger.warning(MSG_NO_CREDENTIALS)
            return UNAVAILABLE

        path = Path(audio_path)
        records: list[AttemptRecord] = []
        for index, stage in enumerate(self._chain):
            chosen, passed_over = _select(stage, credentials)
            records.extend(passed_over)
            match chosen:
                case None:
                    continue
                case (adapter, key):
                    result = await self._attempt(adapter, key, path)

            match result:
                case Success(text=text):
                    logger.info(MSG_PROVIDER_OK, adapter.name, text)
                    records.append(AttemptRecord(adapter.name, AttemptStatus.SUCCEEDED))
                    records.extend(
                        AttemptRecord(a.name, AttemptStatus.NOT_ATTEMPTED)
                        for later in self._chain[index + 1:]
                        for a in later
                    )
                    logger.debug(summarize(records))
                    return result
                case Failure(reason=reason):
                    logger.warning(MSG_PROVIDER_FAILED, adapter.name, reason)
                    logger.info(MSG_FALLING_BACK)
                    records.append(AttemptRecord(adapter.name, AttemptStatus.FAILED, reason))

        logger.warning(MSG_ALL_FAILED, summarize(records))
        return UNAVAILABLE

    async def _attempt(self, adapter: ProviderAdapter, api_key: str, path: Path) -> AdapterResult:
        logger.info(MSG_TRYING_PROVIDER, adapter.name, adapter.model)
        try:
            audio = await asyncio.to_thread(path.read_bytes)
        except OSError as exc:
            return Failure(MSG_AUDIO_UNREADABLE % exc)
        try:
            return await adapter.send(audio, api_key)
        except Exception as exc:
            logger.exception(MSG_PROVIDER_CRASHED, adapter.name)
            return Failure(f"{type(exc).__name__}: {exc}")
