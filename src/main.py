"""Entry point — wires Config → TranscriptionOrchestrator and transcribes files from argv."""
import asyncio
import logging
import sys

from rich.logging import RichHandler

from src.config import Config
from src.constants import (
    CMD_STATUS,
    MSG_NO_TRANSCRIPT,
    MSG_RESULT_LINE,
    MSG_STATUS_HEADER,
    MSG_STATUS_LINE,
    MSG_USAGE,
)
from src.transcription.orchestrator import TranscriptionOrchestrator
from src.transcription.outcome import Success, TranscriptionOutcome


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def format_status(providers: list[tuple[str, bool]]) -> str:
    lines = [MSG_STATUS_HEADER]
    lines += list(map(
        lambda p: MSG_STATUS_LINE % (p[0], "enabled" if p[1] else "disabled"),
        providers,
    ))
    return "\n".join(lines)


def format_result(path: str, outcome: TranscriptionOutcome) -> str:
    match outcome:
        case Success(text=text):
            return MSG_RESULT_LINE % (path, text)
        case _:
            return MSG_RESULT_LINE % (path, MSG_NO_TRANSCRIPT)


async def transcribe_all(
    orchestrator: TranscriptionOrchestrator, config: Config, paths: list[str]
) -> list[TranscriptionOutcome]:
    """Each file is an independent invocation, so they run concurrently."""
    return list(await asyncio.gather(
        *(orchestrator.transcribe(p, config.credentials) for p in paths)
    ))


def run(argv: list[str]) -> int:
    config = Config.from_env()
    _setup_logging(config.log_level)
    orchestrator = TranscriptionOrchestrator.from_config(config)

    match argv:
        case []:
            print(MSG_USAGE, file=sys.stderr)
            return 2
        case [flag] if flag == CMD_STATUS:
            print(format_status(orchestrator.describe(config.credentials)))
            return 0
        case paths:
            outcomes = asyncio.run(transcribe_all(orchestrator, config, paths))
            list(map(print, map(format_result, paths, outcomes)))
            return 0 if all(isinstance(o, Success) for o in outcomes) else 1


def main() -> None:
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
