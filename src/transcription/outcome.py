"""Result types shared by the orchestrator and the provider adapters."""
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional


@dataclass(frozen=True)
class Success:
    text: str

    def __post_init__(self) -> None:
        match self.text.strip():
            case "":
                raise ValueError("Success requires a non-empty transcript")
            case _:
                pass


@dataclass(frozen=True)
class Failure:
    reason: str


@dataclass(frozen=True)
class Unavailable:
    """No transcript could be produced. Not an error."""


UNAVAILABLE = Unavailable()

TranscriptionOutcome = Success | Unavailable
AdapterResult = Success | Failure


class AttemptStatus(Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED_NO_CREDENTIAL = "skipped-no-credential"
    NOT_ATTEMPTED = "not-attempted"


class AttemptRecord(NamedTuple):
    provider: str
    status: AttemptStatus
    reason: Optional[str] = None


def summarize(records: list[AttemptRecord]) -> str:
    """Render attempt records as 'name=status(reason), …' for log lines."""
    return ", ".join(
        map(
            lambda r: f"{r.provider}={r.status.value}" + (f"({r.reason})" if r.reason else ""),
            records,
        )
    )
