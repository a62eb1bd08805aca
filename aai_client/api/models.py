"""Request and response payloads exchanged with the transcription service."""
from dataclasses import dataclass
from enum import Enum

from aai_client.constants import (
    DEFAULT_POLL_FREQUENCY,
    DEFAULT_POLL_TIMEOUT,
    MSG_ERR_NEGATIVE_SETTING,
)


class TranscriptionStatus(str, Enum):
    QUEUED = "queued"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self in (TranscriptionStatus.COMPLETED, TranscriptionStatus.ERROR)


@dataclass(frozen=True)
class UploadResult:
    upload_url: str = ""


@dataclass(frozen=True)
class TranscriptJob:
    """One snapshot of a job as reported by the service.

    ``text`` is only meaningful once ``status`` is completed, ``error`` only
    when it is error.
    """

    id: str = ""
    status: str = ""
    text: str = ""
    error: str = ""


@dataclass(frozen=True)
class TranscriptRequest:
    audio_url: str

    def to_json(self) -> dict[str, str]:
        return {"audio_url": self.audio_url}


@dataclass(frozen=True)
class PollSettings:
    """How often to poll and how long to wait, both in seconds."""

    frequency: float = DEFAULT_POLL_FREQUENCY
    timeout: float = DEFAULT_POLL_TIMEOUT

    def __post_init__(self) -> None:
        for name in ("frequency", "timeout"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(MSG_ERR_NEGATIVE_SETTING % (name, value))
