"""AssemblyAIMock — stand-in client that never touches the network.

Each operation delegates to its own zero-argument callable, so tests can swap
one behaviour without touching the others:

    mock = new_mock(upload_url="https://cdn/x", poll_text="hello")
    mock.poll_transcript_mock = mock_function("", PollTimeoutError("late", 1.0))
"""
from dataclasses import dataclass
from typing import Callable, Optional

from aai_client.api.client import AssemblyAIClient
from aai_client.api.models import PollSettings

MockCall = Callable[[], str]


def mock_function(value: str, error: Optional[Exception] = None) -> MockCall:
    """Return a callable that raises ``error`` when given, else returns ``value``."""
    def _call() -> str:
        if error is not None:
            raise error
        return value

    return _call


@dataclass
class AssemblyAIMock(AssemblyAIClient):
    upload_local_file_mock: MockCall
    transcript_mock: MockCall
    poll_transcript_mock: MockCall

    def upload_local_file(self, content: bytes) -> str:
        return self.upload_local_file_mock()

    def transcript(self, audio_url: str) -> str:
        return self.transcript_mock()

    def poll_transcript(
        self, transcript_id: str, poll_settings: Optional[PollSettings] = None
    ) -> str:
        return self.poll_transcript_mock()


def new_mock(
    upload_url: str = "",
    upload_error: Optional[Exception] = None,
    transcript_id: str = "",
    transcript_error: Optional[Exception] = None,
    poll_text: str = "",
    poll_error: Optional[Exception] = None,
) -> AssemblyAIMock:
    return AssemblyAIMock(
        upload_local_file_mock=mock_function(upload_url, upload_error),
        transcript_mock=mock_function(transcript_id, transcript_error),
        poll_transcript_mock=mock_function(poll_text, poll_error),
    )
