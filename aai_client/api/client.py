"""AssemblyAIClient — abstract base for the three service operations."""
from abc import ABC, abstractmethod
from typing import Optional

from aai_client.api.models import PollSettings


class AssemblyAIClient(ABC):
    @abstractmethod
    def upload_local_file(self, content: bytes) -> str:
        """Upload raw audio bytes and return the upload_url. Raises on failure."""
        ...

    @abstractmethod
    def transcript(self, audio_url: str) -> str:
        """Create a transcription job and return its id. Raises on failure."""
        ...

    @abstractmethod
    def poll_transcript(
        self, transcript_id: str, poll_settings: Optional[PollSettings] = None
    ) -> str:
        """Block until the job completes and return its text. Raises on failure."""
        ...
