"""AssemblyAITranscriptionClient — upload, submit and poll in one call."""
import logging
from typing import Optional

from aai_client.api.client import AssemblyAIClient
from aai_client.api.models import PollSettings
from aai_client.constants import MSG_TRANSCRIBE_START
from aai_client.transcription.client import TranscriptionClient

logger = logging.getLogger(__name__)


class AssemblyAITranscriptionClient(TranscriptionClient):

    def __init__(
        self, api: AssemblyAIClient, poll_settings: Optional[PollSettings] = None
    ) -> None:
        self._api = api
        self._poll_settings = poll_settings

    def transcribe(self, audio: bytes) -> str:
        logger.info(MSG_TRANSCRIBE_START, len(audio))
        upload_url = self._api.upload_local_file(audio)
        return self.transcribe_url(upload_url)

    def transcribe_url(self, audio_url: str) -> str:
        """Transcribe audio the service can already reach, skipping the upload."""
        transcript_id = self._api.transcript(audio_url)
        text = self._api.poll_transcript(transcript_id, self._poll_settings)
        return text.strip()
