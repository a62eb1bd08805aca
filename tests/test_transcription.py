import pytest
from unittest.mock import MagicMock

from aai_client.api.client import AssemblyAIClient
from aai_client.api.mock import new_mock
from aai_client.api.models import PollSettings
from aai_client.errors import HTTPStatusError, TranscriptionFailedError
from aai_client.transcription.assemblyai import AssemblyAITranscriptionClient
from aai_client.transcription.client import TranscriptionClient


def make_api(**values) -> MagicMock:
    api = MagicMock(spec=AssemblyAIClient)
    api.upload_local_file.return_value = values.get("upload_url", "https://cdn/upload/1")
    api.transcript.return_value = values.get("transcript_id", "job-1")
    api.poll_transcript.return_value = values.get("text", "hello from voice")
    return api


def test_assemblyai_client_implements_abc():
    assert issubclass(AssemblyAITranscriptionClient, TranscriptionClient)


def test_transcribe_chains_upload_submit_poll():
    api = make_api()
    settings = PollSettings(frequency=1, timeout=10)
    client = AssemblyAITranscriptionClient(api, settings)

    result = client.transcribe(b"fake-audio-data")

    assert result == "hello from voice"
    api.upload_local_file.assert_called_once_with(b"fake-audio-data")
    api.transcript.assert_called_once_with("https://cdn/upload/1")
    api.poll_transcript.assert_called_once_with("job-1", settings)


def test_transcribe_url_skips_upload():
    api = make_api()
    client = AssemblyAITranscriptionClient(api)

    client.transcribe_url("https://example.com/audio.mp3")

    api.upload_local_file.assert_not_called()
    api.transcript.assert_called_once_with("https://example.com/audio.mp3")
    api.poll_transcript.assert_called_once_with("job-1", None)


def test_transcribe_returns_stripped_text():
    client = AssemblyAITranscriptionClient(make_api(text="  hello  "))
    assert client.transcribe(b"audio") == "hello"


def test_transcribe_stops_at_first_failure():
    api = make_api()
    api.upload_local_file.side_effect = HTTPStatusError(413, "too large")
    client = AssemblyAITranscriptionClient(api)

    with pytest.raises(HTTPStatusError, match="too large"):
        client.transcribe(b"audio")
    api.transcript.assert_not_called()
    api.poll_transcript.assert_not_called()


def test_transcribe_works_with_mock_client():
    client = AssemblyAITranscriptionClient(
        new_mock(upload_url="u", transcript_id="t", poll_text="done")
    )
    assert client.transcribe(b"audio") == "done"


def test_transcribe_propagates_poll_failure_from_mock():
    client = AssemblyAITranscriptionClient(
        new_mock(upload_url="u", transcript_id="t", poll_error=TranscriptionFailedError("boom"))
    )
    with pytest.raises(TranscriptionFailedError, match="boom"):
        client.transcribe(b"audio")
