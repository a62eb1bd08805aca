"""All magic values live here — no inline literals anywhere else."""

# Service endpoints
DEFAULT_BASE_URL = "https://api.assemblyai.com/v2"
UPLOAD_PATH = "/upload"
TRANSCRIPT_PATH = "/transcript"

# HTTP transport
DEFAULT_HTTP_TIMEOUT: float = 15.0
HEADER_AUTHORIZATION = "authorization"
HEADER_CONTENT_TYPE = "Content-Type"
CONTENT_TYPE_JSON = "application/json"
# Upload bodies are streamed, which makes httpx send Transfer-Encoding: chunked.
UPLOAD_CHUNK_SIZE = 5_242_880

# Polling (seconds)
DEFAULT_POLL_FREQUENCY: float = 5.0
DEFAULT_POLL_TIMEOUT: float = 60.0

# Error messages
MSG_ERR_MISSING_ID = "response did not include an id"
MSG_ERR_POLL_TIMEOUT = "timeout, transcription not finished in %ss"
MSG_ERR_NOT_AN_OBJECT = "expected a JSON object, got %s"
MSG_ERR_FIELD_TYPE = "field %r: expected %s, got %s"
MSG_ERR_NEGATIVE_SETTING = "PollSettings.%s must not be negative, got %r"

# Log messages
MSG_UPLOADING = "Uploading %d bytes to %s"
MSG_UPLOADED = "Upload stored at %s"
MSG_SUBMITTING = "Submitting transcript for %s"
MSG_SUBMITTED = "Transcript %s submitted (%s)"
MSG_POLLING = "Polling transcript %s every %ss for up to %ss"
MSG_POLL_STATUS = "Transcript %s is %s"
MSG_POLL_DONE = "Transcript %s completed (%.1fs)"
MSG_TRANSCRIBE_START = "Transcribing %d bytes of audio"
MSG_TRANSCRIBE_FAILED = "Transcription failed: %s"
MSG_USAGE = "Usage: python -m aai_client.main <audio-file-or-url>"
