"""HttpAssemblyAIClient — talks to the transcription service over httpx."""
import logging
import time
from collections.abc import Iterator
from typing import Optional

import httpx

from aai_client.api.client import AssemblyAIClient
from aai_client.api.decoder import decode_response
from aai_client.api.models import (
    PollSettings,
    TranscriptionStatus,
    TranscriptJob,
    TranscriptRequest,
    UploadResult,
)
from aai_client.constants import (
    CONTENT_TYPE_JSON,
    DEFAULT_HTTP_TIMEOUT,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    MSG_ERR_MISSING_ID,
    MSG_ERR_POLL_TIMEOUT,
    MSG_POLL_DONE,
    MSG_POLL_STATUS,
    MSG_POLLING,
    MSG_SUBMITTED,
    MSG_SUBMITTING,
    MSG_UPLOADED,
    MSG_UPLOADING,
    TRANSCRIPT_PATH,
    UPLOAD_CHUNK_SIZE,
    UPLOAD_PATH,
)
from aai_client.errors import (
    MissingIdError,
    PollTimeoutError,
    TranscriptionFailedError,
    TransportError,
)

logger = logging.getLogger(__name__)


def _chunks(content: bytes) -> Iterator[bytes]:
    for start in range(0, len(content), UPLOAD_CHUNK_SIZE):
        yield content[start:start + UPLOAD_CHUNK_SIZE]


class HttpAssemblyAIClient(AssemblyAIClient):
    """Blocking client for the upload / transcript / poll endpoints.

    base_url is the API root, e.g. "https://api.assemblyai.com/v2".
    token is sent verbatim in the ``authorization`` header.
    http_client lets the caller bring a pre-configured httpx.Client; when
    omitted one with a 15 second timeout is created and closed by close().
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(timeout=DEFAULT_HTTP_TIMEOUT)

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "HttpAssemblyAIClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ── AssemblyAIClient interface ───────────────────────────────────────────

    def upload_local_file(self, content: bytes) -> str:
        url = self._base_url + UPLOAD_PATH
        logger.info(MSG_UPLOADING, len(content), url)
        response = self._send(
            "POST",
            url,
            headers=self._headers(json_body=True),
            content=_chunks(content),
        )
        data = decode_response(response, UploadResult)
        logger.info(MSG_UPLOADED, data.upload_url)
        return data.upload_url

    def transcript(self, audio_url: str) -> str:
        logger.info(MSG_SUBMITTING, audio_url)
        response = self._send(
            "POST",
            self._base_url + TRANSCRIPT_PATH,
            headers=self._headers(json_body=True),
            json=TranscriptRequest(audio_url=audio_url).to_json(),
        )
        job = decode_response(response, TranscriptJob)
        if not job.id:
            raise MissingIdError(MSG_ERR_MISSING_ID)
        if job.status == TranscriptionStatus.ERROR:
            raise TranscriptionFailedError(job.error)
        logger.info(MSG_SUBMITTED, job.id, job.status)
        return job.id

    def poll_transcript(
        self, transcript_id: str, poll_settings: Optional[PollSettings] = None
    ) -> str:
        settings = poll_settings or PollSettings()
        url = f"{self._base_url}{TRANSCRIPT_PATH}/{transcript_id}"
        headers = self._headers(json_body=False)
        logger.info(MSG_POLLING, transcript_id, settings.frequency, settings.timeout)

        start = time.monotonic()
        deadline = start + settings.timeout
        while time.monotonic() < deadline:
            job = decode_response(self._send("GET", url, headers=headers), TranscriptJob)
            logger.debug(MSG_POLL_STATUS, transcript_id, job.status)
            match job.status:
                case TranscriptionStatus.ERROR:
                    raise TranscriptionFailedError(job.error)
                case TranscriptionStatus.COMPLETED:
                    logger.info(MSG_POLL_DONE, transcript_id, time.monotonic() - start)
                    return job.text
                case _:
                    time.sleep(settings.frequency)

        raise PollTimeoutError(MSG_ERR_POLL_TIMEOUT % settings.timeout, settings.timeout)

    # ── helpers ──────────────────────────────────────────────────────────────

    def _headers(self, *, json_body: bool) -> dict[str, str]:
        headers = {HEADER_AUTHORIZATION: self._token}
        if json_body:
            headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_JSON
        return headers

    def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            return self._http.request(method, url, **kwargs)
        except httpx.RequestError as exc:
            raise TransportError(str(exc)) from exc
