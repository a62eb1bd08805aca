"""Exception taxonomy — every failed operation raises one of these."""


class AssemblyAIError(Exception):
    """Base class for all client failures."""


class TransportError(AssemblyAIError):
    """The request never produced a response (DNS, connect, read timeout...)."""


class HTTPStatusError(AssemblyAIError):
    """Non-2xx response. The message is the raw response body."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(body)
        self.status_code = status_code
        self.body = body


class DecodeError(AssemblyAIError):
    """Malformed JSON or a payload that does not fit the expected shape."""


class TranscriptionFailedError(AssemblyAIError):
    """The service reported status "error" for the job."""


class MissingIdError(AssemblyAIError):
    """A submit response came back without a job id."""


class PollTimeoutError(AssemblyAIError):
    def __init__(self, message: str, timeout: float) -> None:
        super().__init__(message)
        self.timeout = timeout
