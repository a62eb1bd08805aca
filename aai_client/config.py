from dataclasses import dataclass
import os
from dotenv import load_dotenv

from aai_client.api.models import PollSettings
from aai_client.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_POLL_FREQUENCY,
    DEFAULT_POLL_TIMEOUT,
)


@dataclass(frozen=True)
class Config:
    api_key: str
    base_url: str
    log_level: str
    http_timeout: float
    poll_frequency: float
    poll_timeout: float

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        api_key = os.getenv("ASSEMBLYAI_API_KEY")
        base_url = os.getenv("ASSEMBLYAI_BASE_URL") or DEFAULT_BASE_URL
        log_level = os.getenv("LOG_LEVEL", "INFO")
        http_timeout = os.getenv("ASSEMBLYAI_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT))
        poll_frequency = os.getenv("ASSEMBLYAI_POLL_FREQUENCY", str(DEFAULT_POLL_FREQUENCY))
        poll_timeout = os.getenv("ASSEMBLYAI_POLL_TIMEOUT", str(DEFAULT_POLL_TIMEOUT))

        return cls._validate(
            api_key=api_key,
            base_url=base_url,
            log_level=log_level,
            http_timeout=float(http_timeout),
            poll_frequency=float(poll_frequency),
            poll_timeout=float(poll_timeout),
        )

    @staticmethod
    def _validate(
        api_key: str | None,
        base_url: str,
        log_level: str,
        http_timeout: float,
        poll_frequency: float,
        poll_timeout: float,
    ) -> "Config":
        match api_key:
            case None | "":
                raise ValueError("ASSEMBLYAI_API_KEY must be set in .env")
            case _:
                pass

        match base_url:
            case str() as url if url.startswith(("http://", "https://")):
                pass
            case _:
                raise ValueError("ASSEMBLYAI_BASE_URL must include http/https scheme")

        return Config(
            api_key=api_key,
            base_url=base_url.rstrip("/"),
            log_level=log_level,
            http_timeout=http_timeout,
            poll_frequency=poll_frequency,
            poll_timeout=poll_timeout,
        )

    def poll_settings(self) -> PollSettings:
        return PollSettings(frequency=self.poll_frequency, timeout=self.poll_timeout)
