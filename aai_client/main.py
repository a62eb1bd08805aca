"""Entry point — wires Config → HttpAssemblyAIClient → AssemblyAITranscriptionClient."""
import logging
import sys
from pathlib import Path

import httpx
from rich.logging import RichHandler

from aai_client.api.http import HttpAssemblyAIClient
from aai_client.config import Config
from aai_client.constants import MSG_TRANSCRIBE_FAILED, MSG_USAGE
from aai_client.errors import AssemblyAIError
from aai_client.transcription.assemblyai import AssemblyAITranscriptionClient


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    match args:
        case [source]:
            pass
        case _:
            print(MSG_USAGE, file=sys.stderr)
            return 2

    config = Config.from_env()
    _setup_logging(config.log_level)
    logger = logging.getLogger(__name__)

    http_client = httpx.Client(timeout=config.http_timeout)
    with http_client, HttpAssemblyAIClient(config.base_url, config.api_key, http_client) as api:
        transcriber = AssemblyAITranscriptionClient(api, config.poll_settings())
        try:
            text = (
                transcriber.transcribe_url(source)
                if _is_url(source)
                else transcriber.transcribe(Path(source).read_bytes())
            )
        except AssemblyAIError as exc:
            logger.error(MSG_TRANSCRIBE_FAILED, exc)
            return 1

    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
