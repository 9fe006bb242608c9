"""Run configuration, built once at the CLI boundary."""

from __future__ import annotations

from dataclasses import dataclass

from paddock.common.exceptions import ConfigError
from paddock.common.request_manager import DEFAULT_USER_AGENT

DEFAULT_OUTPUT = "participants.csv"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class ScrapeConfig:
    """Settings for one scrape run.

    Attributes:
        url: Championship page to scrape.
        output: Path of the main participants CSV.
        with_reverse_name: Also write a copy with reversed driver names.
        timeout: HTTP timeout in seconds; None disables it.
        user_agent: User-Agent header sent with the page request.
    """

    url: str
    output: str = DEFAULT_OUTPUT
    with_reverse_name: bool = False
    timeout: float | None = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        if not self.url or not self.url.strip():
            raise ConfigError("URL is required. Use --url flag.")
        if not self.output:
            raise ConfigError("Output path must not be empty.")
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigError(
                "Timeout must be positive.", {"timeout": self.timeout}
            )
