"""The scrape pipeline: fetch, parse, extract, write.

Data flows one way, URL to bytes to document to records to files. Every
failure raises a PaddockError subclass and ends the run; there is no
partial-success path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from paddock.common.checked_html import parse_document
from paddock.common.request_manager import SyncRequestManager
from paddock.config import ScrapeConfig
from paddock.extract import extract_participants
from paddock.names import reverse_driver_names, reversed_filename
from paddock.output import write_csv

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunResult:
    """Outcome of a completed run.

    Attributes:
        participant_count: Number of participant rows written.
        output: Path of the main CSV.
        reversed_output: Path of the reversed-names CSV, if one was written.
    """

    participant_count: int
    output: Path
    reversed_output: Path | None = None


def run(
    config: ScrapeConfig,
    request_manager: SyncRequestManager | None = None,
) -> RunResult:
    """Run a scrape as described by ``config``.

    Args:
        config: Run settings.
        request_manager: Optional manager to fetch with. When omitted, one is
            created from the config and closed before returning.

    Returns:
        RunResult describing what was written.

    Raises:
        FetchError: If the page cannot be downloaded.
        ParseError: If the page is not parseable HTML.
        WriteError: If an output file cannot be written.
    """
    owns_manager = request_manager is None
    if request_manager is None:
        request_manager = SyncRequestManager(
            timeout=config.timeout, user_agent=config.user_agent
        )

    try:
        response = request_manager.fetch(config.url)
    finally:
        if owns_manager:
            request_manager.close()

    document = parse_document(
        response.content, response.url, encoding=response.encoding
    )
    records = extract_participants(document)

    participant_count = len(records) - 1
    if participant_count == 0:
        logger.warning("No participants found at %s", config.url)
    else:
        logger.info("Found %d participants", participant_count)

    output = write_csv(config.output, records)

    reversed_output = None
    if config.with_reverse_name:
        reversed_output = write_csv(
            reversed_filename(config.output), reverse_driver_names(records)
        )

    return RunResult(
        participant_count=participant_count,
        output=output,
        reversed_output=reversed_output,
    )
