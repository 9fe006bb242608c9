"""Participant extraction from a championship page.

The source page has no semantic column structure. Participant rows are
found document-wide by a single reliable anchor, the driver cell carrying
``data-driver-id``; every other field is read from a fixed position
relative to that cell.

Column positions live in one table, ``PARTICIPANT_FIELDS``. If the site
reorders its columns, that table is the only thing to edit. A shifted
column is not detected: fields are silently misassigned.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from paddock.common.checked_html import CheckedHtmlElement
from paddock.data_types import (
    ParticipantRow,
    Record,
    RecordSet,
    new_record_set,
)

logger = logging.getLogger(__name__)

DRIVER_MARKER = "data-driver-id"
POSITION_CLASSES = frozenset({"first", "text-end"})
TEAM_PLACEHOLDER = "-"

Locator = Callable[[ParticipantRow], CheckedHtmlElement | None]
Reader = Callable[[CheckedHtmlElement], str]


def cell_text(cell: CheckedHtmlElement) -> str:
    """Trimmed text content of a cell, nested elements included."""
    return cell.trimmed_text()


def flag_title(cell: CheckedHtmlElement) -> str:
    """Tooltip of the first country flag image inside a cell, or ``""``.

    Only the first flag is consulted; an untitled first flag reads as ``""``
    even when a later flag carries a title.
    """
    titles = cell.checked_xpath(
        "(.//img[contains(concat(' ', normalize-space(@class), ' '),"
        " ' country-flag ')])[1]/@title",
        "country flag title",
        min_count=0,
        max_count=1,
        type=str,
    )
    return titles[0] if titles else ""


def team_text(cell: CheckedHtmlElement) -> str:
    """Team name, with the lone dash placeholder normalized to ``""``."""
    team = cell.trimmed_text()
    return "" if team == TEAM_PLACEHOLDER else team


def sibling(offset: int) -> Locator:
    """Locate the cell ``offset`` positions after the driver cell."""

    def locate(row: ParticipantRow) -> CheckedHtmlElement | None:
        return row.sibling(offset)

    return locate


def position_cell(row: ParticipantRow) -> CheckedHtmlElement | None:
    """Locate the nearest preceding cell styled as a position cell."""
    preceding = row.driver_cell.checked_xpath(
        "preceding-sibling::td", "cells before driver", min_count=0
    )
    for cell in reversed(preceding):
        classes = set((cell.get("class") or "").split())
        if POSITION_CLASSES <= classes:
            return cell
    return None


@dataclass(frozen=True)
class FieldExtractor:
    """Reads one Record field from a matched participant row.

    Attributes:
        name: Header name of the field.
        locate: Finds the source cell relative to the driver cell.
        read: Turns the located cell into the field value.
    """

    name: str
    locate: Locator
    read: Reader = cell_text

    def extract(self, row: ParticipantRow) -> str:
        cell = self.locate(row)
        if cell is None:
            return ""
        return self.read(cell)


# Offsets are counted in sibling cells from the driver cell:
# driver, geo (flag + city), team, class, car.
PARTICIPANT_FIELDS: tuple[FieldExtractor, ...] = (
    FieldExtractor("Position", position_cell),
    FieldExtractor("Driver", sibling(0)),
    FieldExtractor("Country", sibling(1), flag_title),
    FieldExtractor("City", sibling(1)),
    FieldExtractor("Team", sibling(2), team_text),
    FieldExtractor("Class", sibling(3)),
    FieldExtractor("Car", sibling(4)),
)


def iter_participant_rows(
    document: CheckedHtmlElement,
) -> Iterator[ParticipantRow]:
    """Yield every table row in the document that carries a driver cell.

    Rows are scanned across the whole document, not within one table, in
    document order.
    """
    span = len(PARTICIPANT_FIELDS)
    for row in document.checked_xpath("//tr", "table rows", min_count=0):
        driver_cells = row.checked_css(
            f"td[{DRIVER_MARKER}]", "driver cell", min_count=0
        )
        if not driver_cells:
            continue

        driver_cell = driver_cells[0]
        following = driver_cell.checked_xpath(
            "following-sibling::*", "cells after driver", min_count=0
        )
        yield ParticipantRow(
            row=row, driver_cell=driver_cell, following=following[:span]
        )


def project(row: ParticipantRow) -> Record:
    """Project a matched row onto the participant schema."""
    return tuple(field.extract(row) for field in PARTICIPANT_FIELDS)


def extract_participants(document: CheckedHtmlElement) -> RecordSet:
    """Extract all participant records from a parsed championship page.

    Args:
        document: Parsed page, as returned by ``parse_document``.

    Returns:
        RecordSet whose first element is the header, followed by one Record
        per participant row in document order. A page with no participant
        rows yields the header alone.
    """
    records = new_record_set()
    for row in iter_participant_rows(document):
        records.append(project(row))

    logger.debug("Extracted %d participant rows", len(records) - 1)
    return records
