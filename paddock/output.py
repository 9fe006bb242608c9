"""CSV output for participant RecordSets, and reading it back."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from pydantic import ValidationError

from paddock.common.exceptions import DataFormatError, ReadError, WriteError
from paddock.data_types import FIELD_NAMES, Participant, RecordSet

logger = logging.getLogger(__name__)


def write_csv(path: str | Path, records: RecordSet) -> Path:
    """Write a RecordSet to ``path`` as UTF-8 CSV.

    The file is created or overwritten. Writes are not transactional: a
    failure part-way through leaves a partial file behind.

    Args:
        path: Destination file path.
        records: Rows to write, header first.

    Returns:
        The path written to.

    Raises:
        WriteError: If the file cannot be created or written.
    """
    path = Path(path)
    try:
        with path.open("w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f)
            writer.writerows(records)
    except OSError as e:
        raise WriteError(
            f"Failed to write output file {path}: {e}", str(path)
        ) from e

    logger.info("Successfully wrote to %s", path)
    return path


def read_participants(path: str | Path) -> list[Participant]:
    """Read a participants CSV written by ``write_csv``.

    The header row is skipped. Blank lines are ignored.

    Args:
        path: Participants CSV file.

    Returns:
        One Participant per data row, in file order.

    Raises:
        ReadError: If the file cannot be opened, read or decoded as UTF-8.
        DataFormatError: If a row has the wrong number of columns or fails
            model validation.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8", newline="") as f:
            return _parse_rows(csv.reader(f))
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(
            f"Failed to read participants file {path}: {e}", str(path)
        ) from e


def _parse_rows(reader) -> list[Participant]:
    participants: list[Participant] = []
    next(reader, None)
    for row in reader:
        if not row:
            continue
        line_number = reader.line_num
        if len(row) != len(FIELD_NAMES):
            raise DataFormatError(
                errors=[
                    {
                        "loc": ("row",),
                        "msg": f"expected {len(FIELD_NAMES)} columns, "
                        f"got {len(row)}",
                    }
                ],
                row=row,
                line_number=line_number,
            )
        try:
            participants.append(Participant.from_record(tuple(row)))
        except ValidationError as e:
            raise DataFormatError(
                errors=e.errors(), row=row, line_number=line_number
            ) from e
    return participants
