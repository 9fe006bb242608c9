"""Data types for the participant scrape pipeline.

A scrape produces a RecordSet: a list of fixed-arity string tuples whose first
element is always the header row. Records are plain tuples so the CSV writer
and the name reverser can treat them uniformly; ``Participant`` gives the same
data a typed shape for consumers reading a participants file back in.

The canonical schema is the seven-field variant including the car model.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

from paddock.common.checked_html import CheckedHtmlElement

FIELD_NAMES: tuple[str, ...] = (
    "Position",
    "Driver",
    "Country",
    "City",
    "Team",
    "Class",
    "Car",
)

DRIVER_INDEX = FIELD_NAMES.index("Driver")

Record = tuple[str, ...]
RecordSet = list[Record]

HEADER: Record = FIELD_NAMES


def new_record_set() -> RecordSet:
    """Return a RecordSet holding only the header row."""
    return [HEADER]


@dataclass
class ParticipantRow:
    """A table row matched by its driver marker cell.

    Transient: built once per matching row during extraction and discarded
    after it has been projected into a Record.

    Attributes:
        row: The matched ``tr`` element.
        driver_cell: The ``td`` carrying the driver marker attribute.
        following: The driver cell's following sibling cells, in order.
    """

    row: CheckedHtmlElement
    driver_cell: CheckedHtmlElement
    following: list[CheckedHtmlElement] = field(default_factory=list)

    def sibling(self, offset: int) -> CheckedHtmlElement | None:
        """Return the cell ``offset`` positions after the driver cell.

        Offset 0 is the driver cell itself. Returns None when the row ends
        before that position.
        """
        if offset == 0:
            return self.driver_cell
        if 0 < offset <= len(self.following):
            return self.following[offset - 1]
        return None


class Participant(BaseModel):
    """A championship participant as written to the participants CSV."""

    model_config = ConfigDict(frozen=True)

    position: str = Field("", description="Standing position, e.g. 1")
    driver: str = Field(..., description="Driver full name")
    country: str = Field("", description="Country from the flag tooltip")
    city: str = Field("", description="City text from the geo cell")
    team: str = Field("", description="Team name, empty when unaffiliated")
    car_class: str = Field("", description="Class or category")
    car: str = Field("", description="Declared car model")

    @classmethod
    def from_record(cls, record: Record) -> Participant:
        """Build a Participant from a Record in schema order."""
        return cls(**dict(zip(_MODEL_FIELDS, record, strict=True)))

    def as_record(self) -> Record:
        """Return the participant as a Record in schema order."""
        return tuple(getattr(self, name) for name in _MODEL_FIELDS)


_MODEL_FIELDS: tuple[str, ...] = (
    "position",
    "driver",
    "country",
    "city",
    "team",
    "car_class",
    "car",
)


@dataclass(frozen=True)
class Response:
    """HTTP response from fetching the championship page.

    Attributes:
        status_code: HTTP status code.
        headers: Response headers.
        content: Raw response bytes.
        url: Final URL after any redirects.
        encoding: Charset from the Content-Type header, if declared.
    """

    status_code: int
    headers: dict[str, str]
    content: bytes
    url: str
    encoding: str | None = None
