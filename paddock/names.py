"""Driver name reordering and reversed-output naming."""

from __future__ import annotations

from paddock.data_types import DRIVER_INDEX, RecordSet

REVERSED_SUFFIX = "-name-reversed"


def reverse_name(name: str) -> str:
    """Move the last whitespace-separated token of a name to the front.

    The remaining tokens keep their relative order, so ``"A B C"`` becomes
    ``"C A B"`` rather than ``"C B A"``. Names with fewer than two tokens are
    returned unchanged.

    Examples:
        >>> reverse_name("Asker Abubekirov")
        'Abubekirov Asker'
        >>> reverse_name("Jean Claude Van Damme")
        'Damme Jean Claude Van'
        >>> reverse_name("Senna")
        'Senna'
    """
    parts = name.split()
    if len(parts) < 2:
        return name
    return " ".join([parts[-1], *parts[:-1]])


def reverse_driver_names(records: RecordSet) -> RecordSet:
    """Return a copy of ``records`` with every driver name reversed.

    The header row and all other fields are copied as-is; ``records`` itself
    is not modified.
    """
    if not records:
        return []

    reversed_records: RecordSet = [records[0]]
    for record in records[1:]:
        fields = list(record)
        fields[DRIVER_INDEX] = reverse_name(fields[DRIVER_INDEX])
        reversed_records.append(tuple(fields))
    return reversed_records


def reversed_filename(path: str) -> str:
    """Derive the reversed-names output path from the main output path.

    The suffix goes before the last dot-delimited extension, or at the end
    when there is no dot.

    Examples:
        >>> reversed_filename("participants.csv")
        'participants-name-reversed.csv'
        >>> reversed_filename("data")
        'data-name-reversed'
    """
    base, dot, ext = path.rpartition(".")
    if not dot:
        return path + REVERSED_SUFFIX
    return f"{base}{REVERSED_SUFFIX}.{ext}"
