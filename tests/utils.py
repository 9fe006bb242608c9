"""Test utilities shared across the paddock tests."""

import csv
import socket
from contextlib import closing
from pathlib import Path


def find_free_port() -> int:
    """Find a free port on localhost.

    Returns:
        An available port number.
    """
    with closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind(("", 0))
        s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        return s.getsockname()[1]


def read_rows(path: Path) -> list[list[str]]:
    """Read every row of a CSV file, header included."""
    with path.open(encoding="utf-8", newline="") as f:
        return list(csv.reader(f))
