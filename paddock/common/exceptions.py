"""Exception types for scrape failures.

Every failure in a scrape run is terminal. The CLI reports the exception's
message and exits with a non-zero status; nothing here is retried.

Row-level anomalies (a missing sibling cell, an absent flag image, a
placeholder team value) are not errors and never surface as exceptions.
"""

from typing import Any


class PaddockError(Exception):
    """Base class for failures that end a scrape run.

    Attributes:
        message: Human-readable description of the failure.
        context: Additional key/value details included in ``str(exc)``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable description of the failure.
            context: Optional dict of additional context (url, path, counts).
        """
        self.message = message
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context.

        Returns:
            Formatted error message string.
        """
        parts = [self.message]

        if self.context:
            parts.append("Context:")
            for key, value in self.context.items():
                parts.append(f"  {key}: {value}")

        return "\n".join(parts)


class ConfigError(PaddockError):
    """Raised when the run configuration is incomplete or invalid."""


class FetchError(PaddockError):
    """Raised when the championship page cannot be downloaded.

    Attributes:
        url: The URL that was being fetched.
    """

    def __init__(
        self,
        message: str,
        url: str,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.url = url
        super().__init__(message, {"url": url, **(context or {})})


class HTTPStatusError(FetchError):
    """Raised when the server answers with anything other than 200.

    Attributes:
        status_code: The status code received.
        reason: The reason phrase sent by the server, if any.
    """

    def __init__(self, status_code: int, url: str, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        message = f"Status code error: {status_code} {reason}".rstrip()
        super().__init__(message, url, {"expected": 200})


class RequestTimeoutError(FetchError):
    """Raised when the request exceeds the configured timeout.

    Attributes:
        timeout_seconds: The timeout duration in seconds.
    """

    def __init__(self, url: str, timeout_seconds: float | None) -> None:
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"Request to {url} timed out after {timeout_seconds}s", url
        )


class ParseError(PaddockError):
    """Raised when the downloaded bytes cannot be parsed as HTML."""


class WriteError(PaddockError):
    """Raised when an output file cannot be created or written.

    Attributes:
        path: The output path that failed.
    """

    def __init__(self, message: str, path: str) -> None:
        self.path = path
        super().__init__(message, {"path": path})


class ReadError(PaddockError):
    """Raised when a participants file cannot be opened or read.

    Attributes:
        path: The input path that failed.
    """

    def __init__(self, message: str, path: str) -> None:
        self.path = path
        super().__init__(message, {"path": path})


class DataFormatError(PaddockError):
    """Raised when a participants CSV row doesn't match the record schema.

    This is raised while reading a participants file back into
    ``Participant`` models, never during extraction.

    Attributes:
        errors: List of Pydantic validation errors (or a synthetic arity
            error for rows with the wrong number of columns).
        row: The raw row that failed.
        line_number: One-based line number of the row in its file.
    """

    def __init__(
        self,
        errors: list[dict[str, Any]],
        row: list[str],
        line_number: int,
    ) -> None:
        self.errors = errors
        self.row = row
        self.line_number = line_number

        error_summary = ", ".join(
            f"{err['loc'][0] if err.get('loc') else 'row'}: {err['msg']}"
            for err in errors
        )
        message = f"Invalid participant row on line {line_number}: {error_summary}"

        super().__init__(
            message,
            {"error_count": len(errors), "row": row},
        )
