"""Request manager for fetching the championship page.

SyncRequestManager encapsulates the httpx client and turns transport
failures and unexpected status codes into FetchError subclasses, so the
pipeline only ever deals with a Response or a terminal error.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from paddock.common.exceptions import (
    FetchError,
    HTTPStatusError,
    RequestTimeoutError,
)
from paddock.data_types import Response

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class SyncRequestManager:
    """Manages HTTP requests for a scrape run.

    Example::

        with SyncRequestManager(timeout=30.0) as manager:
            response = manager.fetch("https://example.com/championship/537")
    """

    def __init__(
        self,
        timeout: float | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        """Initialize the request manager.

        Args:
            timeout: Request timeout in seconds. None means no timeout.
            user_agent: Value sent in the User-Agent header.
        """
        self.timeout = timeout
        self._client = httpx.Client(
            timeout=timeout,
            headers={"User-Agent": user_agent},
            follow_redirects=True,
        )

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self._client.close()

    def __enter__(self) -> SyncRequestManager:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def fetch(self, url: str) -> Response:
        """GET ``url`` and return the Response.

        Args:
            url: Absolute URL of the page.

        Returns:
            Response containing the page bytes.

        Raises:
            RequestTimeoutError: If the request times out.
            HTTPStatusError: If the server returns any status other than 200.
            FetchError: On any other transport failure.
        """
        logger.info("Fetching URL: %s", url)
        try:
            http_response = self._client.get(url)
        except httpx.TimeoutException as e:
            raise RequestTimeoutError(url, self.timeout) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(f"Failed to fetch URL: {e}", url) from e

        if http_response.status_code != 200:
            raise HTTPStatusError(
                status_code=http_response.status_code,
                url=url,
                reason=http_response.reason_phrase,
            )

        return Response(
            status_code=http_response.status_code,
            headers=dict(http_response.headers),
            content=http_response.content,
            url=str(http_response.url),
            encoding=http_response.charset_encoding,
        )
