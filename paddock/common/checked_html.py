"""Checked HTML element wrapper for safe XPath/CSS querying.

This module provides CheckedHtmlElement, a wrapper around lxml.html.HtmlElement
that validates selector results against expected counts, and parse_document(),
which turns downloaded bytes into a wrapped document tree.

Missing cells degrade to empty fields, so the participant extractor asks
for ``min_count=0`` throughout. The country flag lookup is the one bounded
query: it selects the first flag image only and expects at most one title.
"""

from __future__ import annotations

from typing import overload

from lxml import etree, html
from lxml.html import HtmlElement

from paddock.common.exceptions import PaddockError, ParseError


class StructuralAssumptionError(PaddockError):
    """Raised when a selector returns an unexpected number of results.

    Attributes:
        selector: The XPath or CSS selector that was used.
        selector_type: Type of selector ("xpath" or "css").
        description: Human-readable description of what was being selected.
        actual_count: Actual number of results found.
    """

    def __init__(
        self,
        selector: str,
        selector_type: str,
        description: str,
        expected_min: int,
        expected_max: int | None,
        actual_count: int,
        request_url: str,
    ) -> None:
        self.selector = selector
        self.selector_type = selector_type
        self.description = description
        self.expected_min = expected_min
        self.expected_max = expected_max
        self.actual_count = actual_count

        if expected_max is None:
            expected_str = f"at least {expected_min}"
        elif expected_min == expected_max:
            expected_str = f"exactly {expected_min}"
        else:
            expected_str = f"between {expected_min} and {expected_max}"

        super().__init__(
            f"HTML structure mismatch: Expected {expected_str} "
            f"elements for '{description}', but found {actual_count}",
            {
                "url": request_url,
                "selector": selector,
                "selector_type": selector_type,
            },
        )


class CheckedHtmlElement:
    """Wrapper around HtmlElement with validated selectors.

    This class wraps an lxml HtmlElement and provides checked_xpath() and
    checked_css() methods that validate the number of results against expected
    min/max counts. If the actual count doesn't match expectations, it raises
    StructuralAssumptionError with the selector and URL as context.
    """

    def __init__(self, element: HtmlElement, request_url: str = "") -> None:
        """Initialize the checked element wrapper.

        Args:
            element: The lxml HtmlElement to wrap.
            request_url: Optional URL for error context.
        """
        self._element = element
        self._request_url = request_url

    @property
    def element(self) -> HtmlElement:
        """The wrapped lxml element."""
        return self._element

    def _check_count(
        self,
        selector: str,
        selector_type: str,
        description: str,
        min_count: int,
        max_count: int | None,
        actual_count: int,
    ) -> None:
        if actual_count < min_count or (
            max_count is not None and actual_count > max_count
        ):
            raise StructuralAssumptionError(
                selector=selector,
                selector_type=selector_type,
                description=description,
                expected_min=min_count,
                expected_max=max_count,
                actual_count=actual_count,
                request_url=self._request_url,
            )

    @overload
    def checked_xpath(
        self,
        xpath: str,
        description: str,
        min_count: int = 1,
        max_count: int | None = None,
        *,
        type: type[str],
    ) -> list[str]: ...

    @overload
    def checked_xpath(
        self,
        xpath: str,
        description: str,
        min_count: int = 1,
        max_count: int | None = None,
    ) -> list[CheckedHtmlElement]: ...

    def checked_xpath(
        self,
        xpath: str,
        description: str,
        min_count: int = 1,
        max_count: int | None = None,
        *,
        type: type[str] | None = None,
    ) -> list[CheckedHtmlElement] | list[str]:
        """Execute XPath query with count validation.

        Args:
            xpath: XPath expression to execute.
            description: Human-readable description of what's being selected.
            min_count: Minimum number of results expected (default: 1).
            max_count: Maximum number of results expected (None = unlimited).
            type: Pass `str` to return only string results (text/attributes).
                If omitted, returns only CheckedHtmlElements.

        Returns:
            List of matching results filtered by type.

        Raises:
            StructuralAssumptionError: If count doesn't match expectations.

        Example::

            tree = parse_document(content)
            cells = tree.checked_xpath("./following-sibling::td", "cells", 0)
            titles = tree.checked_xpath(".//img/@title", "titles", type=str)
        """
        results = self._element.xpath(xpath)

        if type is str:
            strings: list[str] = [str(r) for r in results if isinstance(r, str)]
            self._check_count(
                xpath, "xpath", description, min_count, max_count, len(strings)
            )
            return strings

        wrapped: list[CheckedHtmlElement] = [
            CheckedHtmlElement(r, self._request_url)
            for r in results
            if isinstance(r, HtmlElement)
        ]
        self._check_count(
            xpath, "xpath", description, min_count, max_count, len(wrapped)
        )
        return wrapped

    def checked_css(
        self,
        selector: str,
        description: str,
        min_count: int = 1,
        max_count: int | None = None,
    ) -> list[CheckedHtmlElement]:
        """Execute CSS selector query with count validation.

        Args:
            selector: CSS selector expression.
            description: Human-readable description of what's being selected.
            min_count: Minimum number of elements expected (default: 1).
            max_count: Maximum number of elements expected (None = unlimited).

        Returns:
            List of matching CheckedHtmlElements, in document order.

        Raises:
            StructuralAssumptionError: If the selector is invalid or the
                count doesn't match expectations.
        """
        try:
            results = self._element.cssselect(selector)
        except Exception as e:
            raise StructuralAssumptionError(
                selector=selector,
                selector_type="css",
                description=description,
                expected_min=min_count,
                expected_max=max_count,
                actual_count=0,
                request_url=self._request_url,
            ) from e

        self._check_count(
            selector, "css", description, min_count, max_count, len(results)
        )
        return [CheckedHtmlElement(r, self._request_url) for r in results]

    def trimmed_text(self) -> str:
        """Return the element's text content with surrounding whitespace trimmed."""
        return self._element.text_content().strip()

    def __getattr__(self, name: str):
        """Delegate all other attributes to the wrapped element.

        This allows CheckedHtmlElement to be used as a drop-in replacement for
        HtmlElement, while adding the checked methods.
        """
        return getattr(self._element, name)


def parse_document(
    content: bytes,
    request_url: str = "",
    encoding: str | None = None,
) -> CheckedHtmlElement:
    """Parse raw page bytes into a checked document tree.

    Args:
        content: Raw response body.
        request_url: URL the content came from, used in error context.
        encoding: Charset declared by the server, if any. When None, lxml
            detects it from the document itself.

    Returns:
        The document root wrapped in CheckedHtmlElement.

    Empty or whitespace-only content yields an empty document, so a blank
    page extracts to zero participants rather than failing.

    Raises:
        ParseError: If lxml cannot build a tree or the charset is unknown.
    """
    if not content or not content.strip():
        return CheckedHtmlElement(
            html.document_fromstring("<html></html>"), request_url
        )

    try:
        parser = html.HTMLParser(encoding=encoding) if encoding else None
        root = html.document_fromstring(content, parser=parser)
    except (etree.ParserError, LookupError, ValueError) as e:
        raise ParseError(
            f"Failed to parse HTML: {e}",
            {"url": request_url, "encoding": encoding},
        ) from e

    return CheckedHtmlElement(root, request_url)
