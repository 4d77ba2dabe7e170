"""Rendered DOM extractor: reads a live Playwright page into a Node tree."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from domdiffing.dom.nodes import Node
from domdiffing.dom.parser import HtmlParser

if TYPE_CHECKING:
    from playwright.async_api import Page

logger = logging.getLogger(__name__)


class RenderedDomExtractor:
    """
    Captures the DOM as the browser rendered it (after scripts ran), rather
    than the markup the server sent.

    Usage:
        extractor = RenderedDomExtractor()
        root = await extractor.extract(page, selector="#app")
    """

    def __init__(self, parser: HtmlParser | None = None) -> None:
        self._parser = parser or HtmlParser()

    async def extract(self, page: Page, *, selector: str | None = None) -> Node:
        """
        Return the page's rendered tree.

        With a selector, only the inner HTML of the first matching element is
        captured, so the element's children become the top-level nodes.
        """
        if selector is None:
            markup = await page.content()
        else:
            markup = await page.inner_html(selector)
        logger.debug("Captured %d characters from %s (selector=%r)", len(markup), page.url, selector)
        return self._parser.parse(markup)
