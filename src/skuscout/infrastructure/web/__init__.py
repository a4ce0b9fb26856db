# 🌍 skuscout/infrastructure/web/__init__.py
"""
🌍 Інфраструктурний модуль доступу до сторінок.

🔹 `WebDriverService`: жива сесія Playwright (`IPageFetcher`).
🔹 `PlaywrightDocument` / `HtmlDocument`: два варіанти `IDocument`.
"""

from __future__ import annotations

from .html_document import HtmlDocument, HtmlElement
from .playwright_document import PlaywrightDocument, PlaywrightElement
from .webdriver_service import WebDriverService

__all__ = [
    "HtmlDocument",
    "HtmlElement",
    "PlaywrightDocument",
    "PlaywrightElement",
    "WebDriverService",
]
