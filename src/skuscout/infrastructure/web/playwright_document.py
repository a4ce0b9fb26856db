# 📄 skuscout/infrastructure/web/playwright_document.py
"""
📄 PlaywrightDocument: реалізація `IDocument` поверх живої вкладки Playwright.

🔹 Очікування маркера обмежене таймаутом; спливання таймауту → False, а не виняток.
🔹 Запити повертають обрізаний текст; помилки DOM піднімаються до викликача.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from playwright.async_api import ElementHandle, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

# 🔠 Системні імпорти
import logging
from typing import List, Optional

# 🧩 Внутрішні модулі проєкту
from skuscout.domain.resolution.interfaces import IElement
from skuscout.shared.utils.logger import LOG_NAME
from skuscout.shared.utils.text import norm_ws

logger = logging.getLogger(f"{LOG_NAME}.web.document")


class PlaywrightElement:
    """`IElement` над `ElementHandle`."""

    __slots__ = ("_handle",)

    def __init__(self, handle: ElementHandle) -> None:
        self._handle = handle

    async def text(self) -> str:
        return norm_ws(await self._handle.text_content())

    async def query_text(self, selector: str) -> Optional[str]:
        child = await self._handle.query_selector(selector)
        if child is None:
            return None
        return norm_ws(await child.text_content())


class PlaywrightDocument:
    """`IDocument` над поточною сторінкою сесії."""

    def __init__(self, page: Page, url: str) -> None:
        self._page = page
        self.url = url

    async def wait_for_element(self, selector: str, *, timeout_ms: int) -> bool:
        try:
            await self._page.wait_for_selector(selector, timeout=timeout_ms, state="attached")   # ⏱️ Чекаємо появи
        except PlaywrightTimeoutError:
            logger.debug("⏱️ %s не зʼявився за %s мс (%s)", selector, timeout_ms, self.url)
            return False
        return True

    async def query_text(self, selector: str) -> Optional[str]:
        handle = await self._page.query_selector(selector)
        if handle is None:
            return None
        return norm_ws(await handle.text_content())

    async def query_all(self, selector: str) -> List[IElement]:
        handles = await self._page.query_selector_all(selector)
        return [PlaywrightElement(handle) for handle in handles]


__all__ = ["PlaywrightDocument", "PlaywrightElement"]
