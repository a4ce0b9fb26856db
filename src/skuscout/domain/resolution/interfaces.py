# 🧩 skuscout/domain/resolution/interfaces.py
"""
🧩 Контракти колабораторів конвеєра.

🔹 `IElement` / `IDocument`: мінімальні DOM-примітиви, які споживає ядро.
🔹 `IPageFetcher`: завантаження документа з обмеженим таймаутом.
🔹 Реалізації: Playwright (живий браузер) та BeautifulSoup (збережений HTML).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Literal, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .models import FetchOutcome

WaitCondition = Literal["commit", "domcontentloaded", "load", "networkidle"]


@runtime_checkable
class IElement(Protocol):
    """Вузол документа, знайдений через `query_all`."""

    async def text(self) -> str:
        """Обрізаний текстовий вміст вузла ("" якщо порожньо)."""
        ...

    async def query_text(self, selector: str) -> Optional[str]:
        """Обрізаний текст першого нащадка за селектором або None."""
        ...


@runtime_checkable
class IDocument(Protocol):
    """Завантажений документ однієї вітрини."""

    url: str

    async def wait_for_element(self, selector: str, *, timeout_ms: int) -> bool:
        """True, якщо елемент зʼявився до спливання таймауту."""
        ...

    async def query_text(self, selector: str) -> Optional[str]:
        """Обрізаний текст першого збігу або None, якщо збігу немає."""
        ...

    async def query_all(self, selector: str) -> List[IElement]:
        """Усі збіги у порядку документа (порожній список, якщо немає)."""
        ...


@runtime_checkable
class IPageFetcher(Protocol):
    """Завантажувач сторінок у межах однієї сесії."""

    async def load_document(
        self,
        url: str,
        *,
        wait_until: WaitCondition = "domcontentloaded",
        timeout_ms: int = 30000,
    ) -> "FetchOutcome":
        ...


__all__ = ["IDocument", "IElement", "IPageFetcher", "WaitCondition"]
