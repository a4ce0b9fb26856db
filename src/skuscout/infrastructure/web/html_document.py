# 🥣 skuscout/infrastructure/web/html_document.py
"""
🥣 HtmlDocument: реалізація `IDocument` поверх BeautifulSoup.

🔹 Дозволяє прогнати екстракцію по збереженій сторінці без браузера (`--html`).
🔹 Ті самі CSS-селектори, що й у живому браузері (soupsieve).
🔹 `wait_for_element`: миттєва перевірка присутності: документ уже повний.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from bs4 import BeautifulSoup                                   # 🥣 Парсимо HTML-документи
from bs4.element import Tag                                     # 🧱 Типи DOM-вузлів

# 🔠 Системні імпорти
from pathlib import Path
from typing import List, Optional, Union

# 🧩 Внутрішні модулі проєкту
from skuscout.domain.resolution.interfaces import IElement
from skuscout.shared.utils.text import norm_ws

DEFAULT_HTML_PARSER: str = "lxml"


def _tag_text(tag: Tag) -> str:
    return norm_ws(tag.get_text())


class HtmlElement:
    """Вузол BeautifulSoup із контрактом `IElement`."""

    __slots__ = ("_tag",)

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    async def text(self) -> str:
        return _tag_text(self._tag)

    async def query_text(self, selector: str) -> Optional[str]:
        found = self._tag.select_one(selector)
        return _tag_text(found) if found is not None else None


class HtmlDocument:
    """Статичний документ, розібраний із HTML-рядка."""

    def __init__(self, soup: BeautifulSoup, url: str = "") -> None:
        self._soup = soup
        self.url = url

    @classmethod
    def from_html(cls, html: str, *, url: str = "", parser: str = DEFAULT_HTML_PARSER) -> "HtmlDocument":
        return cls(BeautifulSoup(html or "", parser), url=url)

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        *,
        url: str = "",
        parser: str = DEFAULT_HTML_PARSER,
    ) -> "HtmlDocument":
        html = Path(path).read_text(encoding="utf-8", errors="replace")
        return cls.from_html(html, url=url or Path(path).resolve().as_uri(), parser=parser)

    async def wait_for_element(self, selector: str, *, timeout_ms: int) -> bool:
        return self._soup.select_one(selector) is not None

    async def query_text(self, selector: str) -> Optional[str]:
        found = self._soup.select_one(selector)
        return _tag_text(found) if found is not None else None

    async def query_all(self, selector: str) -> List[IElement]:
        return [HtmlElement(tag) for tag in self._soup.select(selector)]


__all__ = ["HtmlDocument", "HtmlElement", "DEFAULT_HTML_PARSER"]
