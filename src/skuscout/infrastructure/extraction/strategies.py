# 🧲 skuscout/infrastructure/extraction/strategies.py
"""
🧲 Стратегії витягування одного логічного поля зі сторінки.

🔹 Кожна стратегія повертає `AttemptResult`: значення або «порожньо».
🔹 Відсутній селектор: це не помилка, а порожня спроба.
🔹 Будь-який виняток усередині стратегії логується на DEBUG і теж дає порожню спробу.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

# 🧩 Внутрішні модулі проєкту
from skuscout.domain.resolution import IDocument
from skuscout.shared.utils.logger import LOG_NAME
from skuscout.shared.utils.text import clean_key, clean_value, norm_ws

logger = logging.getLogger(f"{LOG_NAME}.extraction")

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class AttemptResult(Generic[T]):
    """Результат однієї стратегії: `value` або нічого."""

    value: Optional[T] = None
    strategy: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.value

    @classmethod
    def empty(cls, strategy: str = "") -> "AttemptResult[Any]":
        return cls(None, strategy)


# ================================
# 📝 ТЕКСТ
# ================================
@dataclass(frozen=True, slots=True)
class TextStrategy:
    """Текст першого елемента за селектором."""

    selector: str

    @property
    def name(self) -> str:
        return self.selector

    async def attempt(self, document: IDocument) -> AttemptResult[str]:
        try:
            text = norm_ws(await document.query_text(self.selector))
        except Exception as exc:                                # noqa: BLE001
            logger.debug("⚠️ TextStrategy(%s) впала: %s", self.selector, exc)
            return AttemptResult.empty(self.name)
        return AttemptResult(text or None, self.name)


# ================================
# 📋 СПИСОК
# ================================
@dataclass(frozen=True, slots=True)
class ListStrategy:
    """Тексти всіх збігів у порядку документа; порожні пункти відкидаються."""

    selector: str

    @property
    def name(self) -> str:
        return self.selector

    async def attempt(self, document: IDocument) -> AttemptResult[Tuple[str, ...]]:
        items: List[str] = []
        try:
            for element in await document.query_all(self.selector):
                text = norm_ws(await element.text())
                if text:
                    items.append(text)
        except Exception as exc:                                # noqa: BLE001
            logger.debug("⚠️ ListStrategy(%s) впала: %s", self.selector, exc)
            return AttemptResult.empty(self.name)
        return AttemptResult(tuple(items) or None, self.name)


# ================================
# 🗂️ КЛЮЧ-ЗНАЧЕННЯ
# ================================
@dataclass(frozen=True, slots=True)
class KeyValueStrategy:
    """
    Таблиця характеристик однієї схеми сторінки.

    `rows` вибирає рядки, `key`/`value` шукаються всередині кожного рядка.
    Рядки без ключа або значення пропускаються; повторний ключ у межах
    однієї таблиці перезаписує попереднє значення (як рядок нижче на сторінці).
    """

    name: str
    rows: str
    key: str
    value: str

    async def attempt(self, document: IDocument) -> AttemptResult[Dict[str, str]]:
        table: Dict[str, str] = {}
        try:
            for row in await document.query_all(self.rows):
                key = clean_key(await row.query_text(self.key))
                value = clean_value(await row.query_text(self.value))
                if not key or not value:
                    continue
                table[key] = value
        except Exception as exc:                                # noqa: BLE001
            logger.debug("⚠️ KeyValueStrategy(%s) впала: %s", self.name, exc)
            return AttemptResult.empty(self.name)
        return AttemptResult(table or None, self.name)


__all__ = ["AttemptResult", "KeyValueStrategy", "ListStrategy", "TextStrategy"]
