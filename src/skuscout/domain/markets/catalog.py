# 🌍 skuscout/domain/markets/catalog.py
"""
🌍 Каталог регіональних вітрин і шаблонів їхніх URL.

🔹 `Market`: незмінний опис вітрини (код + шаблон).
🔹 `MarketCatalog`: упорядкований реєстр; порядок вставки = пріоритет перевірки.
🔹 `url_for`: чиста підстановка ідентифікатора, без мережі та стану.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from dataclasses import dataclass                               # 🧱 DTO ринку
from typing import Any, Iterable, Iterator, Mapping, Optional, Sequence, Tuple

# 🧩 Внутрішні модулі проєкту
from skuscout.shared.errors import ConfigError
from skuscout.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.markets")

PLACEHOLDER: str = "{identifier}"                               # 🧷 Місце підстановки у шаблоні


@dataclass(frozen=True, slots=True)
class Market:
    """Регіональна вітрина: код (DE, US, ...) і шаблон адреси товару."""

    code: str
    url_template: str

    def url_for(self, identifier: str) -> str:
        """
        Підставляє ідентифікатор у шаблон.

        Шаблон без `{identifier}` трактується як префікс (`https://.../dp/` + SKU).
        """
        if not identifier:
            raise ValueError("identifier must be non-empty")
        if PLACEHOLDER in self.url_template:
            return self.url_template.replace(PLACEHOLDER, identifier)
        return f"{self.url_template}{identifier}"


class MarketCatalog:
    """🌍 Незмінний упорядкований реєстр ринків."""

    __slots__ = ("_markets",)

    def __init__(self, markets: Iterable[Market]) -> None:
        ordered: Tuple[Market, ...] = tuple(markets)
        seen = set()
        for market in ordered:
            if market.code in seen:
                raise ConfigError("Дубль коду ринку", details=market.code)
            seen.add(market.code)
        self._markets = ordered

    # ================================
    # 🏭 ФАБРИКИ
    # ================================
    @classmethod
    def from_config(cls, entries: Optional[Sequence[Mapping[str, Any]]]) -> "MarketCatalog":
        """Будує каталог зі списку `{code, url_template}` розділу `markets`."""
        markets = []
        for index, entry in enumerate(entries or []):
            code = str((entry or {}).get("code") or "").strip()
            template = str((entry or {}).get("url_template") or "").strip()
            if not code or not template:
                raise ConfigError("Ринок без коду або шаблону", details=f"markets[{index}]")
            markets.append(Market(code=code, url_template=template))
        catalog = cls(markets)
        logger.debug("🌍 Каталог ринків: %s", ", ".join(catalog.codes))
        return catalog

    def restricted_to(self, codes: Iterable[str]) -> "MarketCatalog":
        """Новий каталог лише з вказаними кодами; порядок каталогу зберігається."""
        wanted = {code.strip().upper() for code in codes if code and code.strip()}
        unknown = wanted - {market.code.upper() for market in self._markets}
        if unknown:
            raise ConfigError("Невідомі коди ринків", details=", ".join(sorted(unknown)))
        return MarketCatalog(m for m in self._markets if m.code.upper() in wanted)

    # ================================
    # 🔑 ДОСТУП
    # ================================
    def url_for(self, market: Market, identifier: str) -> str:
        return market.url_for(identifier)

    def get(self, code: str) -> Optional[Market]:
        target = (code or "").strip().upper()
        for market in self._markets:
            if market.code.upper() == target:
                return market
        return None

    @property
    def codes(self) -> Tuple[str, ...]:
        return tuple(market.code for market in self._markets)

    def __iter__(self) -> Iterator[Market]:
        return iter(self._markets)

    def __len__(self) -> int:
        return len(self._markets)

    def __getitem__(self, index: int) -> Market:
        return self._markets[index]

    def __repr__(self) -> str:
        return f"MarketCatalog({', '.join(self.codes)})"


__all__ = ["Market", "MarketCatalog", "PLACEHOLDER"]
