# 📦 skuscout/config/setup/container.py
"""
📦 Контейнер залежностей skuscout.

🔹 Створює каталог ринків, пробу, екстрактор і контролер у правильному порядку.
🔹 Фабрика сесій повертає новий `WebDriverService` на кожен запит.
🔹 За потреби піднімає експортер Prometheus.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                            # 🧾 Логування складання
from typing import Iterable, Optional

# 🧩 Внутрішні модулі проєкту
from skuscout.config.config_service import ConfigService                  # ⚙️ Джерело налаштувань
from skuscout.domain.markets import MarketCatalog                         # 🌍 Каталог ринків
from skuscout.infrastructure.availability import AvailabilityProbe        # 🔎 Проба наявності
from skuscout.infrastructure.extraction import AttributeExtractor         # 🧾 Екстракція полів
from skuscout.infrastructure.resolution import ResolutionController       # 🧭 Автомат запиту
from skuscout.infrastructure.web import WebDriverService                  # 🌐 Сесія Playwright
from skuscout.shared.metrics import maybe_start_prometheus                # 📈 Експортер метрик
from skuscout.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.container")


class Container:
    """
    Координує ініціалізацію доменних та інфраструктурних сервісів.
    """

    def __init__(self, config: ConfigService, *, markets: Optional[Iterable[str]] = None) -> None:
        self.config = config
        logger.debug("🚀 Стартуємо побудову контейнера залежностей")
        self._bootstrap_metrics_if_enabled()

        catalog = MarketCatalog.from_config(self.config.get("markets", []))
        if markets:
            catalog = catalog.restricted_to(markets)              # 🎯 Фільтр --markets
        self.catalog = catalog
        self.probe = AvailabilityProbe.from_config(self.config)
        self.extractor = AttributeExtractor.from_config(self.config)
        self.controller = ResolutionController(
            catalog=self.catalog,
            probe=self.probe,
            extractor=self.extractor,
            session_factory=self.new_session,
        )
        logger.debug("✅ Контейнер готовий: ринки %s", ", ".join(self.catalog.codes))

    def new_session(self) -> WebDriverService:
        """Нова браузерна сесія; використовується як `async with` на один запит."""
        return WebDriverService(config_service=self.config)

    def _bootstrap_metrics_if_enabled(self) -> None:
        enabled = self.config.get("metrics.enabled", False, cast=bool)
        port = self.config.get("metrics.port", 9108, cast=int)
        maybe_start_prometheus(port, enabled=enabled)


__all__ = ["Container"]
