# 🧭 skuscout/infrastructure/web/webdriver_service.py
"""
🧭 WebDriverService: адаптер Playwright, що реалізує `IPageFetcher`.

🔹 Одна сесія (браузер + контекст + вкладка) на один запит оператора.
🔹 Блокує зображення/стилі/шрифти/медіа ще до першої навігації.
🔹 Навігація чекає `domcontentloaded` з обмеженим таймаутом; без ретраїв.
🔹 Помилки навігації перетворюються на `FetchOutcome`, а не на винятки.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from playwright.async_api import (                              # 🧠 Асинхронний API Playwright
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Page,
    Playwright,
    Route,
    TimeoutError as PlaywrightTimeoutError,
    async_playwright,
)
from playwright_stealth import Stealth                          # 🥷 Прибирає сигнатуру браузера

# 🔠 Системні імпорти
import logging                                                  # 🧾 Логування подій
from typing import Any, Dict, FrozenSet, Optional

# 🧩 Внутрішні модулі проєкту
from skuscout.config.config_service import ConfigService        # ⚙️ Налаштування браузера
from skuscout.domain.resolution.interfaces import WaitCondition
from skuscout.domain.resolution.models import FetchOutcome
from skuscout.shared.errors import (                            # 🚨 Типові помилки веб-доступу
    InvalidUrlError,
    NetworkError,
    RequestTimeout,
    SessionStartError,
)
from skuscout.shared.utils.logger import LOG_NAME
from .playwright_document import PlaywrightDocument

logger = logging.getLogger(f"{LOG_NAME}.web")

DEFAULT_BLOCKED_RESOURCES: FrozenSet[str] = frozenset({"image", "stylesheet", "font", "media"})


def _first_line(exc: BaseException) -> str:
    """Перший рядок повідомлення Playwright (далі йде call log)."""
    lines = str(exc).strip().splitlines()
    return lines[0] if lines else type(exc).__name__


# ================================
# 🏛️ ГОЛОВНИЙ КЛАС
# ================================
class WebDriverService:
    """
    🧭 Реалізація протоколу IPageFetcher на базі Playwright.
    """

    # ================================
    # 🧱 ІНІЦІАЛІЗАЦІЯ
    # ================================
    def __init__(self, config_service: ConfigService) -> None:
        """
        🧱 Зчитує налаштування для роботи браузера.

        Args:
            config_service (ConfigService): Джерело конфігурації застосунку.
        """
        self._cfg = config_service

        self._playwright: Optional[Playwright] = None           # 🧠 Обʼєкт Playwright (лінива ініціалізація)
        self._browser: Optional[Browser] = None                 # 🌐 Поточний браузер Chromium
        self._context: Optional[BrowserContext] = None          # 🪟 Браузерний контекст сесії
        self._page: Optional[Page] = None                       # 📄 Єдина вкладка сесії

        self._is_headless: bool = self._cfg.get("webdriver.headless", True, cast=bool)
        self._enable_stealth: bool = self._cfg.get("webdriver.enable_stealth", False, cast=bool)
        self._user_agent: Optional[str] = self._cfg.get("webdriver.user_agent", None, cast=str)
        self._launch_channel: Optional[str] = self._cfg.get("webdriver.launch_channel", None, cast=str)
        self._default_timeout_ms: int = self._cfg.get("probe.load_timeout_ms", 30000, cast=int)

        blocked = self._cfg.get("webdriver.blocked_resource_types", None)
        self._blocked_resources: FrozenSet[str] = (            # 🚫 Типи ресурсів, які не вантажимо
            frozenset(str(item).strip().lower() for item in blocked if str(item).strip())
            if isinstance(blocked, (list, tuple))
            else DEFAULT_BLOCKED_RESOURCES
        )

        logger.debug(
            "✅ WebDriverService: headless=%s, stealth=%s, blocked=%s",
            self._is_headless,
            self._enable_stealth,
            sorted(self._blocked_resources),
        )

    async def __aenter__(self) -> "WebDriverService":
        """🤝 Підтримує шаблон async with: запуск сесії."""
        try:
            await self.startup()
        except BaseException:
            await self.shutdown()                               # 🧹 Прибираємо частково запущене
            raise
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        """🚪 Закриває браузер після виходу з async with."""
        await self.shutdown()

    # ================================
    # 🚪 ЖИТТЄВИЙ ЦИКЛ
    # ================================
    async def startup(self) -> None:
        """
        🔌 Запускає Playwright, Chromium, контекст із фільтром ресурсів і вкладку.

        Raises:
            SessionStartError: Браузер не вдалося запустити.
        """
        if self._page is not None and self._browser and self._browser.is_connected():
            return

        launch_kwargs: Dict[str, Any] = {"headless": self._is_headless}
        if self._launch_channel:
            launch_kwargs["channel"] = self._launch_channel    # 📺 Наприклад, chrome

        try:
            if self._playwright is None:
                self._playwright = await async_playwright().start()
            logger.debug("🚀 Запуск Chromium (headless=%s)…", self._is_headless)
            self._browser = await self._playwright.chromium.launch(**launch_kwargs)
            self._context = await self._browser.new_context(user_agent=self._user_agent)
            await self._context.route("**/*", self._filter_resources)    # 🚫 До першої навігації
            if self._enable_stealth:
                await Stealth().apply_stealth_async(self._context)
            self._page = await self._context.new_page()
        except PlaywrightError as exc:
            logger.error("❌ Не вдалося запустити Chromium: %s", exc)
            raise SessionStartError(str(exc)) from exc
        except Exception as exc:
            logger.error("❌ Неочікуваний збій запуску Chromium: %s", exc)
            logger.debug("🧱 Трасування збою запуску", exc_info=exc)
            raise SessionStartError(f"{type(exc).__name__}: {exc}") from exc
        logger.debug("✅ Chromium готовий до навігації")

    async def shutdown(self) -> None:
        """📴 Завершує сесію браузера та Playwright; безпечно викликати повторно."""
        if self._browser is not None:
            try:
                await self._browser.close()
                logger.debug("🔒 Chromium закрито")
            except PlaywrightError as exc:
                logger.debug("ℹ️ Chromium вже закрито: %s", exc)
        if self._playwright is not None:
            try:
                await self._playwright.stop()
                logger.debug("🔌 Playwright зупинено")
            except PlaywrightError as exc:
                logger.debug("ℹ️ Playwright вже зупинено: %s", exc)
        self._page = None
        self._context = None
        self._browser = None
        self._playwright = None

    # ================================
    # 🌐 ЗАВАНТАЖЕННЯ
    # ================================
    async def load_document(
        self,
        url: str,
        *,
        wait_until: WaitCondition = "domcontentloaded",
        timeout_ms: Optional[int] = None,
    ) -> FetchOutcome:
        """
        🌐 Відкриває `url` у вкладці сесії.

        Args:
            url (str): Адреса сторінки товару.
            wait_until (WaitCondition): Подія, на яку чекаємо після переходу.
            timeout_ms (int | None): Бюджет завантаження, мс.

        Returns:
            FetchOutcome: LOADED(document) | TIMED_OUT | NETWORK_ERROR.
        """
        if not url or not url.startswith(("http://", "https://")):
            err = InvalidUrlError(url=url, detail="посилання повинно мати http(s)://")
            logger.error("❌ %s: %s", err, url)
            return FetchOutcome.network_error(str(err))

        if self._page is None:
            await self.startup()
        page = self._page
        assert page is not None

        budget_ms = int(timeout_ms or self._default_timeout_ms)
        logger.debug("🌍 Завантаження %s (wait_until=%s, timeout=%s мс)", url, wait_until, budget_ms)
        try:
            await page.goto(url, wait_until=wait_until, timeout=budget_ms)
        except PlaywrightTimeoutError as exc:
            err = RequestTimeout(url=url, timeout_ms=budget_ms, detail=_first_line(exc))
            logger.warning("⏳ %s", err, extra=err.to_log_extra())
            return FetchOutcome.timed_out(f"page load exceeded {budget_ms} ms")
        except PlaywrightError as exc:
            err = NetworkError(url=url, detail=_first_line(exc))
            logger.warning("🌐 %s", err, extra=err.to_log_extra())
            return FetchOutcome.network_error(err.details or err.message)

        return FetchOutcome.loaded(PlaywrightDocument(page, url))

    # ================================
    # 🧰 ДОПОМІЖНІ МЕТОДИ
    # ================================
    async def _filter_resources(self, route: Route) -> None:
        """🚫 Обриває запити до заблокованих типів ресурсів."""
        if route.request.resource_type in self._blocked_resources:
            await route.abort()
        else:
            await route.continue_()


__all__ = ["WebDriverService", "DEFAULT_BLOCKED_RESOURCES"]
