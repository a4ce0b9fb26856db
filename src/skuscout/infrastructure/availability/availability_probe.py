# 🔎 skuscout/infrastructure/availability/availability_probe.py
"""
🔎 AvailabilityProbe: перевіряє, чи існує товар на одній вітрині.

🔹 Завантажує сторінку через `IPageFetcher` (бюджет T_load).
🔹 Чекає критичний маркер (бюджет T_critical < T_load); немає маркера → NOT_FOUND.
🔹 Шукає фрази-ознаки помилки в заголовках сторінки; збіг → NOT_FOUND.
🔹 Таймаут завантаження чи мережевий збій → INCONCLUSIVE. Без повторних спроб.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                  # 🧾 Логування вердиктів
from typing import Iterable, Optional, Tuple

# 🧩 Внутрішні модулі проєкту
from skuscout.config.config_service import ConfigService        # ⚙️ Таймаути та маркери
from skuscout.domain.markets import Market
from skuscout.domain.resolution import (
    REASON_CRITICAL_ABSENT,
    REASON_ERROR_PHRASE,
    AvailabilityVerdict,
    FetchOutcome,
    IDocument,
    IPageFetcher,
    WaitCondition,
)
from skuscout.shared.errors import ConfigError
from skuscout.shared.metrics import PROBE_TOTAL                 # 📊 Лічильник вердиктів
from skuscout.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.probe")

DEFAULT_LOAD_TIMEOUT_MS: int = 30000
DEFAULT_CRITICAL_TIMEOUT_MS: int = 5000
DEFAULT_CRITICAL_MARKER: str = "#productTitle"
DEFAULT_TEXT_SIGNALS: Tuple[str, ...] = ("title", "h1", "h2")
DEFAULT_NOT_FOUND_PHRASES: Tuple[str, ...] = (
    "page not found",
    "no results for",
    "product does not exist",
)

ProbeResult = Tuple[AvailabilityVerdict, FetchOutcome]


class AvailabilityProbe:
    """
    🔎 Класифікує сторінку однієї вітрини: EXISTS / NOT_FOUND / INCONCLUSIVE.

    Проба не тримає стану між викликами; сесію (fetcher) їй передає контролер.
    """

    def __init__(
        self,
        *,
        load_timeout_ms: int = DEFAULT_LOAD_TIMEOUT_MS,
        critical_timeout_ms: int = DEFAULT_CRITICAL_TIMEOUT_MS,
        critical_marker: str = DEFAULT_CRITICAL_MARKER,
        text_signals: Iterable[str] = DEFAULT_TEXT_SIGNALS,
        not_found_phrases: Iterable[str] = DEFAULT_NOT_FOUND_PHRASES,
        wait_until: WaitCondition = "domcontentloaded",
    ) -> None:
        if load_timeout_ms <= 0 or critical_timeout_ms <= 0:
            raise ConfigError("Таймаути мають бути додатними", details=f"{load_timeout_ms}/{critical_timeout_ms}")
        if critical_timeout_ms >= load_timeout_ms:
            raise ConfigError(
                "critical_timeout_ms має бути меншим за load_timeout_ms",
                details=f"{critical_timeout_ms} >= {load_timeout_ms}",
            )
        if not critical_marker:
            raise ConfigError("Критичний маркер не задано")

        self.load_timeout_ms = int(load_timeout_ms)
        self.critical_timeout_ms = int(critical_timeout_ms)
        self.critical_marker = critical_marker
        self.text_signals: Tuple[str, ...] = tuple(s for s in text_signals if s)
        self.not_found_phrases: Tuple[str, ...] = tuple(
            p.strip().lower() for p in not_found_phrases if p and p.strip()
        )
        self.wait_until = wait_until

    @classmethod
    def from_config(cls, config: ConfigService) -> "AvailabilityProbe":
        """🏭 Створює пробу з розділу `probe` конфігурації."""
        return cls(
            load_timeout_ms=config.get("probe.load_timeout_ms", DEFAULT_LOAD_TIMEOUT_MS, cast=int),
            critical_timeout_ms=config.get("probe.critical_timeout_ms", DEFAULT_CRITICAL_TIMEOUT_MS, cast=int),
            critical_marker=config.get("probe.critical_marker", DEFAULT_CRITICAL_MARKER, cast=str),
            text_signals=config.get("probe.text_signals", DEFAULT_TEXT_SIGNALS) or (),
            not_found_phrases=config.get("probe.not_found_phrases", DEFAULT_NOT_FOUND_PHRASES) or (),
            wait_until=config.get("probe.wait_until", "domcontentloaded", cast=str),
        )

    # ================================
    # 📮 ПУБЛІЧНИЙ API
    # ================================
    async def probe(self, fetcher: IPageFetcher, market: Market, identifier: str) -> ProbeResult:
        """
        🔎 Перевіряє один ринок.

        Args:
            fetcher (IPageFetcher): Відкрита сесія браузера.
            market (Market): Вітрина, яку перевіряємо.
            identifier (str): Ідентифікатор товару.

        Returns:
            (AvailabilityVerdict, FetchOutcome): вердикт і результат завантаження
            (документ потрібен екстрактору, якщо товар існує).
        """
        url = market.url_for(identifier)
        outcome = await fetcher.load_document(url, wait_until=self.wait_until, timeout_ms=self.load_timeout_ms)
        verdict = await self.classify(outcome)

        PROBE_TOTAL.labels(market=market.code, verdict=verdict.kind.value).inc()
        logger.info(
            "%s %s → %s",
            verdict.kind.emoji(),
            market.code,
            verdict.describe(),
            extra={"market": market.code, "url": url, "verdict": verdict.kind.value},
        )
        return verdict, outcome

    async def classify(self, outcome: FetchOutcome) -> AvailabilityVerdict:
        """⚖️ Перетворює результат завантаження на вердикт."""
        if not outcome.is_loaded:
            return AvailabilityVerdict.inconclusive(outcome.detail or outcome.status.value)

        document = outcome.document
        assert document is not None
        if not await document.wait_for_element(self.critical_marker, timeout_ms=self.critical_timeout_ms):
            return AvailabilityVerdict.not_found(REASON_CRITICAL_ABSENT)

        for signal in self.text_signals:
            text = (await self._read_signal(document, signal)).lower()
            if text and any(phrase in text for phrase in self.not_found_phrases):
                logger.debug("🚫 Фраза помилки в <%s>: %r", signal, text[:120])
                return AvailabilityVerdict.not_found(REASON_ERROR_PHRASE)

        return AvailabilityVerdict.exists()

    # ================================
    # 🧰 ДОПОМІЖНІ МЕТОДИ
    # ================================
    @staticmethod
    async def _read_signal(document: IDocument, selector: str) -> str:
        """Текст сигналу; будь-яка помилка читання → порожній рядок."""
        try:
            text: Optional[str] = await document.query_text(selector)
        except Exception as exc:                                # noqa: BLE001
            logger.debug("⚠️ Не вдалося прочитати %s: %s", selector, exc)
            return ""
        return text or ""


__all__ = [
    "AvailabilityProbe",
    "DEFAULT_CRITICAL_MARKER",
    "DEFAULT_CRITICAL_TIMEOUT_MS",
    "DEFAULT_LOAD_TIMEOUT_MS",
    "DEFAULT_NOT_FOUND_PHRASES",
    "DEFAULT_TEXT_SIGNALS",
    "ProbeResult",
]
