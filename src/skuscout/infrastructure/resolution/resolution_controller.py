# 🧭 skuscout/infrastructure/resolution/resolution_controller.py
"""
🧭 ResolutionController: автомат станів одного запиту.

🔹 Probing(i) → Found | Exhausted; ринки перевіряються строго по черзі.
🔹 Перший ринок, де товар існує, зупиняє перебір (short-circuit).
🔹 Одна сесія браузера на запит; звільняється на будь-якому виході.
🔹 Збій екстракції не валить запит: результат NOT_FOUND, причина в діагностиці.
🔹 Журнал діагностики = префікс каталогу, по одному рядку на спробу.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
import time
from typing import AsyncContextManager, Callable, List, Optional

# 🧩 Внутрішні модулі проєкту
from skuscout.domain.markets import Market, MarketCatalog
from skuscout.domain.resolution import (
    AvailabilityVerdict,
    DiagnosticEntry,
    FetchOutcome,
    IPageFetcher,
    ProductQuery,
    ProductRecord,
    ResolutionResult,
)
from skuscout.infrastructure.availability import AvailabilityProbe
from skuscout.infrastructure.extraction import AttributeExtractor
from skuscout.shared.metrics import PROBE_TOTAL, RESOLUTION_LATENCY, RESOLUTION_TOTAL
from skuscout.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.resolution")

SessionFactory = Callable[[], AsyncContextManager[IPageFetcher]]

EXTRACTION_FAILED: str = "extraction failed"


def _describe_exc(exc: BaseException) -> str:
    return f"{type(exc).__name__}: {exc}" if str(exc) else type(exc).__name__


class ResolutionController:
    """🧭 Перебирає ринки для одного ідентифікатора й повертає `ResolutionResult`."""

    def __init__(
        self,
        catalog: MarketCatalog,
        probe: AvailabilityProbe,
        extractor: AttributeExtractor,
        session_factory: SessionFactory,
    ) -> None:
        self.catalog = catalog
        self.probe = probe
        self.extractor = extractor
        self._session_factory = session_factory

    async def resolve(self, query: ProductQuery) -> ResolutionResult:
        """
        🧭 Виконує запит від першого ринку каталогу до першого збігу.

        Raises:
            SessionStartError: Сесію не вдалося відкрити (фатально лише для цього запиту).
        """
        started = time.perf_counter()
        if len(self.catalog) == 0:
            logger.warning("⚠️ Каталог ринків порожній, запит %s завершено без перевірок", query.identifier)
            return self._finish(ResolutionResult(query), started)

        logger.info("🔎 Пошук %s на %d ринках: %s", query.identifier, len(self.catalog), ", ".join(self.catalog.codes))
        diagnostics: List[DiagnosticEntry] = []
        record: Optional[ProductRecord] = None

        async with self._session_factory() as fetcher:
            for market in self.catalog:
                url = market.url_for(query.identifier)
                verdict, outcome = await self._probe_market(fetcher, market, query.identifier)
                diagnostics.append(DiagnosticEntry(market.code, verdict.describe(), url))

                if verdict.is_exists and outcome.document is not None:
                    try:
                        fields = await self.extractor.extract(outcome.document)
                    except Exception as exc:                    # noqa: BLE001
                        detail = _describe_exc(exc)
                        logger.error("❌ Екстракція %s на %s впала: %s", query.identifier, market.code, detail)
                        logger.debug("🧱 Трасування збою екстракції", exc_info=exc)
                        diagnostics[-1] = DiagnosticEntry(
                            market.code, f"{verdict.describe()}; {EXTRACTION_FAILED}: {detail}", url
                        )
                        break
                    record = fields.to_record(source_market=market.code, source_url=url)
                    logger.info("✅ %s знайдено на %s", query.identifier, market.code)
                    break

        if record is None:
            logger.info("🚫 %s не знайдено на жодному ринку", query.identifier)
        return self._finish(ResolutionResult(query, record, tuple(diagnostics)), started)

    # ================================
    # 🧰 ДОПОМІЖНІ МЕТОДИ
    # ================================
    async def _probe_market(
        self,
        fetcher: IPageFetcher,
        market: Market,
        identifier: str,
    ) -> tuple[AvailabilityVerdict, FetchOutcome]:
        """Проба одного ринку; неочікуваний виняток → INCONCLUSIVE для цього ринку."""
        try:
            return await self.probe.probe(fetcher, market, identifier)
        except Exception as exc:                                # noqa: BLE001
            detail = _describe_exc(exc)
            logger.error("❌ Проба %s впала: %s", market.code, detail)
            logger.debug("🧱 Трасування збою проби", exc_info=exc)
            PROBE_TOTAL.labels(market=market.code, verdict="inconclusive").inc()
            return AvailabilityVerdict.inconclusive(detail), FetchOutcome.network_error(detail)

    @staticmethod
    def _finish(result: ResolutionResult, started: float) -> ResolutionResult:
        elapsed = time.perf_counter() - started
        RESOLUTION_LATENCY.observe(elapsed)
        RESOLUTION_TOTAL.labels(status=result.status.value).inc()
        return ResolutionResult(result.query, result.record, result.diagnostics, elapsed)


__all__ = ["EXTRACTION_FAILED", "ResolutionController", "SessionFactory"]
