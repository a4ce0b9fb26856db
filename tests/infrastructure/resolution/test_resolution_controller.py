# tests/infrastructure/resolution/test_resolution_controller.py
from unittest.mock import AsyncMock

import pytest

from fakes import MISSING_HTML, PRODUCT_HTML, FakeFetcher, FakeSession
from skuscout.config.config_service import ConfigService
from skuscout.domain.markets import MarketCatalog
from skuscout.domain.resolution import FetchOutcome, ProductQuery, ResolutionStatus
from skuscout.infrastructure.availability import AvailabilityProbe
from skuscout.infrastructure.extraction import AttributeExtractor
from skuscout.infrastructure.resolution import EXTRACTION_FAILED, ResolutionController
from skuscout.shared.errors import SessionStartError

SKU = "B000TEST1"


def _catalog() -> MarketCatalog:
    return MarketCatalog.from_config(ConfigService(load_env=False).get("markets"))


def _controller(session: FakeSession, catalog: MarketCatalog = None, extractor=None) -> ResolutionController:
    return ResolutionController(
        catalog=catalog if catalog is not None else _catalog(),
        probe=AvailabilityProbe(),
        extractor=extractor or AttributeExtractor(),
        session_factory=session,
    )


# ──────────────────────────────────────────────────────────────────────────────
#                          🧪 Сценарії пошуку
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_first_existing_market_wins_and_stops():
    catalog = _catalog()
    urls = [m.url_for(SKU) for m in catalog]
    fetcher = FakeFetcher({urls[0]: MISSING_HTML, urls[1]: MISSING_HTML, urls[2]: MISSING_HTML, urls[3]: PRODUCT_HTML})
    session = FakeSession(fetcher)

    result = await _controller(session, catalog).resolve(ProductQuery(SKU))

    assert result.status is ResolutionStatus.FOUND
    assert result.record.source_market == "FR"
    assert result.record.source_url == urls[3]
    assert result.record.title == "Great bottle"
    assert result.record.description == "Great product"
    assert [d.market for d in result.diagnostics] == ["DE", "IT", "ES", "FR"]
    assert result.diagnostics[-1].outcome == "exists"
    assert fetcher.calls == urls[:4]
    assert (session.entered, session.exited) == (1, 1)


@pytest.mark.asyncio
async def test_all_markets_failing_is_not_found_without_raising():
    fetcher = FakeFetcher({}, default=FetchOutcome.network_error("net::ERR_CONNECTION_RESET"))
    session = FakeSession(fetcher)
    controller = _controller(session)

    result = await controller.resolve(ProductQuery(SKU))

    assert result.status is ResolutionStatus.NOT_FOUND
    assert result.record is None
    assert len(result.diagnostics) == 8
    assert all(d.outcome.startswith("inconclusive") for d in result.diagnostics)
    assert session.exited == 1

    again = await controller.resolve(ProductQuery("B000TEST2"))  # 🔁 наступний запит одразу після
    assert len(again.diagnostics) == 8
    assert session.exited == 2


@pytest.mark.asyncio
async def test_diagnostics_are_catalog_prefix():
    catalog = _catalog().restricted_to(["DE", "US", "CA"])
    urls = [m.url_for(SKU) for m in catalog]
    fetcher = FakeFetcher({urls[0]: FetchOutcome.timed_out(), urls[1]: PRODUCT_HTML})

    result = await _controller(FakeSession(fetcher), catalog).resolve(ProductQuery(SKU))

    assert [d.market for d in result.diagnostics] == list(catalog.codes[: len(result.diagnostics)])
    assert result.record.source_market == "US"


@pytest.mark.asyncio
async def test_unexpected_probe_exception_becomes_inconclusive():
    catalog = _catalog().restricted_to(["DE", "IT"])
    urls = [m.url_for(SKU) for m in catalog]
    fetcher = FakeFetcher({urls[0]: RuntimeError("target closed"), urls[1]: PRODUCT_HTML})

    result = await _controller(FakeSession(fetcher), catalog).resolve(ProductQuery(SKU))

    assert result.found
    assert result.diagnostics[0].outcome.startswith("inconclusive: RuntimeError")


@pytest.mark.asyncio
async def test_empty_catalog_exhausts_without_session():
    session = FakeSession(FakeFetcher({}))
    result = await _controller(session, MarketCatalog([])).resolve(ProductQuery(SKU))

    assert result.status is ResolutionStatus.NOT_FOUND
    assert result.diagnostics == ()
    assert session.entered == 0


# ──────────────────────────────────────────────────────────────────────────────
#                          🧪 Життєвий цикл сесії
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_session_start_failure_is_raised():
    session = FakeSession(FakeFetcher({}), fail_on_enter=SessionStartError("chromium missing"))
    with pytest.raises(SessionStartError):
        await _controller(session).resolve(ProductQuery(SKU))


@pytest.mark.asyncio
async def test_extraction_failure_returns_result_and_releases_session():
    catalog = _catalog().restricted_to(["DE"])
    fetcher = FakeFetcher({catalog[0].url_for(SKU): PRODUCT_HTML})
    session = FakeSession(fetcher)
    extractor = AttributeExtractor()
    extractor.extract = AsyncMock(side_effect=RuntimeError("boom"))

    result = await _controller(session, catalog, extractor).resolve(ProductQuery(SKU))

    assert result.status is ResolutionStatus.NOT_FOUND
    assert result.record is None
    assert [d.market for d in result.diagnostics] == ["DE"]
    assert result.diagnostics[0].outcome == f"exists; {EXTRACTION_FAILED}: RuntimeError: boom"
    assert session.exited == 1
