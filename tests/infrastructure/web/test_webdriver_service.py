# tests/infrastructure/web/test_webdriver_service.py
from unittest.mock import AsyncMock, MagicMock

import pytest
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

import skuscout.infrastructure.web.webdriver_service as wd_mod
from skuscout.config.config_service import ConfigService
from skuscout.domain.resolution import FetchOutcome, FetchStatus, VerdictKind
from skuscout.infrastructure.availability import AvailabilityProbe
from skuscout.infrastructure.web import PlaywrightDocument, WebDriverService
from skuscout.shared.errors import SessionStartError


# ──────────────────────────────────────────────────────────────────────────────
#                          🔧 Фейковий Playwright
# ──────────────────────────────────────────────────────────────────────────────

def _fake_playwright(monkeypatch, *, launch_error=None):
    page = MagicMock()
    page.goto = AsyncMock()

    context = MagicMock()
    context.route = AsyncMock()
    context.new_page = AsyncMock(return_value=page)

    browser = MagicMock()
    browser.new_context = AsyncMock(return_value=context)
    browser.is_connected = MagicMock(return_value=True)
    browser.close = AsyncMock()

    pw = MagicMock()
    pw.chromium.launch = AsyncMock(return_value=browser, side_effect=launch_error)
    pw.stop = AsyncMock()

    starter = MagicMock()
    starter.start = AsyncMock(return_value=pw)
    monkeypatch.setattr(wd_mod, "async_playwright", MagicMock(return_value=starter))
    return pw, browser, context, page


def _service(**overrides) -> WebDriverService:
    data = {
        "webdriver": {"headless": True, "user_agent": "skuscout-test", "blocked_resource_types": ["image", "font"]},
        "probe": {"load_timeout_ms": 30000},
    }
    for key, value in overrides.items():
        data["webdriver"][key] = value
    return WebDriverService(ConfigService.from_mapping(data))


# ──────────────────────────────────────────────────────────────────────────────
#                          🧪 Життєвий цикл
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_session_installs_route_before_first_page(monkeypatch):
    pw, browser, context, _page = _fake_playwright(monkeypatch)

    async with _service() as service:
        assert isinstance(service, WebDriverService)

    pw.chromium.launch.assert_awaited_once_with(headless=True)
    browser.new_context.assert_awaited_once_with(user_agent="skuscout-test")
    context.route.assert_awaited_once()
    assert context.route.await_args.args[0] == "**/*"
    context.new_page.assert_awaited_once()
    browser.close.assert_awaited_once()
    pw.stop.assert_awaited_once()


@pytest.mark.asyncio
async def test_launch_failure_raises_session_start_error(monkeypatch):
    pw, *_ = _fake_playwright(monkeypatch, launch_error=PlaywrightError("Executable doesn't exist"))

    with pytest.raises(SessionStartError):
        async with _service():
            pass
    pw.stop.assert_awaited_once()


@pytest.mark.asyncio
async def test_unexpected_launch_failure_is_session_start_error(monkeypatch):
    pw, *_ = _fake_playwright(monkeypatch, launch_error=OSError("no display"))

    with pytest.raises(SessionStartError) as info:
        async with _service():
            pass
    assert "OSError: no display" in info.value.details
    pw.stop.assert_awaited_once()


@pytest.mark.asyncio
async def test_route_handler_blocks_configured_types():
    service = _service()
    for resource_type, blocked in (("image", True), ("font", True), ("document", False), ("script", False)):
        route = MagicMock()
        route.request.resource_type = resource_type
        route.abort = AsyncMock()
        route.continue_ = AsyncMock()
        await service._filter_resources(route)
        assert route.abort.await_count == int(blocked)
        assert route.continue_.await_count == int(not blocked)


# ──────────────────────────────────────────────────────────────────────────────
#                          🧪 Завантаження
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_load_document_success(monkeypatch):
    _pw, _browser, _context, page = _fake_playwright(monkeypatch)
    async with _service() as service:
        outcome = await service.load_document("https://www.amazon.de/dp/X", timeout_ms=1000)

    assert outcome.status is FetchStatus.LOADED
    assert isinstance(outcome.document, PlaywrightDocument)
    page.goto.assert_awaited_once_with("https://www.amazon.de/dp/X", wait_until="domcontentloaded", timeout=1000)


@pytest.mark.asyncio
async def test_load_document_timeout(monkeypatch):
    _pw, _browser, _context, page = _fake_playwright(monkeypatch)
    page.goto.side_effect = PlaywrightTimeoutError("Timeout 30000ms exceeded.")
    async with _service() as service:
        outcome = await service.load_document("https://www.amazon.de/dp/X")
    assert outcome.status is FetchStatus.TIMED_OUT


@pytest.mark.asyncio
async def test_load_document_network_error(monkeypatch):
    _pw, _browser, _context, page = _fake_playwright(monkeypatch)
    page.goto.side_effect = PlaywrightError("net::ERR_NAME_NOT_RESOLVED")
    async with _service() as service:
        outcome = await service.load_document("https://www.amazon.de/dp/X")
    assert outcome.status is FetchStatus.NETWORK_ERROR
    assert "ERR_NAME_NOT_RESOLVED" in outcome.detail


@pytest.mark.asyncio
async def test_invalid_url_is_network_error_without_navigation(monkeypatch):
    _pw, _browser, _context, page = _fake_playwright(monkeypatch)
    async with _service() as service:
        outcome = await service.load_document("amazon.de/dp/X")
    assert outcome.status is FetchStatus.NETWORK_ERROR
    page.goto.assert_not_awaited()


# ──────────────────────────────────────────────────────────────────────────────
#                          🧪 Критичний маркер
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_wait_for_element_timeout_is_false():
    page = MagicMock()
    page.wait_for_selector = AsyncMock(side_effect=PlaywrightTimeoutError("Timeout 5000ms exceeded."))
    document = PlaywrightDocument(page, "https://www.amazon.de/dp/X")

    assert await document.wait_for_element("#productTitle", timeout_ms=5000) is False
    page.wait_for_selector.assert_awaited_once_with("#productTitle", timeout=5000, state="attached")


@pytest.mark.asyncio
async def test_marker_timeout_on_live_page_is_not_found():
    page = MagicMock()
    page.wait_for_selector = AsyncMock(side_effect=PlaywrightTimeoutError("Timeout 5000ms exceeded."))
    page.query_selector = AsyncMock(return_value=None)
    outcome = FetchOutcome.loaded(PlaywrightDocument(page, "https://www.amazon.de/dp/X"))

    verdict = await AvailabilityProbe().classify(outcome)

    assert verdict.kind is VerdictKind.NOT_FOUND
    assert verdict.describe() == "not_found: critical element absent"
