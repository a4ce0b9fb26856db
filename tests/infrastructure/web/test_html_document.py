# tests/infrastructure/web/test_html_document.py
import pytest

from skuscout.domain.resolution import IDocument
from skuscout.infrastructure.web import HtmlDocument


@pytest.mark.asyncio
async def test_query_text_normalizes_whitespace(product_html):
    doc = HtmlDocument.from_html(product_html, url="https://www.amazon.de/dp/X")
    assert isinstance(doc, IDocument)
    assert await doc.query_text("#productTitle") == "Steel Water Bottle 750 ml"
    assert await doc.query_text("#nope") is None


@pytest.mark.asyncio
async def test_wait_for_element_is_presence_check(product_html):
    doc = HtmlDocument.from_html(product_html)
    assert await doc.wait_for_element("#productTitle", timeout_ms=1) is True
    assert await doc.wait_for_element("#missing", timeout_ms=1) is False


@pytest.mark.asyncio
async def test_query_all_and_element_queries(product_html):
    doc = HtmlDocument.from_html(product_html)
    rows = await doc.query_all(".a-keyvalue.prodDetTable tbody tr")
    assert len(rows) == 3
    assert await rows[0].query_text("th") == "Item Weight"
    assert await rows[0].text() == "Item Weight 350 g"
    assert await doc.query_all(".does-not-exist") == []


@pytest.mark.asyncio
async def test_from_file_uses_file_uri_by_default(tmp_path):
    page = tmp_path / "page.html"
    page.write_text("<html><body><h1>Hi</h1></body></html>", encoding="utf-8")
    doc = HtmlDocument.from_file(page)
    assert doc.url.startswith("file://")
    assert await doc.query_text("h1") == "Hi"
