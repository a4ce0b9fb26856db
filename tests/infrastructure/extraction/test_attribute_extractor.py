# tests/infrastructure/extraction/test_attribute_extractor.py
from unittest.mock import AsyncMock, MagicMock

import pytest

from skuscout.config.config_service import ConfigService
from skuscout.infrastructure.extraction import (
    AttributeExtractor,
    ExtractionPlan,
    NOTE_DESCRIPTION_MISSING,
    merge_attributes,
)
from skuscout.infrastructure.web import HtmlDocument
from skuscout.shared.errors import ConfigError


# ──────────────────────────────────────────────────────────────────────────────
#                          🧪 Сторінка з обома схемами
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_extracts_all_fields(product_html):
    fields = await AttributeExtractor().extract(HtmlDocument.from_html(product_html))

    assert fields.title == "Steel Water Bottle 750 ml"
    assert fields.description == "Double-walled stainless steel."
    assert fields.features == ("Keeps drinks cold for 24 hours", "Leak-proof lid")
    assert fields.description_list == ("BPA free", "Dishwasher safe")
    assert fields.notes == ()


@pytest.mark.asyncio
async def test_attribute_schemas_merge_first_writer_wins(product_html):
    fields = await AttributeExtractor().extract(HtmlDocument.from_html(product_html))

    assert dict(fields.attributes) == {"Item Weight": "350 g", "Colour": "Silver", "ASIN": "B000TEST01"}
    assert list(fields.attributes) == ["Item Weight", "Colour", "ASIN"]
    assert dict(fields.attribute_sources["product_table"]) == {"Item Weight": "350 g", "Colour": "Silver"}
    assert dict(fields.attribute_sources["detail_bullets"]) == {"Colour": "Black", "ASIN": "B000TEST01"}


@pytest.mark.asyncio
async def test_repeated_key_within_one_table_keeps_last_row():
    html = """
    <table class="a-keyvalue prodDetTable"><tbody>
      <tr><th>Colour</th><td>Silver</td></tr>
      <tr><th>Size</th><td>750 ml</td></tr>
      <tr><th>Colour</th><td>Matte Silver</td></tr>
    </tbody></table>
    """
    fields = await AttributeExtractor().extract(HtmlDocument.from_html(html))

    assert dict(fields.attribute_sources["product_table"]) == {"Colour": "Matte Silver", "Size": "750 ml"}
    assert list(fields.attributes) == ["Colour", "Size"]


@pytest.mark.asyncio
async def test_detail_bullets_only_page(detail_bullets_html):
    fields = await AttributeExtractor().extract(HtmlDocument.from_html(detail_bullets_html))

    assert fields.title == "Notebook A5"
    assert fields.description == "Dotted pages, 160 sheets"
    assert fields.features == ()
    assert dict(fields.attributes) == {"Publisher": "Paperworks", "Dimensions": "21 x 14.8 x 1.5 cm"}


# ──────────────────────────────────────────────────────────────────────────────
#                          🧪 Нульові значення та каскади
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_empty_document_yields_zero_values():
    fields = await AttributeExtractor().extract(HtmlDocument.from_html("<html><body></body></html>"))

    assert fields.title == ""
    assert fields.description == ""
    assert fields.features == ()
    assert dict(fields.attributes) == {}
    assert fields.description_list == ()
    assert fields.notes == (NOTE_DESCRIPTION_MISSING,)


@pytest.mark.asyncio
async def test_description_falls_back_to_second_strategy():
    html = """
    <div id="productDescription"><p>   </p></div>
    <div class="a-section a-spacing-medium"><div id="productOverview_feature_div">Great product</div></div>
    """
    fields = await AttributeExtractor().extract(HtmlDocument.from_html(html))
    assert fields.description == "Great product"
    assert NOTE_DESCRIPTION_MISSING not in fields.notes


@pytest.mark.asyncio
async def test_strategy_exceptions_become_empty_attempts():
    document = MagicMock()
    document.url = "https://www.amazon.de/dp/X"
    document.query_text = AsyncMock(side_effect=RuntimeError("execution context was destroyed"))
    document.query_all = AsyncMock(side_effect=RuntimeError("execution context was destroyed"))

    fields = await AttributeExtractor().extract(document)

    assert fields.title == ""
    assert dict(fields.attributes) == {}
    assert fields.notes == (NOTE_DESCRIPTION_MISSING,)


def test_merge_attributes_is_deterministic():
    legacy = {"Colour": "Silver", "Weight": "1 kg"}
    current = {"Colour": "Black", "ASIN": "B01"}
    merged = merge_attributes([legacy, current])
    assert merged == {"Colour": "Silver", "Weight": "1 kg", "ASIN": "B01"}
    assert list(merged) == ["Colour", "Weight", "ASIN"]
    assert merge_attributes([current, legacy])["Colour"] == "Black"
    assert merge_attributes([]) == {}


# ──────────────────────────────────────────────────────────────────────────────
#                          🧪 План із конфігурації
# ──────────────────────────────────────────────────────────────────────────────

def test_plan_from_packaged_config_matches_defaults():
    plan = ExtractionPlan.from_config(ConfigService(load_env=False).section("extraction"))
    assert plan == ExtractionPlan.default()
    assert [s.name for s in plan.attributes] == ["product_table", "detail_bullets"]


def test_plan_overrides_single_field():
    plan = ExtractionPlan.from_config({"title": "h1.custom"})
    assert [s.selector for s in plan.title] == ["h1.custom"]
    assert len(plan.description) == 2


def test_plan_rejects_incomplete_attribute_strategy():
    with pytest.raises(ConfigError):
        ExtractionPlan.from_config({"attributes": [{"name": "broken", "rows": "tr"}]})
