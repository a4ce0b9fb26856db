# tests/domain/test_resolution_models.py
import json

import pytest

from skuscout.domain.resolution import (
    AvailabilityVerdict,
    DiagnosticEntry,
    FetchOutcome,
    FetchStatus,
    ProductQuery,
    ProductRecord,
    ResolutionResult,
    ResolutionStatus,
    VerdictKind,
)


def test_query_is_trimmed():
    assert ProductQuery("  B000TEST1 \n").identifier == "B000TEST1"


@pytest.mark.parametrize("raw", ["", "   ", "\t"])
def test_query_rejects_blank(raw):
    with pytest.raises(ValueError):
        ProductQuery(raw)


def test_fetch_outcome_variants():
    assert FetchOutcome.timed_out().status is FetchStatus.TIMED_OUT
    assert not FetchOutcome.network_error("dns").is_loaded
    assert FetchOutcome.network_error("dns").detail == "dns"


def test_verdict_describe():
    assert AvailabilityVerdict.exists().describe() == "exists"
    assert AvailabilityVerdict.not_found("critical element absent").describe() == "not_found: critical element absent"
    assert AvailabilityVerdict.inconclusive("boom").kind is VerdictKind.INCONCLUSIVE


def test_product_record_is_frozen():
    record = ProductRecord(
        title="T",
        description="",
        features=["a", "b"],
        attributes={"Weight": "1 kg"},
        source_market="DE",
        source_url="https://www.amazon.de/dp/X",
    )
    assert record.features == ("a", "b")
    with pytest.raises(TypeError):
        record.attributes["Weight"] = "2 kg"  # type: ignore[index]
    with pytest.raises(AttributeError):
        record.title = "other"  # type: ignore[misc]


def test_result_status_and_json():
    query = ProductQuery("X")
    missing = ResolutionResult(query, None, [DiagnosticEntry("DE", "not_found: error phrase matched", "u")])
    assert missing.status is ResolutionStatus.NOT_FOUND
    assert not missing.found

    record = ProductRecord("T", "D", (), {"k": "v"}, "US", "https://www.amazon.com/dp/X")
    found = ResolutionResult(query, record, (DiagnosticEntry("US", "exists"),), 1.23456)
    payload = json.loads(json.dumps(found.to_dict()))
    assert payload["status"] == "found"
    assert payload["record"]["attributes"] == {"k": "v"}
    assert payload["elapsed_sec"] == 1.235
    assert payload["diagnostics"] == [{"market": "US", "outcome": "exists", "url": ""}]
