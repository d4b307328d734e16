"""Tests for the palettes API client.

Mocking strategy:
- ``respx`` patches ``httpx`` at the transport layer so no real network calls
  are made during ``fetch_page`` tests.
- ``settings.api_url`` is pointed at a fake host for every test.
"""

from __future__ import annotations

import httpx
import pytest
import respx

from gradients.fetcher.client import MalformedPageError, fetch_page, parse_records
from gradients.fetcher.models import PageRequest, RawRecord

_API_URL = "https://palettes.test/api/palettes/top"

_PAGE = [
    {
        "id": 92095,
        "title": "Giant Goldfish",
        "colors": ["69D2E7", "A7DBD8", "E0E4CC", "F38630", "FA6900"],
        "colorWidths": [0.2, 0.2, 0.2, 0.2, 0.2],
        "url": "http://www.colourlovers.com/palette/92095/Giant_Goldfish",
    },
    {
        "id": 629637,
        "title": "(* ^ ω ^)",
        "colors": ["FE4365", "FC9D9A"],
        "colorWidths": [0.5, 0.5],
        "url": "http://www.colourlovers.com/palette/629637",
    },
]


@pytest.fixture(autouse=True)
def fake_api(monkeypatch):
    monkeypatch.setattr("gradients.config.settings.api_url", _API_URL)


# ---------------------------------------------------------------------------
# PageRequest
# ---------------------------------------------------------------------------

class TestPageRequest:
    def test_params(self) -> None:
        assert PageRequest(offset=200, page_size=100).params() == {
            "format": "json",
            "showPaletteWidths": 1,
            "numResults": 100,
            "resultOffset": 200,
        }

    def test_negative_offset_rejected(self) -> None:
        with pytest.raises(ValueError):
            PageRequest(offset=-1, page_size=10)

    def test_zero_page_size_rejected(self) -> None:
        with pytest.raises(ValueError):
            PageRequest(offset=0, page_size=0)


# ---------------------------------------------------------------------------
# parse_records
# ---------------------------------------------------------------------------

class TestParseRecords:
    def test_parses_all_fields(self) -> None:
        records = parse_records(_PAGE)
        assert len(records) == 2
        first = records[0]
        assert isinstance(first, RawRecord)
        assert first.id == 92095
        assert first.title == "Giant Goldfish"
        assert first.colors == ["69D2E7", "A7DBD8", "E0E4CC", "F38630", "FA6900"]
        assert first.color_widths == [0.2, 0.2, 0.2, 0.2, 0.2]

    def test_string_widths_coerced_to_float(self) -> None:
        records = parse_records([{"colors": ["000000"], "colorWidths": ["1"]}])
        assert records[0].color_widths == [1.0]

    def test_optional_fields_default(self) -> None:
        record = parse_records([{"colors": [], "colorWidths": []}])[0]
        assert record.id is None
        assert record.title == ""
        assert record.url == ""

    def test_empty_page(self) -> None:
        assert parse_records([]) == []

    def test_non_list_payload_raises(self) -> None:
        with pytest.raises(MalformedPageError):
            parse_records({"error": "rate limited"})

    def test_non_object_item_raises(self) -> None:
        with pytest.raises(MalformedPageError):
            parse_records(["69D2E7"])

    def test_missing_colors_raises(self) -> None:
        with pytest.raises(MalformedPageError):
            parse_records([{"colorWidths": [1.0]}])

    def test_non_numeric_width_raises(self) -> None:
        with pytest.raises(MalformedPageError):
            parse_records([{"colors": ["000000"], "colorWidths": ["wide"]}])


# ---------------------------------------------------------------------------
# fetch_page
# ---------------------------------------------------------------------------

class TestFetchPage:
    def test_sends_pagination_params(self) -> None:
        with respx.mock:
            route = respx.get(_API_URL).mock(return_value=httpx.Response(200, json=_PAGE))
            records = fetch_page(PageRequest(offset=20, page_size=10))

        assert route.call_count == 1
        params = route.calls.last.request.url.params
        assert params["format"] == "json"
        assert params["showPaletteWidths"] == "1"
        assert params["numResults"] == "10"
        assert params["resultOffset"] == "20"
        assert [r.id for r in records] == [92095, 629637]

    def test_uses_given_client(self) -> None:
        with respx.mock:
            respx.get(_API_URL).mock(return_value=httpx.Response(200, json=_PAGE))
            with httpx.Client() as client:
                records = fetch_page(PageRequest(offset=0, page_size=2), client=client)

        assert len(records) == 2

    def test_http_error_raises(self) -> None:
        """A 500 response raises ``httpx.HTTPStatusError``."""
        with respx.mock:
            respx.get(_API_URL).mock(return_value=httpx.Response(500, text="oops"))
            with pytest.raises(httpx.HTTPStatusError):
                fetch_page(PageRequest(offset=0, page_size=10))

    def test_transport_error_raises(self) -> None:
        with respx.mock:
            respx.get(_API_URL).mock(side_effect=httpx.ConnectError("refused"))
            with pytest.raises(httpx.HTTPError):
                fetch_page(PageRequest(offset=0, page_size=10))

    def test_invalid_json_raises_malformed(self) -> None:
        with respx.mock:
            respx.get(_API_URL).mock(
                return_value=httpx.Response(200, text="<html>maintenance</html>")
            )
            with pytest.raises(MalformedPageError):
                fetch_page(PageRequest(offset=0, page_size=10))

    def test_does_not_retry(self) -> None:
        with respx.mock:
            route = respx.get(_API_URL).mock(return_value=httpx.Response(503))
            with pytest.raises(httpx.HTTPStatusError):
                fetch_page(PageRequest(offset=0, page_size=10))

        assert route.call_count == 1
