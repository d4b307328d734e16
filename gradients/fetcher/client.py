"""HTTP client for the remote palettes API.

One call fetches one page.  Failures are raised to the caller unchanged; there
is no retry here.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from gradients.config import settings
from gradients.fetcher.models import PageRequest, RawRecord

logger = logging.getLogger(__name__)

_DEFAULT_HEADERS = {
    "User-Agent": "gradients-palette-fetcher/1.0",
    "Accept": "application/json",
}


class MalformedPageError(ValueError):
    """The API answered, but the body is not a list of palette records."""


def make_client() -> httpx.Client:
    """Return an :class:`httpx.Client` configured from :data:`settings`."""
    return httpx.Client(
        headers=_DEFAULT_HEADERS,
        timeout=settings.request_timeout,
        follow_redirects=True,
    )


def parse_records(payload: Any) -> list[RawRecord]:
    """Turn a decoded JSON page into :class:`RawRecord` objects.

    Only structural access is performed: each item must be an object carrying
    ``colors`` and ``colorWidths`` lists.  ``id``, ``title`` and ``url`` are
    optional.

    Raises:
        MalformedPageError: If *payload* does not have that structure.
    """
    if not isinstance(payload, list):
        raise MalformedPageError(
            f"expected a JSON array of palettes, got {type(payload).__name__}"
        )

    records: list[RawRecord] = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise MalformedPageError(f"record {index} is not an object")
        colors = item.get("colors")
        widths = item.get("colorWidths")
        if not isinstance(colors, list) or not isinstance(widths, list):
            raise MalformedPageError(
                f"record {index} is missing 'colors' or 'colorWidths'"
            )
        try:
            color_widths = [float(w) for w in widths]
        except (TypeError, ValueError) as exc:
            raise MalformedPageError(
                f"record {index} has a non-numeric colour width"
            ) from exc
        records.append(
            RawRecord(
                colors=[str(c) for c in colors],
                color_widths=color_widths,
                id=item.get("id"),
                title=item.get("title") or "",
                url=item.get("url") or "",
            )
        )
    return records


def fetch_page(request: PageRequest, client: httpx.Client | None = None) -> list[RawRecord]:
    """Fetch one page of palettes described by *request*.

    When *client* is omitted a short-lived client is opened for this call.

    Raises:
        httpx.HTTPStatusError: If the server returns a 4xx/5xx status code.
        httpx.HTTPError: On any other transport failure.
        MalformedPageError: If the body is not a JSON array of palettes.
    """
    if client is None:
        with make_client() as own_client:
            return fetch_page(request, own_client)

    logger.debug("GET %s offset=%d size=%d", settings.api_url, request.offset, request.page_size)
    response = client.get(settings.api_url, params=request.params())
    response.raise_for_status()

    try:
        payload = response.json()
    except ValueError as exc:
        raise MalformedPageError(
            f"response at offset {request.offset} is not valid JSON"
        ) from exc

    return parse_records(payload)
