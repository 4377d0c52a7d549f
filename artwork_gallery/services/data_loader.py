"""Paged loading of artworks from the Art Institute of Chicago API."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from artwork_gallery.config import ARTIC_API_URL, ARTWORK_FIELDS, REQUEST_TIMEOUT_SECONDS
from artwork_gallery.errors import FetchError
from artwork_gallery.models import Artwork, PageResult
from artwork_gallery.utils.helpers import normalize_text, parse_optional_int
from artwork_gallery.utils.logging_config import get_logger

logger = get_logger("data_loader")


def parse_artwork(payload: Dict[str, Any], page_index: int) -> Artwork:
    """Build an Artwork from one API record."""
    if not isinstance(payload, dict):
        raise FetchError(page_index, "artwork entry is not an object")

    artwork_id = payload.get("id")
    if isinstance(artwork_id, bool) or not isinstance(artwork_id, int):
        raise FetchError(page_index, f"artwork has no integer id: {artwork_id!r}")

    return Artwork(
        id=artwork_id,
        title=normalize_text(payload.get("title")),
        place_of_origin=normalize_text(payload.get("place_of_origin")),
        artist_display=normalize_text(payload.get("artist_display")),
        inscriptions=normalize_text(payload.get("inscriptions")),
        date_start=parse_optional_int(payload.get("date_start")),
        date_end=parse_optional_int(payload.get("date_end")),
    )


def parse_page_payload(payload: object, page_index: int) -> PageResult:
    """Validate and normalize a paged API response."""
    if not isinstance(payload, dict):
        raise FetchError(page_index, "response body is not an object")

    pagination = payload.get("pagination")
    if not isinstance(pagination, dict):
        raise FetchError(page_index, "response has no pagination block")

    total = pagination.get("total")
    if isinstance(total, bool) or not isinstance(total, int) or total < 0:
        raise FetchError(page_index, f"invalid total count: {total!r}")

    raw_records = payload.get("data") or []
    if not isinstance(raw_records, list):
        raise FetchError(page_index, "response data is not a list")

    records: List[Artwork] = [parse_artwork(entry, page_index) for entry in raw_records]
    return PageResult(records=tuple(records), total_count=total)


class ArticPageLoader:
    """Fetch one page of artworks at a time."""

    def __init__(
        self,
        base_url: str = ARTIC_API_URL,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.client = client
        self.timeout = timeout

    def build_params(self, page_index: int, page_size: int) -> Dict[str, object]:
        """Return query parameters for one page request."""
        return {
            "page": page_index,
            "limit": page_size,
            "fields": ",".join(ARTWORK_FIELDS),
        }

    async def fetch_page(self, page_index: int, page_size: int) -> PageResult:
        """Fetch and parse one page. Every failure surfaces as FetchError."""
        url = f"{self.base_url}/artworks"
        params = self.build_params(page_index, page_size)
        logger.debug("GET %s page=%d limit=%d", url, page_index, page_size)

        try:
            if self.client is not None:
                response = await self.client.get(url, params=params, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as tmp_client:
                    response = await tmp_client.get(url, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise FetchError(page_index, f"server returned {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise FetchError(page_index, f"request failed ({exc.__class__.__name__})") from exc
        except ValueError as exc:
            raise FetchError(page_index, "response is not valid JSON") from exc

        result = parse_page_payload(payload, page_index)
        logger.debug(
            "Page %d returned %d records (total=%d)",
            page_index,
            len(result.records),
            result.total_count,
        )
        return result
