# -*- coding: utf-8 -*-
"""Nutritionix API helpers."""

from __future__ import annotations

from typing import Optional

import httpx

from ..config import Settings
from ..upstream import UpstreamResult, call_upstream

SEARCH_FAILED = "Nutritionix search failed"
BARCODE_FAILED = "Nutritionix barcode lookup failed"


def _headers(settings: Settings) -> dict[str, str]:
    return {
        "x-app-id": settings.nutritionix_app_id or "",
        "x-app-key": settings.nutritionix_app_key or "",
    }


async def natural_nutrients(
    query: str,
    *,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> UpstreamResult:
    base = settings.nutritionix_base_url.rstrip("/")
    headers = _headers(settings)
    headers["Content-Type"] = "application/json"
    return await call_upstream(
        "POST",
        f"{base}/natural/nutrients",
        label="Nutritionix search",
        error=SEARCH_FAILED,
        headers=headers,
        json={"query": query},
        timeout=settings.upstream_timeout,
        transport=transport,
    )


async def lookup_barcode(
    upc: str,
    *,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> UpstreamResult:
    # httpx percent-encodes query params, so the UPC goes through untouched.
    base = settings.nutritionix_base_url.rstrip("/")
    return await call_upstream(
        "GET",
        f"{base}/search/item",
        label="Nutritionix barcode",
        error=BARCODE_FAILED,
        headers=_headers(settings),
        params={"upc": upc},
        timeout=settings.upstream_timeout,
        transport=transport,
    )
