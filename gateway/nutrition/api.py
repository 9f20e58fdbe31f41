# -*- coding: utf-8 -*-
"""Nutrition domain — API endpoints."""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from fastapi import APIRouter, Depends

from ..config import Settings
from ..dependencies import get_settings, get_transport
from ..faults import bad_request, envelope_response, missing_credentials
from ..upstream import relay_or_envelope
from .models import NutritionSearchRequest
from .nutritionix import lookup_barcode, natural_nutrients

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/nutritionix", tags=["Nutrition"])

MISSING_CREDENTIALS = "Server missing Nutritionix credentials"


def _credentials_missing(settings: Settings) -> bool:
    if settings.has_nutritionix_credentials:
        return False
    logger.error("Missing Nutritionix keys")
    return True


@router.post("/search", summary="Natural-language nutrient search")
async def nutrition_search(
    request: Optional[NutritionSearchRequest] = None,
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_transport),
):
    if _credentials_missing(settings):
        return envelope_response(missing_credentials(MISSING_CREDENTIALS))
    if request is None or request.is_blank:
        logger.info("Rejected nutrition search with blank query")
        return envelope_response(bad_request("Missing query"))

    result = await natural_nutrients(request.query, settings=settings, transport=transport)
    return relay_or_envelope(result)


@router.get("/barcode/{upc}", summary="Look up a packaged food by UPC")
async def nutrition_barcode(
    upc: str,
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_transport),
):
    if _credentials_missing(settings):
        return envelope_response(missing_credentials(MISSING_CREDENTIALS))

    result = await lookup_barcode(upc, settings=settings, transport=transport)
    return relay_or_envelope(result)
