# -*- coding: utf-8 -*-
"""Chat — API endpoint."""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from fastapi import APIRouter, Depends

from ..config import Settings
from ..dependencies import get_settings, get_transport
from ..faults import envelope_response, missing_credentials
from ..upstream import relay_or_envelope
from .models import ChatRequest
from .openai import create_completion

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Chat"])


@router.post("/ai", summary="Forward a chat completion to OpenAI")
async def chat_completion(
    request: ChatRequest,
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_transport),
):
    if not settings.openai_api_key:
        logger.error("Missing OPENAI_API_KEY")
        return envelope_response(missing_credentials("Server is missing OPENAI_API_KEY. Check Render env."))

    result = await create_completion(request, settings=settings, transport=transport)
    return relay_or_envelope(result)
