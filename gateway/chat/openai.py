# -*- coding: utf-8 -*-
"""OpenAI chat-completions helpers for the /api/ai endpoint."""

from __future__ import annotations

from typing import Optional

import httpx

from ..config import Settings
from ..upstream import UpstreamResult, call_upstream
from .models import ChatRequest

FAILED = "OpenAI request failed"


def _headers(api_key: str) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }


async def create_completion(
    request: ChatRequest,
    *,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> UpstreamResult:
    base = settings.openai_base_url.rstrip("/")
    payload = {
        "model": settings.openai_model,
        "messages": request.messages,
        "max_tokens": request.max_tokens,
        "temperature": request.temperature,
    }
    return await call_upstream(
        "POST",
        f"{base}/chat/completions",
        label="OpenAI API",
        error=FAILED,
        headers=_headers(settings.openai_api_key or ""),
        json=payload,
        timeout=settings.upstream_timeout,
        transport=transport,
    )
