# -*- coding: utf-8 -*-
"""Single outbound call to an upstream API, reported as a result value."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import httpx
from fastapi import Response

from .faults import Fault, FaultKind, envelope_response

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Relayed:
    """A successful upstream reply, kept as the raw JSON bytes."""

    content: bytes


UpstreamResult = Union[Relayed, Fault]


async def call_upstream(
    method: str,
    url: str,
    *,
    label: str,
    error: str,
    headers: Dict[str, str],
    json: Any = None,
    params: Optional[Dict[str, str]] = None,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> UpstreamResult:
    """Issue exactly one request and classify the outcome.

    Non-2xx replies become an upstream fault that keeps the status code and the
    raw body; network errors and 2xx bodies that are not JSON become a
    transport fault. Nothing is retried.
    """
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport, follow_redirects=True) as client:
            resp = await client.request(method, url, headers=headers, json=json, params=params)
            if not resp.is_success:
                body = resp.text
                logger.error("%s error: %s %s", label, resp.status_code, body)
                return Fault(FaultKind.upstream, error, status=resp.status_code, details=body)
            resp.json()  # raises on a non-JSON body
    except (httpx.HTTPError, ValueError) as exc:
        logger.error("%s exception: %s", label, exc, exc_info=True)
        return Fault(FaultKind.transport, f"{error} (exception)")
    return Relayed(content=resp.content)


def relay_or_envelope(result: UpstreamResult) -> Response:
    if isinstance(result, Fault):
        return envelope_response(result)
    return Response(content=result.content, status_code=200, media_type="application/json")
