# -*- coding: utf-8 -*-
"""Fault taxonomy and the error envelope every failed request returns."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from fastapi.responses import JSONResponse
from pydantic import BaseModel


class FaultKind(str, Enum):
    configuration = "configuration"
    client = "client"
    upstream = "upstream"
    transport = "transport"


class ErrorEnvelope(BaseModel):
    error: str
    status: Optional[int] = None
    details: Optional[str] = None


@dataclass(frozen=True)
class Fault:
    kind: FaultKind
    error: str
    status: Optional[int] = None
    details: Optional[str] = None

    @property
    def http_status(self) -> int:
        # Only caller mistakes are 4xx; anything on our side or upstream is a 500.
        return 400 if self.kind is FaultKind.client else 500

    def envelope(self) -> ErrorEnvelope:
        return ErrorEnvelope(error=self.error, status=self.status, details=self.details)


def missing_credentials(error: str) -> Fault:
    return Fault(FaultKind.configuration, error)


def bad_request(error: str, details: Optional[str] = None) -> Fault:
    return Fault(FaultKind.client, error, details=details)


def envelope_response(fault: Fault) -> JSONResponse:
    return JSONResponse(
        status_code=fault.http_status,
        content=fault.envelope().model_dump(exclude_none=True),
    )
