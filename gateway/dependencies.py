# -*- coding: utf-8 -*-
"""FastAPI dependencies shared by the forwarding routers."""

from __future__ import annotations

from typing import Optional

import httpx
from fastapi import Request

from .config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_transport(request: Request) -> Optional[httpx.AsyncBaseTransport]:
    return request.app.state.transport
