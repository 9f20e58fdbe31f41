# -*- coding: utf-8 -*-
"""Chat — Pydantic models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    # Values go upstream untouched; only the presence of messages is checked here.
    messages: Any = Field(..., description="OpenAI chat messages, forwarded as-is")
    max_tokens: Any = 800
    temperature: Any = 0.7
