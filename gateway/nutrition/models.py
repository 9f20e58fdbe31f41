# -*- coding: utf-8 -*-
"""Nutrition domain — Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class NutritionSearchRequest(BaseModel):
    query: Optional[str] = Field(None, description="Free text, e.g. '1 apple and 2 eggs'")

    @property
    def is_blank(self) -> bool:
        return not (self.query and self.query.strip())
