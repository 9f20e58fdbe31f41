from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Mapping, Optional, Tuple

DEFAULT_CORS_ORIGINS = (
    "https://henrikmose.github.io",
    "http://localhost:3000",
    "http://localhost:5500",
)


def _secret(env: Mapping[str, str], name: str) -> Optional[str]:
    value = (env.get(name) or "").strip()
    return value or None


def _port(raw: Optional[str], default: int = 3000) -> int:
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


def _timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def _cors_origins(raw: Optional[str]) -> List[str]:
    if raw is None:
        return list(DEFAULT_CORS_ORIGINS)
    if raw.strip() == "*":
        return ["*"]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass(frozen=True)
class Settings:
    """Gateway configuration, built once at startup and never mutated.

    Credentials may be missing; each route checks the ones it needs when it
    is called rather than refusing to start.
    """

    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o-mini"
    openai_base_url: str = "https://api.openai.com/v1"
    nutritionix_app_id: Optional[str] = None
    nutritionix_app_key: Optional[str] = None
    nutritionix_base_url: str = "https://trackapi.nutritionix.com/v2"
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: Tuple[str, ...] = DEFAULT_CORS_ORIGINS
    upstream_timeout: Optional[float] = None
    log_level: str = "info"

    @property
    def cors_open(self) -> bool:
        return "*" in self.cors_origins

    @property
    def has_nutritionix_credentials(self) -> bool:
        return bool(self.nutritionix_app_id and self.nutritionix_app_key)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            openai_api_key=_secret(env, "OPENAI_API_KEY"),
            openai_model=env.get("OPENAI_MODEL") or "gpt-4o-mini",
            openai_base_url=env.get("OPENAI_BASE_URL") or "https://api.openai.com/v1",
            nutritionix_app_id=_secret(env, "NUTRITIONIX_APP_ID"),
            nutritionix_app_key=_secret(env, "NUTRITIONIX_APP_KEY"),
            nutritionix_base_url=env.get("NUTRITIONIX_BASE_URL") or "https://trackapi.nutritionix.com/v2",
            host=env.get("HOST") or "0.0.0.0",
            port=_port(env.get("PORT")),
            cors_origins=tuple(_cors_origins(env.get("CORS_ORIGINS"))),
            upstream_timeout=_timeout(env.get("UPSTREAM_TIMEOUT_SECONDS")),
            log_level=(env.get("LOG_LEVEL") or "info").lower(),
        )
