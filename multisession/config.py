"""Configuration helpers for the multi-session cookie service."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

DEFAULT_SESSION_COOKIE_NAME = "SESSION"
DEFAULT_ADMIN_PREFIXES = ("/admin",)
ADMIN_SESSION_ALIAS = "0"
DEFAULT_SESSION_ALIAS = "1"


@dataclass(frozen=True)
class CookieSettings:
    name: str = DEFAULT_SESSION_COOKIE_NAME
    path: str = "/"
    domain: Optional[str] = None
    max_age: Optional[int] = None
    httponly: bool = True
    samesite: str = "lax"
    secure: bool = False


def session_cookie_name() -> str:
    raw = os.getenv("SESSION_COOKIE_NAME")
    return raw.strip() if raw and raw.strip() else DEFAULT_SESSION_COOKIE_NAME


def session_cookie_path() -> str:
    raw = os.getenv("SESSION_COOKIE_PATH")
    return raw.strip() if raw and raw.strip() else "/"


def session_cookie_domain() -> str | None:
    raw = os.getenv("SESSION_COOKIE_DOMAIN")
    return raw.strip() if raw and raw.strip() else None


def session_cookie_max_age() -> int | None:
    raw = os.getenv("SESSION_COOKIE_MAX_AGE")
    try:
        value = int(raw) if raw else None
    except (TypeError, ValueError):
        return None
    if value is None or value < 0:
        return None
    return value


def admin_prefixes() -> Tuple[str, ...]:
    raw = os.getenv("SESSION_ADMIN_PREFIXES")
    if raw and raw.strip():
        prefixes = tuple(prefix.strip() for prefix in raw.split(",") if prefix.strip())
        if prefixes:
            return prefixes
    return DEFAULT_ADMIN_PREFIXES


def is_prod() -> bool:
    env = (os.getenv("ENVIRONMENT") or os.getenv("NODE_ENV") or "").lower()
    return env == "production"


def host() -> str:
    return os.getenv("HOST", "127.0.0.1")


def port() -> int:
    raw = os.getenv("PORT")
    try:
        return int(raw) if raw else 8000
    except (TypeError, ValueError):
        return 8000


@lru_cache(maxsize=1)
def cookie_settings() -> CookieSettings:
    return CookieSettings(
        name=session_cookie_name(),
        path=session_cookie_path(),
        domain=session_cookie_domain(),
        max_age=session_cookie_max_age(),
        secure=is_prod(),
    )
