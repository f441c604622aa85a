from __future__ import annotations

import logging
from http import cookies as http_cookies
from typing import List, Protocol

from starlette.requests import Request
from starlette.responses import Response

from .config import CookieSettings, cookie_settings

logger = logging.getLogger(__name__)


class CookieTransport(Protocol):
    def read_cookie_values(self, request: Request) -> List[str]: ...

    def write_cookie_value(self, request: Request, response: Response, value: str) -> None: ...


class ResponseCookieTransport:
    """Reads and writes the session cookie through Starlette requests and responses."""

    def __init__(self, settings: CookieSettings | None = None) -> None:
        self.settings = settings or cookie_settings()

    def read_cookie_values(self, request: Request) -> List[str]:
        # request.cookies keeps only the last duplicate, so parse the headers in order
        values: List[str] = []
        for header in request.headers.getlist("cookie"):
            for chunk in header.split(";"):
                key, sep, value = chunk.partition("=")
                if sep and key.strip() == self.settings.name:
                    values.append(http_cookies._unquote(value.strip()))
        return values

    def write_cookie_value(self, request: Request, response: Response, value: str) -> None:
        settings = self.settings
        # an empty value means every slot is gone, so expire the cookie
        max_age = settings.max_age if value else 0
        logger.debug("Writing %s cookie for %s", settings.name, request.url.path)
        response.set_cookie(
            key=settings.name,
            value=value,
            max_age=max_age,
            path=settings.path,
            domain=settings.domain,
            httponly=settings.httponly,
            samesite=settings.samesite,
            secure=settings.secure,
        )
