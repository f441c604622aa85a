"""Keeps several logical sessions in one cookie, one id per alias."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from starlette.requests import Request
from starlette.responses import Response

from .alias import AliasResolver, PathPrefixAliasResolver
from .codec import decode_session_ids, encode_session_ids, is_valid_token
from .cookies import CookieTransport
from .models import RequestContext, SessionData

logger = logging.getLogger(__name__)


class CookieSessionStrategy:
    def __init__(self, transport: CookieTransport, resolver: AliasResolver | None = None) -> None:
        if transport is None:
            raise ValueError("cookie transport cannot be None")
        self.transport = transport
        self.resolver = resolver or PathPrefixAliasResolver()

    def current_session_alias(self, request: Request) -> str:
        return self.resolver.current_alias(request)

    def new_session_alias(self, request: Request) -> str:
        return self.resolver.new_alias(request)

    def get_session_ids(self, request: Request) -> Dict[str, str]:
        values = self.transport.read_cookie_values(request)
        return decode_session_ids(values[0] if values else "")

    def get_requested_session_id(self, request: Request) -> Optional[str]:
        session_ids = self.get_session_ids(request)
        return session_ids.get(self.current_session_alias(request))

    def on_new_session(self, session: SessionData, context: RequestContext, response: Response) -> None:
        if not is_valid_token(session.id):
            raise ValueError(f"Session id must be non-empty and contain no whitespace: {session.id!r}")
        if session.id in context.written_session_ids:
            return

        request = context.request
        alias = self.current_session_alias(request)
        if not is_valid_token(alias):
            raise ValueError(f"Session alias must be non-empty and contain no whitespace: {alias!r}")
        context.written_session_ids.add(session.id)

        session_ids = self.get_session_ids(request)
        session_ids[alias] = session.id
        self.transport.write_cookie_value(request, response, encode_session_ids(session_ids))

    def on_invalidate_session(self, context: RequestContext, response: Response) -> None:
        request = context.request
        session_ids = self.get_session_ids(request)
        alias = self.current_session_alias(request)
        if session_ids.pop(alias, None) is None:
            logger.debug("No session under alias %s to invalidate", alias)
        self.transport.write_cookie_value(request, response, encode_session_ids(session_ids))

    def encode_url(self, url: str, alias: str) -> str:
        # the alias travels in the cookie, never in the URL
        return url


class SessionUrlEncoder:
    """URL rewriting hook handed to handlers next to the response."""

    def __init__(self, strategy: CookieSessionStrategy, request: Request) -> None:
        self.strategy = strategy
        self.request = request

    def encode_url(self, url: str) -> str:
        return self.strategy.encode_url(url, self.strategy.current_session_alias(self.request))

    def encode_redirect_url(self, url: str) -> str:
        return self.encode_url(url)
