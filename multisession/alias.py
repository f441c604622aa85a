from __future__ import annotations

import logging
from typing import Iterable, Protocol, Tuple

from starlette.requests import Request

from . import config
from .codec import is_valid_token

logger = logging.getLogger(__name__)


class AliasResolver(Protocol):
    def current_alias(self, request: Request) -> str: ...

    def new_alias(self, request: Request) -> str: ...


class PathPrefixAliasResolver:
    """Picks the session slot for a request from the start of its path.

    Paths under one of the admin prefixes share one slot, everything else
    shares the other, so an admin login and a regular login can live side by
    side in the same browser.
    """

    def __init__(
        self,
        prefixes: Iterable[str] | None = None,
        admin_alias: str = config.ADMIN_SESSION_ALIAS,
        default_alias: str = config.DEFAULT_SESSION_ALIAS,
    ) -> None:
        for alias in (admin_alias, default_alias):
            if not is_valid_token(alias):
                raise ValueError(f"Session alias must be non-empty and contain no whitespace: {alias!r}")
        self.prefixes: Tuple[str, ...] = tuple(
            prefixes if prefixes is not None else config.admin_prefixes()
        )
        self.admin_alias = admin_alias
        self.default_alias = default_alias

    def current_alias(self, request: Request) -> str:
        return self._alias_for(request.url.path)

    def new_alias(self, request: Request) -> str:
        return self._alias_for(request.url.path)

    def _alias_for(self, path: str) -> str:
        matched = any(path.startswith(prefix) for prefix in self.prefixes)
        alias = self.admin_alias if matched else self.default_alias
        logger.debug("Using session alias %s for %s", alias, path)
        return alias
