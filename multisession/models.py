from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Set

from starlette.requests import Request


@dataclass
class SessionData:
    id: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    attributes: Dict[str, Any] = field(default_factory=dict)


@dataclass
class RequestContext:
    """State scoped to one request; ``written_session_ids`` tracks cookie writes."""

    request: Request
    written_session_ids: Set[str] = field(default_factory=set)
