from __future__ import annotations

import secrets
from typing import Dict, Optional

from .models import SessionData


class SessionStore:
    """Simple in-memory session store keyed by session id."""

    def __init__(self) -> None:
        self._sessions: Dict[str, SessionData] = {}

    def create(self) -> SessionData:
        session = SessionData(id=secrets.token_urlsafe(24))
        self._sessions[session.id] = session
        return session

    def get(self, session_id: str | None) -> Optional[SessionData]:
        if not session_id:
            return None
        return self._sessions.get(session_id)

    def invalidate(self, session_id: str | None) -> None:
        if session_id:
            self._sessions.pop(session_id, None)
