"""FastAPI entrypoint exposing the multiplexed session cookie."""

from __future__ import annotations

from typing import Any, Mapping, Tuple

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse, RedirectResponse

from . import config
from .alias import PathPrefixAliasResolver
from .cookies import ResponseCookieTransport
from .models import RequestContext, SessionData
from .sessions import SessionStore
from .strategy import CookieSessionStrategy, SessionUrlEncoder

app = FastAPI(title="Multi-session Cookie API")

SESSION_STORE = SessionStore()
STRATEGY = CookieSessionStrategy(
    ResponseCookieTransport(config.cookie_settings()),
    PathPrefixAliasResolver(config.admin_prefixes()),
)


def request_context(request: Request) -> RequestContext:
    return RequestContext(request=request)


@app.get("/health")
async def health() -> Mapping[str, str]:
    return {"status": "ok"}


@app.get("/api/session")
@app.get("/admin/api/session")
async def current_session(context: RequestContext = Depends(request_context)) -> JSONResponse:
    session, created = ensure_session(context)
    response = respond(
        {
            "alias": STRATEGY.current_session_alias(context.request),
            "session": serialize_session(session),
            "created": created,
        },
        200,
    )
    if created:
        STRATEGY.on_new_session(session, context, response)
    return response


@app.get("/api/sessions")
async def all_sessions(request: Request) -> JSONResponse:
    session_ids = STRATEGY.get_session_ids(request)
    payload = {
        alias: {"id": session_id, "active": SESSION_STORE.get(session_id) is not None}
        for alias, session_id in session_ids.items()
    }
    return respond({"sessions": payload}, 200)


@app.post("/api/logout")
@app.post("/admin/api/logout")
async def logout(
    context: RequestContext = Depends(request_context),
    next_url: str | None = Query(default=None, alias="next"),
):
    request = context.request
    requested_id = STRATEGY.get_requested_session_id(request)
    SESSION_STORE.invalidate(requested_id)

    if next_url:
        encoder = SessionUrlEncoder(STRATEGY, request)
        response = RedirectResponse(url=encoder.encode_redirect_url(next_url), status_code=303)
    else:
        response = respond({"ok": True, "invalidated": requested_id}, 200)
    STRATEGY.on_invalidate_session(context, response)
    return response


def ensure_session(context: RequestContext) -> Tuple[SessionData, bool]:
    requested_id = STRATEGY.get_requested_session_id(context.request)
    session = SESSION_STORE.get(requested_id)
    if session:
        return session, False
    return SESSION_STORE.create(), True


def respond(payload: Mapping[str, Any], status_code: int) -> JSONResponse:
    return JSONResponse(payload, status_code=status_code)


def serialize_session(session: SessionData) -> Mapping[str, Any]:
    return {"id": session.id, "created_at": session.created_at.isoformat()}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("multisession.main:app", host=config.host(), port=config.port())
