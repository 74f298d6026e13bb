"""
EventHub web app: aiohttp routes over per-browser sessions.

Routes:
  GET  /                                   current view (?view=, ?q=, ?category=)
  GET  /login, POST /login, POST /logout
  POST /events/{event_id}/register
  POST /registrations/{registration_id}/cancel
  GET  /admin/events/new, GET /admin/events/{event_id}/edit
  POST /admin/events, POST /admin/events/cancel
  GET  /health
"""

import logging
from typing import Optional
from uuid import UUID
from aiohttp import web
from core.domain.constants import VIEW_EVENTS, VIEW_MY_REGISTRATIONS, VIEW_ADMIN
from adapters.web.components import render_page, render_navbar, render_sign_in, render_loading
from adapters.web.session import SessionRegistry, SessionFactory, UserSession
from adapters.web.views import EventListView
from adapters.web.views.admin import FORM_FIELDS
from locales import t

logger = logging.getLogger(__name__)

SESSIONS_KEY = web.AppKey("sessions", SessionRegistry)
COOKIE_NAME_KEY = web.AppKey("session_cookie", str)

_SESSION = "eventhub.session"
_SESSION_ID = "eventhub.session_id"


def _html(body: str, alerts=(), status: int = 200) -> web.Response:
    return web.Response(text=render_page(body, alerts), content_type="text/html", status=status)


def _session(request: web.Request) -> Optional[UserSession]:
    return request[_SESSION]


def _authenticated(request: web.Request) -> UserSession:
    session = _session(request)
    if session is None or not session.auth.is_authenticated:
        raise web.HTTPFound("/login")
    return session


def _parse_uuid(value, not_found: bool = True) -> UUID:
    try:
        return UUID(str(value))
    except ValueError:
        if not_found:
            raise web.HTTPNotFound(text="Not found")
        raise web.HTTPBadRequest(text="Malformed identifier")


def _render_view(session: UserSession, view) -> web.Response:
    body = render_navbar(session.current_view, session.auth.profile, session.can_admin) + view.render()
    return _html(body, session.pop_alerts())


@web.middleware
async def session_middleware(request: web.Request, handler):
    """Attach the browser's registered UserSession; None until it signs in"""
    session_id = request.cookies.get(request.app[COOKIE_NAME_KEY])
    session = request.app[SESSIONS_KEY].get(session_id)
    if session:
        session.touch()
    request[_SESSION] = session
    request[_SESSION_ID] = session_id if session else None
    return await handler(request)


# === PAGES ===

async def handle_index(request: web.Request) -> web.Response:
    session = _session(request)
    if session is None:
        raise web.HTTPFound("/login")
    if session.auth.loading:
        return _html(render_loading())

    await session.auth.refresh()
    if not session.auth.is_authenticated:
        raise web.HTTPFound("/login")

    view_name = request.query.get("view")
    if view_name:
        view = await session.navigate(view_name)
    else:
        view = await session.mounted()

    if isinstance(view, EventListView) and ("q" in request.query or "category" in request.query):
        view.set_filters(request.query.get("q"), request.query.get("category"))

    return _render_view(session, view)


async def handle_login_page(request: web.Request) -> web.Response:
    session = _session(request)
    if session is not None and session.auth.is_authenticated:
        raise web.HTTPFound("/")
    return _html(render_sign_in(), session.pop_alerts() if session else ())


async def handle_login(request: web.Request) -> web.Response:
    data = await request.post()
    email = str(data.get("email", "")).strip()
    password = str(data.get("password", ""))

    if not email or not password:
        return _html(render_sign_in(email), [t("sign_in_failed")], status=400)

    registry = request.app[SESSIONS_KEY]
    session = _session(request)
    fresh = session is None
    if fresh:
        session = await registry.open_session()

    try:
        await session.auth.sign_in(email, password)
    except Exception as e:
        logger.warning(f"[AUTH] Sign-in failed for {email}: {e}")
        if fresh:
            session.stop()
        return _html(render_sign_in(email), [t("sign_in_failed")], status=401)

    session.reset()
    exc = web.HTTPFound("/")
    if fresh:
        session_id = registry.add(session)
        exc.set_cookie(request.app[COOKIE_NAME_KEY], session_id, httponly=True, samesite="Lax")
    raise exc


async def handle_logout(request: web.Request) -> web.Response:
    session = _session(request)
    if session is not None:
        try:
            await session.auth.sign_out()
        except Exception as e:
            logger.error(f"Error signing out: {e}")
        request.app[SESSIONS_KEY].drop(request[_SESSION_ID])

    exc = web.HTTPFound("/login")
    exc.del_cookie(request.app[COOKIE_NAME_KEY])
    raise exc


# === REGISTRATION ===

async def handle_register(request: web.Request) -> web.Response:
    session = _authenticated(request)
    event_id = _parse_uuid(request.match_info["event_id"])

    view = await session.mounted(VIEW_EVENTS)
    session.alert(await view.register(event_id))
    raise web.HTTPFound("/")


async def handle_cancel(request: web.Request) -> web.Response:
    session = _authenticated(request)
    registration_id = _parse_uuid(request.match_info["registration_id"])
    data = await request.post()
    event_id = _parse_uuid(data.get("event_id", ""), not_found=False)

    view = await session.mounted(VIEW_MY_REGISTRATIONS)
    session.alert(await view.cancel(registration_id, event_id))
    raise web.HTTPFound("/")


# === ADMIN ===

async def _admin_view(request: web.Request, fresh: bool = False):
    """The admin view; fresh=True mounts (and loads) it anew"""
    session = _authenticated(request)
    if not session.can_admin:
        raise web.HTTPForbidden(text="Admin access required")
    view = await session.navigate(VIEW_ADMIN) if fresh else await session.mounted(VIEW_ADMIN)
    return session, view


async def handle_admin_new(request: web.Request) -> web.Response:
    session, view = await _admin_view(request, fresh=True)
    view.open_create()
    return _render_view(session, view)


async def handle_admin_edit(request: web.Request) -> web.Response:
    session, view = await _admin_view(request, fresh=True)
    event_id = _parse_uuid(request.match_info["event_id"])
    session.alert(view.open_edit(event_id))
    return _render_view(session, view)


async def handle_admin_save(request: web.Request) -> web.Response:
    session, view = await _admin_view(request)
    data = await request.post()
    raw_id = str(data.get("event_id", "")).strip()
    event_id = _parse_uuid(raw_id, not_found=False) if raw_id else None
    values = {k: str(data.get(k, "")) for k in FORM_FIELDS}
    session.alert(await view.submit(values, event_id))
    raise web.HTTPFound("/")


async def handle_admin_cancel(request: web.Request) -> web.Response:
    _, view = await _admin_view(request)
    view.close_form()
    raise web.HTTPFound("/")


async def handle_health(request: web.Request) -> web.Response:
    return web.json_response({"status": "ok", "sessions": len(request.app[SESSIONS_KEY])})


# === APP ===

def create_web_app(
    session_factory: SessionFactory,
    session_cookie: str = "eventhub_session",
    idle_seconds: int = 12 * 3600,
    max_sessions: int = 1000,
) -> web.Application:
    """Create the aiohttp app; sessions are built by session_factory."""
    app = web.Application(middlewares=[session_middleware])
    app[SESSIONS_KEY] = SessionRegistry(session_factory, idle_seconds=idle_seconds, max_sessions=max_sessions)
    app[COOKIE_NAME_KEY] = session_cookie

    async def on_startup(app: web.Application) -> None:
        await app[SESSIONS_KEY].start()

    async def on_cleanup(app: web.Application) -> None:
        await app[SESSIONS_KEY].stop()

    app.on_startup.append(on_startup)
    app.on_cleanup.append(on_cleanup)

    app.router.add_get("/", handle_index)
    app.router.add_get("/login", handle_login_page)
    app.router.add_post("/login", handle_login)
    app.router.add_post("/logout", handle_logout)
    app.router.add_post("/events/{event_id}/register", handle_register)
    app.router.add_post("/registrations/{registration_id}/cancel", handle_cancel)
    app.router.add_get("/admin/events/new", handle_admin_new)
    app.router.add_get("/admin/events/{event_id}/edit", handle_admin_edit)
    app.router.add_post("/admin/events", handle_admin_save)
    app.router.add_post("/admin/events/cancel", handle_admin_cancel)
    app.router.add_get("/health", handle_health)
    return app
