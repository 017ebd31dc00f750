"""Request sessions.

A session is an explicit `SessionUser` resolved from a signed token sent
as `Authorization: Bearer <token>` or in the session cookie.
"""
# app/core/security.py
from fastapi import Depends, Request
from surveyhub.app.core.config import settings
from surveyhub.app.core.errors import MissingEmail, NotAuthenticated
from surveyhub.app.schemas.session import SessionUser
from surveyhub.app.services.links import sign_token, verify_token

SESSION_ROLE = "account"


def issue_session_token(user: SessionUser, ttl_sec: int | None = None) -> str:
    payload = {"role": SESSION_ROLE, "sub": user.user_id, "email": user.email, "name": user.name}
    return sign_token(payload, ttl_sec=ttl_sec or settings.SESSION_TTL)


def _token_from_request(request: Request) -> str | None:
    auth = request.headers.get("Authorization", "")
    scheme, _, value = auth.partition(" ")
    if scheme.lower() == "bearer" and value.strip():
        return value.strip()
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def get_session(request: Request) -> SessionUser | None:
    token = _token_from_request(request)
    if not token:
        return None
    payload = verify_token(token)
    if not payload or payload.get("role") != SESSION_ROLE or not payload.get("sub"):
        return None
    return SessionUser(user_id=str(payload["sub"]), email=payload.get("email") or None, name=payload.get("name"))


def require_session(session: SessionUser | None = Depends(get_session)) -> SessionUser:
    if session is None:
        raise NotAuthenticated()
    return session


def require_owner_email(session: SessionUser = Depends(require_session)) -> str:
    """Identity used for every ownership check: the session email."""
    if not session.email:
        raise MissingEmail()
    return session.email
