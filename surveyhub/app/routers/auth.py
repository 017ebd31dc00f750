# app/routers/auth.py
from fastapi import APIRouter, Depends
from surveyhub.app.core.security import require_session
from surveyhub.app.schemas.session import SessionUser

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/session", response_model=SessionUser)
def current_session(session: SessionUser = Depends(require_session)):
    return session
