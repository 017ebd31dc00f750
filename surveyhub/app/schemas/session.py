# app/schemas/session.py
from surveyhub.app.schemas.base import ApiModel


class SessionUser(ApiModel):
    user_id: str
    email: str | None = None
    name: str | None = None
