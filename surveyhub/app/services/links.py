"""Session tokens and public survey links.

A session token is `<b64(claims)>.<b64(hmac)>`, signed with `SECRET_KEY`;
the claims carry the account (`sub`, `email`) and an `exp` timestamp.
"""
# app/services/links.py
import time, hmac, hashlib, base64, json
from typing import Optional
from surveyhub.app.core.config import settings

def _b64u_encode(b: bytes) -> str:
    return base64.urlsafe_b64encode(b).rstrip(b"=").decode()

def _b64u_decode(s: str) -> bytes:
    pad = "=" * (-len(s) % 4)
    return base64.urlsafe_b64decode(s + pad)

def _signature(raw: bytes) -> bytes:
    return hmac.new(settings.SECRET_KEY.encode(), raw, hashlib.sha256).digest()

def sign_token(payload: dict, ttl_sec: int) -> str:
    """Issue a session token for `payload` valid for `ttl_sec` seconds.

    Args:
        payload: Session claims, e.g. `{"role": "account", "sub": ..., "email": ...}`.
        ttl_sec: Seconds until the session expires; stored as `exp`.

    Returns:
        str: The bearer/cookie value.
    """
    claims = payload | {"exp": int(time.time()) + int(ttl_sec)}
    raw = json.dumps(claims, separators=(",", ":"), ensure_ascii=False).encode()
    return f"{_b64u_encode(raw)}.{_b64u_encode(_signature(raw))}"

def verify_token(token: str) -> Optional[dict]:
    """Return the session claims of `token`, or None.

    None covers a malformed token, a signature made with another key or
    over other claims, and an expired session.
    """
    try:
        raw_b64, sig_b64 = token.split(".", 1)
        raw = _b64u_decode(raw_b64)
        sig = _b64u_decode(sig_b64)
    except ValueError:
        return None

    if not hmac.compare_digest(sig, _signature(raw)):
        return None

    try:
        claims = json.loads(raw.decode())
    except ValueError:
        return None
    if not isinstance(claims, dict) or claims.get("exp", 0) < int(time.time()):
        return None
    return claims

def public_survey_url(survey_id: str) -> str:
    """Public link respondents use to open the survey."""
    return f"{settings.PUBLIC_URL.rstrip('/')}/surveys/{survey_id}"
