# backend/services/security.py
"""
Password hashing and signed bearer tokens.
"""

import base64
import hashlib
import hmac
import json
import time
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from config.settings import SECRET_KEY, TOKEN_EXPIRY_MINUTES


# --------------- Passwords -----------------------------------------------

def hash_password(plain: str) -> str:
    return generate_password_hash(plain)


def verify_password(plain: str, hashed: Optional[str]) -> bool:
    if not hashed:
        return False
    return check_password_hash(hashed, plain)


# --------------- Tokens --------------------------------------------------

def _b64(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode()


def _unb64(text: str) -> bytes:
    return base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))


def _sign(header: str, payload: str) -> str:
    return _b64(hmac.new(SECRET_KEY.encode(), f"{header}.{payload}".encode(), hashlib.sha256).digest())


def create_token(user_id: int, role: str, expires_in_minutes: int = TOKEN_EXPIRY_MINUTES) -> str:
    header = _b64(json.dumps({"alg": "HS256", "typ": "JWT"}).encode())
    payload = _b64(json.dumps({
        "sub": user_id,
        "role": role,
        "exp": int(time.time()) + expires_in_minutes * 60,
    }).encode())
    return f"{header}.{payload}.{_sign(header, payload)}"


def decode_token(token: str) -> Optional[dict]:
    """Verify signature and expiry. Returns the payload or None."""
    parts = (token or "").split(".")
    if len(parts) != 3:
        return None
    header, payload, sig = parts
    if not hmac.compare_digest(sig, _sign(header, payload)):
        return None
    try:
        data = json.loads(_unb64(payload))
    except ValueError:
        return None
    if not isinstance(data, dict) or data.get("exp", 0) < time.time():
        return None
    return data
