# -*- coding: utf-8 -*-
"""Session security for fitplan users.

Passwords are stored as ``pbkdf2_sha256$<iterations>$<salt>$<digest>``.
Sessions are HS256 tokens carrying the user id, email and display name,
issued by ``fitplan`` and sent either as a Bearer header (mobile clients)
or in the ``fitplan_token`` cookie (browser clients).
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
import os
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, Request, Response

from ..config import settings
from .storage import get_user_by_id

TOKEN_COOKIE_NAME = "fitplan_token"
TOKEN_ISSUER = "fitplan"

_HASH_SCHEME = "pbkdf2_sha256"
_HASH_ITERATIONS = 200_000
_SALT_BYTES = 16


def _b64(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def _unb64(text: str) -> bytes:
    return base64.urlsafe_b64decode((text + "=" * (-len(text) % 4)).encode("ascii"))


def _pbkdf2(password: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)


def hash_password(password: str) -> str:
    salt = os.urandom(_SALT_BYTES)
    digest = _pbkdf2(password, salt, _HASH_ITERATIONS)
    return "$".join((_HASH_SCHEME, str(_HASH_ITERATIONS), _b64(salt), _b64(digest)))


def verify_password(password: str, password_hash: str) -> bool:
    parts = (password_hash or "").split("$")
    if len(parts) != 4 or parts[0] != _HASH_SCHEME:
        return False
    try:
        iterations = int(parts[1])
        salt, expected = _unb64(parts[2]), _unb64(parts[3])
    except (ValueError, TypeError):
        return False
    return hmac.compare_digest(_pbkdf2(password, salt, iterations), expected)


# ---- Tokens ----


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _segment(obj: Dict[str, Any]) -> str:
    return _b64(json.dumps(obj, separators=(",", ":"), ensure_ascii=False).encode("utf-8"))


def _signature(signing_input: str) -> bytes:
    return hmac.new(settings.jwt_secret.encode("utf-8"), signing_input.encode("ascii"), hashlib.sha256).digest()


def create_access_token(*, user_id: str, email: str, name: str = "") -> str:
    issued = _utc_now()
    claims = {
        "iss": TOKEN_ISSUER,
        "sub": user_id,
        "email": email,
        "name": name,
        "iat": int(issued.timestamp()),
        "exp": int((issued + timedelta(days=int(settings.token_ttl_days))).timestamp()),
    }
    signing_input = f"{_segment({'alg': 'HS256', 'typ': 'JWT'})}.{_segment(claims)}"
    return f"{signing_input}.{_b64(_signature(signing_input))}"


def decode_token(token: str) -> Dict[str, Any]:
    """Verify signature, issuer and expiry; 401 on any failure."""
    header_b64, _, rest = token.partition(".")
    payload_b64, _, sig_b64 = rest.partition(".")
    if not (header_b64 and payload_b64 and sig_b64) or "." in sig_b64:
        raise HTTPException(status_code=401, detail="Invalid token")
    try:
        valid = hmac.compare_digest(_signature(f"{header_b64}.{payload_b64}"), _unb64(sig_b64))
        claims = json.loads(_unb64(payload_b64).decode("utf-8")) if valid else None
    except (ValueError, TypeError, UnicodeDecodeError) as exc:
        raise HTTPException(status_code=401, detail="Invalid token") from exc
    if not isinstance(claims, dict) or claims.get("iss") != TOKEN_ISSUER:
        raise HTTPException(status_code=401, detail="Invalid token")
    if int(claims.get("exp") or 0) < int(_utc_now().timestamp()):
        raise HTTPException(status_code=401, detail="Token expired")
    return claims


# ---- Cookies ----


def set_token_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        TOKEN_COOKIE_NAME,
        token,
        max_age=int(settings.token_ttl_days) * 86400,
        httponly=True,
        secure=bool(settings.cookie_secure),
        samesite="lax",
        path="/",
    )


def clear_token_cookie(response: Response) -> None:
    response.delete_cookie(TOKEN_COOKIE_NAME, path="/")


# ---- Request helpers ----


def get_token_from_request(request: Request) -> Optional[str]:
    """Bearer header first, then the session cookie."""
    scheme, _, credentials = (request.headers.get("authorization") or "").partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return request.cookies.get(TOKEN_COOKIE_NAME) or None


def get_current_user_from_request(request: Request) -> Dict[str, Any]:
    cached = getattr(request.state, "user", None)
    if cached:
        return cached

    token = get_token_from_request(request)
    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")

    user_id = str(decode_token(token).get("sub") or "")
    user = get_user_by_id(user_id) if user_id else None
    if not user:
        raise HTTPException(status_code=401, detail="User not found")

    request.state.user = user
    return user


def get_current_user(user: Dict[str, Any] = Depends(get_current_user_from_request)) -> Dict[str, Any]:
    return user
