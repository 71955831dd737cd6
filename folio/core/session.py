"""
Admin Session Codec
===================

Seals a small claims dict into an opaque cookie value and opens it again.
Uses Fernet (AES-128-CBC + HMAC-SHA256 with an issue timestamp), so the
cookie is both encrypted and tamper-evident, and expiry is checked from the
token itself. Nothing is stored server-side.
"""

import base64
import hashlib
import json
import time

from cryptography.fernet import Fernet, InvalidToken
from werkzeug.http import dump_cookie

from .config import SESSION_MAX_AGE


def derive_key(secret):
    """
    Derive a Fernet key from an arbitrary secret string.
    Returns a Fernet-compatible key (32 bytes, base64 encoded).
    """
    key_bytes = hashlib.sha256(secret.encode()).digest()
    return base64.urlsafe_b64encode(key_bytes)


class SessionCodec:

    def __init__(self, secret, max_age=SESSION_MAX_AGE, cookie_name='__admin_session', secure=False):
        self.max_age = max_age
        self.cookie_name = cookie_name
        self.secure = secure
        self._fernet = Fernet(derive_key(secret)) if secret else None

    @property
    def has_secret(self):
        return self._fernet is not None

    def encode(self, claims, issued_at=None):
        """Seal claims into a cookie-safe string. Returns '' when no secret is configured."""
        if self._fernet is None:
            return ''
        payload = json.dumps(claims, separators=(',', ':')).encode()
        if issued_at is None:
            issued_at = int(time.time())
        return self._fernet.encrypt_at_time(payload, int(issued_at)).decode()

    def decode(self, value, now=None):
        """
        Open a cookie value. Any failure (no secret, missing value, wrong
        secret, tampering, expiry, non-object payload) yields {}.
        """
        if self._fernet is None or not value:
            return {}
        if now is None:
            now = int(time.time())

        try:
            payload = self._fernet.decrypt_at_time(value.encode(), self.max_age, int(now))
        except (InvalidToken, UnicodeEncodeError):
            return {}

        try:
            claims = json.loads(payload)
        except ValueError:
            return {}
        return claims if isinstance(claims, dict) else {}

    def cookie_header(self, value):
        """Set-Cookie header value carrying a sealed session"""
        return dump_cookie(
            self.cookie_name,
            value,
            max_age=self.max_age,
            path='/',
            secure=self.secure,
            httponly=True,
            samesite='Lax',
        )

    def clear_cookie_header(self):
        """Set-Cookie header value that empties and expires the session cookie"""
        return dump_cookie(
            self.cookie_name,
            '',
            max_age=0,
            expires=0,
            path='/',
            secure=self.secure,
            httponly=True,
            samesite='Lax',
        )
