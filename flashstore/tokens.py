"""Signed flash tokens for handing flash across a redirect boundary.

When a redirect crosses a boundary where the session cannot be relied on
(another domain, a protocol upgrade), the flash map travels in a short-lived
signed cookie instead. The receiving request verifies the token, copies its
contents into the session and drops the cookie.

Tokens are bound to a purpose-specific salt derived from the configured
signing salt, so a token minted for flash cannot be replayed anywhere else
the same secret key is used.
"""
import base64
import logging
import secrets
from collections.abc import Mapping

from itsdangerous import BadData, URLSafeTimedSerializer

logger = logging.getLogger(__name__)

COOKIE_NAME = '__phoenix_flash___'
TOKEN_MAX_AGE = 60
SALT_SUFFIX = 'flash'
SALT_LENGTH = 8


def computed_salt(salt_base: str) -> str:
    """Derive the flash-specific salt from the configured signing salt"""
    return salt_base + SALT_SUFFIX


def _serializer(app, salt_base: str) -> URLSafeTimedSerializer:
    return URLSafeTimedSerializer(app.secret_key, salt=computed_salt(salt_base))


def sign_token(app, salt_base: str, flash: Mapping) -> str:
    """Sign a flash map into a URL-safe token.

    Args:
        app: Flask application whose secret key signs the token
        salt_base: Configured signing salt, before the flash suffix is appended
        flash: Flash map to carry; must be JSON serialisable

    Returns:
        The signed token
    """
    if not isinstance(flash, Mapping):
        raise TypeError(f"flash must be a mapping, got {type(flash).__name__}")
    return _serializer(app, salt_base).dumps(dict(flash))


def verify_token(app, salt_base: str, token: str, max_age: int = TOKEN_MAX_AGE):
    """Return the flash map carried by ``token``, or None when it does not verify"""
    try:
        payload = _serializer(app, salt_base).loads(token, max_age=max_age)
    except BadData as e:
        logger.debug(f"Rejected flash token: {e}")
        return None

    if not isinstance(payload, dict):
        logger.debug(f"Rejected flash token with non-mapping payload: {type(payload).__name__}")
        return None
    return payload


def set_flash_cookie(response, app, salt_base: str, flash: Mapping):
    """Attach a signed flash cookie to ``response`` and return it"""
    response.set_cookie(
        COOKIE_NAME,
        sign_token(app, salt_base, flash),
        max_age=TOKEN_MAX_AGE,
        httponly=True,
        samesite='Lax',
    )
    return response


def random_signing_salt(length: int = SALT_LENGTH) -> str:
    """Generate a random signing salt suitable for FLASH_SIGNING_SALT"""
    return base64.b64encode(secrets.token_bytes(length)).decode('ascii')[:length]
