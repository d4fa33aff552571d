"""One-time flash messages for server-rendered Flask applications"""

from flashstore.errors import FlashError, FlashNotFetchedError, MissingSigningSaltError
from flashstore.flash import (
    REDIRECT_STATUSES,
    SESSION_KEY,
    Flash,
    FlashStore,
    clear_flash,
    fetch_flash,
    flash_key,
    get_flash,
    put_flash,
)
from flashstore.tokens import COOKIE_NAME, TOKEN_MAX_AGE, random_signing_salt, sign_token, verify_token

__version__ = '0.1.0'

__all__ = [
    'COOKIE_NAME',
    'REDIRECT_STATUSES',
    'SESSION_KEY',
    'TOKEN_MAX_AGE',
    'Flash',
    'FlashError',
    'FlashNotFetchedError',
    'FlashStore',
    'MissingSigningSaltError',
    'clear_flash',
    'fetch_flash',
    'flash_key',
    'get_flash',
    'put_flash',
    'random_signing_salt',
    'sign_token',
    'verify_token',
]
