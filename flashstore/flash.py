"""Session-backed flash messages for Flask.

Flash is fetched once per request, staged in memory while handlers read and
write it, and reconciled with the session when the response is finalised:

    flash_store = FlashStore(app)

    @app.route('/profile', methods=['POST'])
    def update_profile():
        put_flash('info', 'Profile updated')
        return redirect(url_for('index'))

Staged flash survives into the session only when the response is a redirect
(300-308), so the page reached after following it can show it. Any other
response consumes the flash and removes it from the session.
"""
import logging
import weakref
from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Any, Dict, Optional

from flask import after_this_request, current_app, request, session

from flashstore.errors import FlashNotFetchedError, MissingSigningSaltError
from flashstore.tokens import COOKIE_NAME, random_signing_salt, set_flash_cookie, sign_token, verify_token

logger = logging.getLogger(__name__)

SESSION_KEY = 'phoenix_flash'
REDIRECT_STATUSES = range(300, 309)
EXTENSION_NAME = 'flashstore'


def flash_key(key) -> str:
    """Normalise a flash key given as a string or an enum member"""
    if isinstance(key, Enum):
        return key.value if isinstance(key.value, str) else key.name.lower()
    if isinstance(key, str):
        return key
    raise TypeError(f"flash key must be a str or Enum member, got {type(key).__name__}")


class Flash:
    """Flash messages staged for a single request.

    Returned by ``FlashStore.fetch``; holding one means flash has been fetched
    for the request, so its accessors never fail.
    """

    def __init__(self, session_flash: Optional[Dict[str, Any]] = None):
        self.session_flash = session_flash
        self.messages: Dict[str, Any] = dict(session_flash or {})
        self.cookie_consumed = False

    def get(self, key=None):
        """Return the whole flash map, or the message stored under ``key``"""
        if key is None:
            return self.messages
        return self.messages.get(flash_key(key))

    def put(self, key, message) -> 'Flash':
        self.messages[flash_key(key)] = message
        return self

    def clear(self) -> 'Flash':
        self.messages = {}
        return self

    def __len__(self):
        return len(self.messages)

    def __contains__(self, key):
        return flash_key(key) in self.messages

    def __iter__(self):
        return iter(self.messages.items())

    def __repr__(self):
        return f"<Flash {self.messages!r}>"


@dataclass
class FlashSettings:
    """Per-application flash configuration, resolved once in ``init_app``"""
    store: 'FlashStore'
    signing_salt: Optional[str]
    signed_cookie: bool


class FlashStore:
    """Flask extension staging flash messages per request"""

    def __init__(self, app=None, signing_salt: Optional[str] = None):
        self.signing_salt = signing_salt
        self._staged = weakref.WeakKeyDictionary()
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        """Resolve configuration and register request hooks on ``app``"""
        app.config.setdefault('FLASH_SIGNING_SALT', None)
        app.config.setdefault('FLASH_SIGNED_COOKIE', True)
        app.config.setdefault('FLASH_AUTO_FETCH', True)

        signed_cookie = bool(app.config['FLASH_SIGNED_COOKIE'])
        signing_salt = self.signing_salt or app.config['FLASH_SIGNING_SALT']
        if signed_cookie and not signing_salt:
            raise MissingSigningSaltError(app.name, random_signing_salt())

        app.extensions[EXTENSION_NAME] = FlashSettings(
            store=self,
            signing_salt=signing_salt,
            signed_cookie=signed_cookie,
        )

        if app.config['FLASH_AUTO_FETCH']:
            app.before_request(self._fetch_hook)

        @app.context_processor
        def inject_flash():
            return {'get_flash': get_flash}

        logger.info(
            f"Flash store initialised for {app.name} "
            f"(signed cookie: {signed_cookie}, auto fetch: {app.config['FLASH_AUTO_FETCH']})"
        )

    @staticmethod
    def _settings() -> FlashSettings:
        return current_app.extensions[EXTENSION_NAME]

    def _fetch_hook(self):
        self.fetch()

    def fetch(self) -> Flash:
        """Stage flash for the current request and schedule its reconciliation.

        A valid signed flash cookie takes precedence and is copied into the
        session before the session flash is read. Fetching again within the
        same request returns the already staged flash.
        """
        req = request._get_current_object()
        staged = self._staged.get(req)
        if staged is not None:
            return staged

        settings = self._settings()
        cookie_flash = self._read_cookie(settings) if settings.signed_cookie else None
        if cookie_flash is not None:
            session[SESSION_KEY] = cookie_flash

        staged = Flash(session.get(SESSION_KEY))
        staged.cookie_consumed = cookie_flash is not None
        self._staged[req] = staged
        after_this_request(partial(self._finalize, staged))
        return staged

    @staticmethod
    def _read_cookie(settings: FlashSettings):
        token = request.cookies.get(COOKIE_NAME)
        if not token:
            return None
        return verify_token(current_app, settings.signing_salt, token)

    @staticmethod
    def _finalize(staged: Flash, response):
        # nothing was read and nothing was staged: leave the session alone
        if staged.session_flash is not None or staged.messages:
            if staged.messages and response.status_code in REDIRECT_STATUSES:
                logger.debug(f"Keeping flash across redirect ({response.status_code}): {list(staged.messages)}")
                session[SESSION_KEY] = dict(staged.messages)
            else:
                logger.debug(f"Dropping flash from session (status {response.status_code})")
                session.pop(SESSION_KEY, None)

        if staged.cookie_consumed:
            response.delete_cookie(COOKIE_NAME)
        return response

    def current(self) -> Flash:
        """Return the flash staged for the current request"""
        staged = self._staged.get(request._get_current_object())
        if staged is None:
            raise FlashNotFetchedError()
        return staged

    def get(self, key=None):
        return self.current().get(key)

    def put(self, key, message) -> Flash:
        return self.current().put(key, message)

    def clear(self) -> Flash:
        return self.current().clear()

    @staticmethod
    def signing_salt_for(app) -> str:
        """Return the signing salt resolved for ``app``, failing when none is configured"""
        salt = app.extensions[EXTENSION_NAME].signing_salt
        if not salt:
            raise MissingSigningSaltError(app.name, random_signing_salt())
        return salt

    def sign(self, flash) -> str:
        """Sign ``flash`` for the cross-boundary cookie of the current app"""
        return sign_token(current_app, self.signing_salt_for(current_app), flash)

    def set_cookie(self, response, flash):
        """Carry ``flash`` to the next request in a signed cookie on ``response``"""
        return set_flash_cookie(response, current_app, self.signing_salt_for(current_app), flash)


def _store() -> FlashStore:
    settings = current_app.extensions.get(EXTENSION_NAME)
    if settings is None:
        raise RuntimeError(f"FlashStore is not registered on {current_app.name!r}")
    return settings.store


def fetch_flash() -> Flash:
    """Fetch flash for the current request"""
    return _store().fetch()


def get_flash(key=None):
    """Return the staged flash map, or a single message when ``key`` is given"""
    return _store().get(key)


def put_flash(key, message) -> Flash:
    """Stage ``message`` under ``key`` for the current request"""
    return _store().put(key, message)


def clear_flash() -> Flash:
    """Drop all staged flash messages"""
    return _store().clear()
