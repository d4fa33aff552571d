"""Flash error types"""


class FlashError(Exception):
    """Base class for flash errors"""


class FlashNotFetchedError(FlashError, RuntimeError):
    """Raised when flash is read or written before it was fetched for the request"""

    def __init__(self, message="flash not fetched, call fetch_flash()"):
        super().__init__(message)


class MissingSigningSaltError(FlashError, ValueError):
    """Raised when the signed flash cookie is enabled without a signing salt"""

    def __init__(self, app_name: str, suggested_salt: str):
        self.app_name = app_name
        self.suggested_salt = suggested_salt
        super().__init__(
            f"no signing salt found for {app_name!r}.\n\n"
            f"Add the following to your Flask configuration:\n\n"
            f"    FLASH_SIGNING_SALT = \"{suggested_salt}\"\n\n"
            f"or pass signing_salt=... to FlashStore."
        )
