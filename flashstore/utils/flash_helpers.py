"""Flash message helpers for HTMX-aware messaging.

This module provides a flash function that prevents message accumulation
from HTMX partial requests while keeping the regular flash behaviour for
full page loads.
"""
from enum import Enum

from flask import request

from flashstore.flash import put_flash


class FlashKind(str, Enum):
    """Standard flash categories"""
    INFO = 'info'
    SUCCESS = 'success'
    WARNING = 'warning'
    ERROR = 'error'


def flash(message, category=FlashKind.INFO):
    """Flash a message only for full page loads, not HTMX requests.

    HTMX requests render their own inline error partials, so flashing there
    would only pile up messages that surface on some later page.

    Args:
        message: The message to flash
        category: Flash key, a FlashKind or plain string ('info', 'error', ...)

    Returns:
        The staged Flash, or None when the request was an HTMX request
    """
    if request.headers.get('HX-Request'):
        return None
    return put_flash(category, message)
