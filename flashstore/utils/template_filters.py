"""Custom Jinja filters for rendering flash messages"""

from flashstore.flash import flash_key
from flashstore.utils.flash_helpers import FlashKind

FLASH_CLASSES = {
    FlashKind.INFO.value: 'bg-blue-100 text-blue-800',
    FlashKind.SUCCESS.value: 'bg-green-100 text-green-800',
    FlashKind.WARNING.value: 'bg-yellow-100 text-yellow-800',
    FlashKind.ERROR.value: 'bg-red-100 text-red-800',
}
DEFAULT_FLASH_CLASS = 'bg-gray-100 text-gray-800'


def register_filters(app):
    """Register custom template filters"""

    @app.template_filter('flash_css_class')
    def flash_css_class(category):
        """Get CSS class for a flash category badge"""
        try:
            return FLASH_CLASSES.get(flash_key(category), DEFAULT_FLASH_CLASS)
        except TypeError:
            return DEFAULT_FLASH_CLASS
