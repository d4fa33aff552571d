"""Demo Flask application wiring up flash messages"""

import os
import logging
from flask import Flask
from flask_wtf.csrf import CSRFProtect

from flashstore.config import SecurityConfig
from flashstore.flash import FlashStore
from flashstore.routes import demo
from flashstore.utils.template_filters import register_filters

# Initialize logger
logger = logging.getLogger(__name__)

flash_store = FlashStore()


def _init_security_headers(app):
    """Initialize security headers when enabled in configuration"""
    if not app.config.get('SECURITY_HEADERS_ENABLED', False):
        logger.info("Security headers disabled via configuration")
        return

    from flask_talisman import Talisman
    talisman_config = SecurityConfig.get_talisman_config(app.config)
    Talisman(app, **talisman_config)
    logger.info(f"Security headers initialized with CSP mode: {app.config.get('CSP_MODE', 'development')}")


def create_app(config_class=None):
    """Application factory"""

    basedir = os.path.abspath(os.path.dirname(__file__))
    template_dir = os.path.join(basedir, 'templates')

    app = Flask(__name__, template_folder=template_dir)

    # Load the specified config class, or default to development config
    if config_class:
        app.config.from_object(config_class)
    else:
        app.config.from_object('flashstore.config.DevelopmentConfig')

    _init_security_headers(app)

    # Initialize CSRF protection
    CSRFProtect(app)

    flash_store.init_app(app)

    register_filters(app)

    app.register_blueprint(demo.bp)

    return app
