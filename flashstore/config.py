"""Flask configuration settings for flash handling and the demo app"""
import os


def _env_flag(name, default):
    return os.environ.get(name, default).lower() == 'true'


class Config:
    """Base configuration class"""
    DEBUG = False
    TESTING = False

    # Core Flask settings
    SECRET_KEY = os.environ.get('FLASK_SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Flash settings
    FLASH_SIGNING_SALT = os.environ.get('FLASH_SIGNING_SALT')
    FLASH_SIGNED_COOKIE = _env_flag('FLASH_SIGNED_COOKIE', 'true')
    FLASH_AUTO_FETCH = _env_flag('FLASH_AUTO_FETCH', 'true')

    # CSP mode for security headers
    CSP_MODE = os.environ.get('CSP_MODE', 'development')


class SecurityConfig:
    """Security-specific configuration"""

    @staticmethod
    def get_talisman_config(app_config=None):
        """Get Talisman (security headers) configuration"""
        csp_mode = app_config.get('CSP_MODE', 'development') if app_config else Config.CSP_MODE

        if csp_mode == 'development':
            csp = {
                'default-src': "'self' 'unsafe-inline'",
                'style-src': "'self' 'unsafe-inline' https://cdn.tailwindcss.com",
                'img-src': "'self' data:",
            }
        else:
            csp = {
                'default-src': "'self'",
                'style-src': "'self' https://cdn.tailwindcss.com",
                'img-src': "'self'",
            }

        return {
            'force_https': app_config.get('TALISMAN_FORCE_HTTPS', False) if app_config else False,
            'content_security_policy': csp,
            'session_cookie_secure': app_config.get('SESSION_COOKIE_SECURE', False) if app_config else False,
        }


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TEMPLATES_AUTO_RELOAD = True

    FLASH_SIGNING_SALT = os.environ.get('FLASH_SIGNING_SALT') or 'dev-flash-salt'
    SECURITY_HEADERS_ENABLED = _env_flag('SECURITY_HEADERS_ENABLED', 'false')
    CSP_MODE = 'development'


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    FLASH_SIGNING_SALT = 'test-salt'
    FLASH_SIGNED_COOKIE = True
    FLASH_AUTO_FETCH = True
    SECURITY_HEADERS_ENABLED = False
    WTF_CSRF_ENABLED = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False

    SECURITY_HEADERS_ENABLED = True
    CSP_MODE = os.environ.get('CSP_MODE', 'strict')
    SESSION_COOKIE_SECURE = True
    TALISMAN_FORCE_HTTPS = True
