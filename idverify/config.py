"""Environment-driven configuration for the verification service."""

import os
from urllib.parse import quote_plus

from idverify.errors import ConfigError

DB_KEYS = ('DB_USERNAME', 'DB_PASSWORD', 'DB_HOST', 'DB_PORT', 'DB_NAME')
TLS_KEYS = ('CERT_FILE', 'KEY_FILE')

DEFAULT_ALLOWED_ORIGIN = 'https://hogwarts-legacy.info'
DEFAULT_TIMEZONE = 'Asia/Colombo'
DEFAULT_ORGANIZATION = 'Hogwarts'
DEFAULT_PORT = 5001

DEFAULTS = {
    'SQLALCHEMY_TRACK_MODIFICATIONS': False,
    'ALLOWED_ORIGIN': DEFAULT_ALLOWED_ORIGIN,
    'AUDIT_TIMEZONE': DEFAULT_TIMEZONE,
    'ORGANIZATION_NAME': DEFAULT_ORGANIZATION,
    'LOG_LEVEL': 'INFO',
    'PORT': DEFAULT_PORT,
}


def env_str(name, default=None, environ=None):
    environ = os.environ if environ is None else environ
    value = environ.get(name)
    return value if value is not None and value.strip() != '' else default


def env_int(name, default, environ=None):
    value = env_str(name, None, environ)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def database_uri(environ=None):
    """
    Build the SQLAlchemy URI from DATABASE_URL or the DB_* variables.
    Raises ConfigError listing every missing DB_* key.
    """
    url = env_str('DATABASE_URL', None, environ)
    if url:
        return url

    values = {key: env_str(key, None, environ) for key in DB_KEYS}
    missing = [key for key, value in values.items() if value is None]
    if missing:
        raise ConfigError(missing)

    return (
        f"mysql+pymysql://{quote_plus(values['DB_USERNAME'])}:{quote_plus(values['DB_PASSWORD'])}"
        f"@{values['DB_HOST']}:{values['DB_PORT']}/{values['DB_NAME']}?charset=utf8mb4"
    )


def tls_files(environ=None):
    """Return (cert_file, key_file) or raise ConfigError."""
    values = {key: env_str(key, None, environ) for key in TLS_KEYS}
    missing = [key for key, value in values.items() if value is None]
    if missing:
        raise ConfigError(missing)
    return values['CERT_FILE'], values['KEY_FILE']


def load_settings(environ=None):
    """
    Flask config mapping for create_app.

    Only database settings are mandatory here; TLS is checked by the
    serving entry point.
    """
    return {
        **DEFAULTS,
        'SQLALCHEMY_DATABASE_URI': database_uri(environ),
        'SQLALCHEMY_ENGINE_OPTIONS': {'pool_pre_ping': True, 'pool_recycle': 280},
        'ALLOWED_ORIGIN': env_str('ALLOWED_ORIGIN', DEFAULT_ALLOWED_ORIGIN, environ),
        'AUDIT_TIMEZONE': env_str('AUDIT_TIMEZONE', DEFAULT_TIMEZONE, environ),
        'ORGANIZATION_NAME': env_str('ORGANIZATION_NAME', DEFAULT_ORGANIZATION, environ),
        'LOG_LEVEL': env_str('LOG_LEVEL', 'INFO', environ).upper(),
        'PORT': env_int('PORT', DEFAULT_PORT, environ),
    }
