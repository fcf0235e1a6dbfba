"""
Настройки ретранслятора из переменных окружения
"""
import os


class ConfigError(ValueError):
    """Недопустимое значение переменной окружения"""


def _as_number(name, value, kind):
    try:
        return kind(value)
    except ValueError:
        raise ConfigError(f'{name} must be a number, got {value!r}') from None


def _as_bool(value):
    return value.strip().lower() not in ('0', 'false', 'no', 'off', '')


def _as_timeout(value, name='VCR_UPSTREAM_TIMEOUT'):
    # Пустое значение: без таймаута, запрос ждёт ответа сколько угодно
    if not value:
        return None
    return _as_number(name, value, float)


BASE_URL = os.getenv('VCR_BASE_URL', 'https://ecrm.taxservice.am/taxsystem-rs-vcr/api/v1.0/')
CERTS_DIR = os.getenv('VCR_CERTS_DIR', 'certs')

HOST = os.getenv('VCR_HOST', '0.0.0.0')
PORT = _as_number('VCR_PORT', os.getenv('VCR_PORT', '8019'), int)

LOG_LEVEL = os.getenv('VCR_LOG_LEVEL', 'INFO')

VERIFY_TLS = _as_bool(os.getenv('VCR_VERIFY_TLS', 'true'))
UPSTREAM_TIMEOUT = _as_timeout(os.getenv('VCR_UPSTREAM_TIMEOUT', ''))


def flask_config():
    """Набор ключей для app.config"""
    return {
        'VCR_BASE_URL': BASE_URL,
        'VCR_CERTS_DIR': CERTS_DIR,
        'VCR_VERIFY_TLS': VERIFY_TLS,
        'VCR_UPSTREAM_TIMEOUT': UPSTREAM_TIMEOUT,
    }
