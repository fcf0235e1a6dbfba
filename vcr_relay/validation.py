"""
Проверка входящего запроса до обращения к сертификатам и удалённому API
"""
import json
import math
import re
from datetime import datetime, timezone

from werkzeug.exceptions import ClientDisconnected

from .errors import ValidationError

CRN_PATTERN = re.compile(r'[0-9]+')
# crn должен помещаться в знаковое 64-битное целое
CRN_MAX = 2 ** 63 - 1


def read_body(request):
    try:
        return request.get_data()
    except (ClientDisconnected, OSError) as e:
        raise ValidationError('Error reading request body') from e


def _reject_constant(name):
    raise ValueError(f'unsupported JSON constant {name}')


def _parse_float(text):
    # 1e400 и подобные не помещаются в float и превратились бы в inf
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f'number out of range {text}')
    return value


def parse_envelope(raw):
    """Разбирает тело запроса как JSON-объект"""
    try:
        envelope = json.loads(raw, parse_constant=_reject_constant, parse_float=_parse_float)
    except ValueError as e:
        raise ValidationError('Invalid JSON') from e

    if not isinstance(envelope, dict):
        raise ValidationError('Invalid JSON')
    return envelope


def encode_envelope(envelope):
    """Тело для удалённого API: тот же объект, только строгий JSON"""
    try:
        return json.dumps(envelope, ensure_ascii=False, allow_nan=False).encode('utf-8')
    except ValueError as e:
        raise ValidationError('Invalid JSON') from e


def validate_crn(envelope):
    """
    Проверяет поле crn и возвращает его значение.

    crn обязателен, должен быть строкой и состоять только из цифр:
    по нему ищутся файлы сертификата и ключа, поэтому никакие другие
    символы в имя файла попасть не должны.
    """
    if 'crn' not in envelope:
        raise ValidationError("Field 'crn' is missing")

    crn = envelope['crn']
    if not isinstance(crn, str):
        raise ValidationError("Field 'crn' must be a string")

    if not CRN_PATTERN.fullmatch(crn) or int(crn) > CRN_MAX:
        raise ValidationError("Field 'crn' must contain only numbers")

    return crn


def method_not_allowed(method, path):
    """Тело ответа 405 в формате удалённого API"""
    now = datetime.now(timezone.utc)
    timestamp = now.strftime('%Y-%m-%dT%H:%M:%S') + f'.{now.microsecond // 1000:03d}+0000'
    return {
        'timestamp': timestamp,
        'status': 405,
        'error': 'Method Not Allowed',
        'message': f"Request method '{method}' not supported",
        'path': path,
    }
