"""
Вызов удалённого API ККМ с клиентским сертификатом торговца
"""
import logging
from typing import NamedTuple, Optional

import requests

from .certificates import check_certificates, response_text
from .endpoints import remote_url
from .errors import UpstreamError
from .validation import encode_envelope, validate_crn

logger = logging.getLogger(__name__)

JSON_HEADERS = {'Content-Type': 'application/json'}


class UpstreamReply(NamedTuple):
    body: bytes
    content_type: Optional[str]


def relay(operation, envelope, base_url, certs_dir, verify=True, timeout=None):
    """
    Пересылает запрос операции на удалённый API.

    Тело уходит без изменений, включая crn и все остальные поля.
    crn проверяется здесь же, до поиска сертификата. До основного
    вызова сертификат и ключ торговца ищутся и заново загружаются
    на сервис (см. check_certificates).
    """
    crn = validate_crn(envelope)
    url = remote_url(operation, base_url)
    payload = encode_envelope(envelope)

    credentials = check_certificates(crn, certs_dir, base_url, verify=verify, timeout=timeout)

    try:
        response = requests.post(
            url,
            data=payload,
            headers=JSON_HEADERS,
            cert=(credentials.cert_path, credentials.key_path),
            verify=verify,
            timeout=timeout,
        )
        response.raise_for_status()
    except (requests.RequestException, OSError) as e:
        raise UpstreamError(f'error in {operation}: {e}\nResponse:\n{response_text(e)}') from e

    logger.info('%s result: %s', operation, response.text)
    return UpstreamReply(response.content, response.headers.get('Content-Type'))
