"""
Поиск сертификата и ключа ККМ по crn и их повторная регистрация
"""
import glob
import logging
import os
from typing import NamedTuple

import requests

from .endpoints import UPLOAD_CERTIFICATE, remote_url
from .errors import CredentialError, UploadError

logger = logging.getLogger(__name__)

CERT_SUFFIX = '.crt'
KEY_SUFFIX = '.key'


class CredentialPair(NamedTuple):
    cert_path: str
    key_path: str


def find_certificate_files(crn, certs_dir):
    """Ровно один <crn>*.crt и ровно один <crn>*.key, иначе ошибка"""
    store = glob.escape(certs_dir)
    cert_files = sorted(glob.glob(os.path.join(store, f'{crn}*{CERT_SUFFIX}')))
    key_files = sorted(glob.glob(os.path.join(store, f'{crn}*{KEY_SUFFIX}')))

    if len(cert_files) != 1 or len(key_files) != 1:
        raise CredentialError(
            f'certificate or key file not found or multiple files found for crn: {crn}'
        )

    return CredentialPair(cert_files[0], key_files[0])


def response_text(error):
    """Тело ответа удалённого сервиса, если ошибка его содержит"""
    response = getattr(error, 'response', None)
    return response.text if response is not None else ''


def upload_certificate(crn, credentials, base_url, verify=True, timeout=None):
    """Загружает сертификат и ключ на удалённый сервис (multipart)"""
    url = remote_url(UPLOAD_CERTIFICATE, base_url)
    try:
        with open(credentials.cert_path, 'rb') as cert_file, \
                open(credentials.key_path, 'rb') as key_file:
            files = {
                'certificate': (os.path.basename(credentials.cert_path), cert_file,
                                'application/octet-stream'),
                'key': (os.path.basename(credentials.key_path), key_file,
                        'application/octet-stream'),
            }
            response = requests.post(url, files=files, data={'crn': crn},
                                     verify=verify, timeout=timeout)
        response.raise_for_status()
    except (requests.RequestException, OSError) as e:
        raise UploadError(
            f'error uploading certificates: {e}\nResponse:\n{response_text(e)}'
        ) from e

    logger.info('Certificates uploaded successfully')
    return response


def check_certificates(crn, certs_dir, base_url, verify=True, timeout=None):
    """
    Находит сертификат и ключ для crn и перед каждой операцией
    заново регистрирует их на удалённом сервисе.
    """
    credentials = find_certificate_files(crn, certs_dir)

    if not os.path.isfile(credentials.cert_path):
        raise CredentialError(f'certificate file not found: {credentials.cert_path}')
    if not os.path.isfile(credentials.key_path):
        raise CredentialError(f'key file not found: {credentials.key_path}')

    logger.info('Certificates found successfully')

    upload_certificate(crn, credentials, base_url, verify=verify, timeout=timeout)
    return credentials
