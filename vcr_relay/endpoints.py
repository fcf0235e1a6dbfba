"""
Фиксированная таблица операций удалённого API и локальных маршрутов
"""
from types import MappingProxyType

from .errors import UpstreamError

# Операция -> сегмент пути удалённого API
ENDPOINTS = MappingProxyType({
    'checkConnection': 'checkConnection',
    'activate': 'activate',
    'configureDepartments': 'configureDepartments',
    'getGoodList': 'getGoodList',
    'print': 'print',
    'printCopy': 'printCopy',
    'getReturnedReceiptInfo': 'getReturnedReceiptInfo',
    'printReturnReceipt': 'printReturnReceipt',
    'uploadCertificate': 'uploadCertificate',
})

UPLOAD_CERTIFICATE = 'uploadCertificate'

# Локальный путь -> операция
ROUTES = MappingProxyType({f'/{name}': name for name in ENDPOINTS})


def remote_url(operation, base_url):
    """Полный URL операции на удалённом сервисе"""
    segment = ENDPOINTS.get(operation)
    if segment is None:
        raise UpstreamError(f'unknown endpoint {operation}')
    return f'{base_url}{segment}'
