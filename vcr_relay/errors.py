"""Ошибки ретранслятора и соответствующие им HTTP-статусы"""


class RelayError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(RelayError):
    """Запрос не прошёл проверку, до сертификатов дело не дошло"""
    status_code = 400


class CredentialError(RelayError):
    """Не удалось однозначно найти сертификат и ключ по crn"""


class UploadError(RelayError):
    """Удалённый сервис не принял загрузку сертификата"""


class UpstreamError(RelayError):
    """Ошибка вызова удалённого API"""
