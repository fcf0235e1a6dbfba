#!/usr/bin/env python3
"""
Ретранслятор для API виртуальной ККМ налоговой службы
Принимает JSON по HTTP из локальной сети и пересылает его на удалённый
API по TLS с клиентским сертификатом торговца (по полю crn)
"""

import logging
import os

from flask import Flask, jsonify, request
from flask_cors import CORS
import urllib3

from vcr_relay import config
from vcr_relay.endpoints import ROUTES
from vcr_relay.errors import RelayError
from vcr_relay.upstream import relay
from vcr_relay.validation import method_not_allowed, parse_envelope, read_body

logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config.update(config.flask_config())
# Свой OPTIONS не отвечаем: любой метод кроме POST получает 405
CORS(app, automatic_options=False)

TEXT_PLAIN = 'text/plain; charset=utf-8'

if not config.VERIFY_TLS:
    # Проверка сертификата удалённого сервиса отключена настройкой
    urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)


def _error(message, status):
    return message, status, {'Content-Type': TEXT_PLAIN}


def handle_request(operation):
    """Общая обработка запроса для всех операций"""
    try:
        envelope = parse_envelope(read_body(request))
        reply = relay(
            operation,
            envelope,
            base_url=app.config['VCR_BASE_URL'],
            certs_dir=app.config['VCR_CERTS_DIR'],
            verify=app.config['VCR_VERIFY_TLS'],
            timeout=app.config['VCR_UPSTREAM_TIMEOUT'],
        )
    except RelayError as e:
        if e.status_code < 500:
            logger.warning('%s %s rejected: %s', request.method, request.path, e.message)
            return _error(e.message, e.status_code)
        logger.error('%s failed: %s', operation, e.message)
        return _error(f'Error processing request: {e.message}', e.status_code)

    return reply.body, 200, {'Content-Type': reply.content_type or TEXT_PLAIN}


def _make_view(operation):
    def view():
        return handle_request(operation)
    view.__name__ = operation
    return view


for path, operation in ROUTES.items():
    app.add_url_rule(path, endpoint=operation, view_func=_make_view(operation),
                     methods=['POST'], provide_automatic_options=False)


@app.errorhandler(405)
def handle_method_not_allowed(e):
    """Формат ответа на неподдерживаемый метод как у удалённого API"""
    return jsonify(method_not_allowed(request.method, request.path)), 405


def main():
    # Отключаем debug mode если запущено в фоновом режиме
    debug_mode = os.isatty(0)

    print(f'🚀 Сервер запущен на http://{config.HOST}:{config.PORT}')
    print(f'📁 Сертификаты: {os.path.abspath(config.CERTS_DIR)}')
    app.run(debug=debug_mode, port=config.PORT, host=config.HOST, use_reloader=False)


if __name__ == '__main__':
    main()
