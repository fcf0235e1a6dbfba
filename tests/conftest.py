import pytest
import requests

from server import app as relay_app

BASE_URL = 'https://vcr.test/api/v1.0/'


class FakeResponse:
    def __init__(self, status_code=200, text='{"code":0}', content_type='application/json'):
        self.status_code = status_code
        self.text = text
        self.content = text.encode('utf-8')
        self.headers = {'Content-Type': content_type} if content_type else {}

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f'{self.status_code} Error', response=self)


class RecordingPost:
    """Подменяет requests.post и запоминает все исходящие вызовы"""

    def __init__(self):
        self.calls = []
        self.responses = {}
        self.errors = {}

    def __call__(self, url, **kwargs):
        call = dict(kwargs, url=url)
        files = kwargs.get('files')
        if files:
            # файлы закрываются после запроса, читаем сразу
            call['files'] = {name: (fname, fh.read(), ctype)
                             for name, (fname, fh, ctype) in files.items()}
        self.calls.append(call)
        segment = url.rsplit('/', 1)[-1]
        if segment in self.errors:
            raise self.errors[segment]
        return self.responses.get(segment, FakeResponse())

    @property
    def urls(self):
        return [c['url'] for c in self.calls]


@pytest.fixture
def certs_dir(tmp_path):
    store = tmp_path / 'certs'
    store.mkdir()
    return store


def add_pair(store, name, cert=b'CERT', key=b'KEY'):
    (store / f'{name}.crt').write_bytes(cert)
    (store / f'{name}.key').write_bytes(key)


@pytest.fixture
def upstream(monkeypatch):
    recorder = RecordingPost()
    monkeypatch.setattr(requests, 'post', recorder)
    return recorder


@pytest.fixture
def app(certs_dir):
    relay_app.config.update(
        TESTING=True,
        VCR_BASE_URL=BASE_URL,
        VCR_CERTS_DIR=str(certs_dir),
        VCR_VERIFY_TLS=True,
        VCR_UPSTREAM_TIMEOUT=None,
    )
    return relay_app


@pytest.fixture
def client(app):
    return app.test_client()
