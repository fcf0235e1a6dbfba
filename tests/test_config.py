"""
Тесты для vcr_relay.config: разбор переменных окружения
"""

import pytest

from vcr_relay.config import ConfigError, _as_bool, _as_number, _as_timeout


class TestTimeout:
    def test_empty_means_no_timeout(self):
        assert _as_timeout('') is None

    def test_seconds(self):
        assert _as_timeout('2.5') == 2.5

    def test_not_a_number_names_variable(self):
        with pytest.raises(ConfigError, match="VCR_UPSTREAM_TIMEOUT must be a number, got 'soon'"):
            _as_timeout('soon')


def test_port_not_a_number_names_variable():
    with pytest.raises(ConfigError, match='VCR_PORT'):
        _as_number('VCR_PORT', 'eighty', int)


@pytest.mark.parametrize('value, expected', [('true', True), ('1', True), ('False', False),
                                             ('off', False), ('', False)])
def test_bool(value, expected):
    assert _as_bool(value) is expected
