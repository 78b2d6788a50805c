# tests/test_settings.py

import importlib


def load_development():
    module = importlib.import_module('config.settings.development')
    return importlib.reload(module)


def test_development_allowed_hosts_default_to_local_addresses(monkeypatch):
    monkeypatch.delenv('ALLOWED_HOSTS', raising=False)

    assert load_development().ALLOWED_HOSTS == ['localhost', '127.0.0.1', '0.0.0.0']


def test_development_allowed_hosts_read_from_env(monkeypatch):
    monkeypatch.setenv('ALLOWED_HOSTS', 'localhost,192.168.0.10')

    assert load_development().ALLOWED_HOSTS == ['localhost', '192.168.0.10']
