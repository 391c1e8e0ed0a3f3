import os
from dataclasses import FrozenInstanceError

import pytest

from sound_catalog.config import TestingConfig
from sound_catalog.settings import AppSettings, EXTENSION_KEY


def test_settings_are_immutable(app, assets):
    settings = app.extensions[EXTENSION_KEY]
    assert isinstance(settings, AppSettings)
    assert settings.music_dir == assets['music'].resolve()
    with pytest.raises(FrozenInstanceError):
        settings.port = 1


def test_default_port(app):
    assert app.extensions[EXTENSION_KEY].port == app.config['PORT']


def test_openapi_document_lists_routes(client):
    resp = client.get('/apispec_1.json')
    assert resp.status_code == 200
    spec = resp.get_json()
    assert '/sounds' in spec['paths']
    responses = spec['paths']['/sounds']['get']['responses']
    assert {'200', '404', '500'} <= set(responses)
    assert responses['404']['schema']['properties']['error']['type'] == 'string'


def test_swagger_ui_is_served(client):
    resp = client.get('/docs/')
    assert resp.status_code == 200


def test_referrer_policy_header(client):
    resp = client.get('/sounds')
    assert resp.headers['Referrer-Policy'] == 'strict-origin-when-cross-origin'


def test_cors_header(client):
    resp = client.get('/sounds', headers={'Origin': 'http://example.com'})
    # flask-cors 6 echoes the origin, earlier releases answer '*'
    assert resp.headers.get('Access-Control-Allow-Origin') in ('*', 'http://example.com')


def test_host_defaults_to_all_interfaces():
    assert TestingConfig.HOST == os.environ.get('HOST', '0.0.0.0')
