"""Shared fixtures: a fake Home Assistant hub behind a mocked requests.Session."""

import time

import pytest
import requests


def make_response(status: int, text: str, url: str = 'http://hub/') -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response._content = text.encode('utf-8')
    response.encoding = 'utf-8'
    response.url = url
    return response


class FakeHub:
    """Stands in for requests.Session, answering template and service calls.

    Args:
        areas: Mapping of area id -> list of entity ids, in hub order
        failing: Templates or service entity ids that answer HTTP 500
        raw: Templates answered with a fixed body
        delays: Seconds to wait before answering a template
    """

    def __init__(self, areas=None, failing=(), raw=None, delays=None):
        self.areas = dict(areas or {})
        self.failing = set(failing)
        self.raw = dict(raw or {})
        self.delays = dict(delays or {})
        self.headers = {}
        self.calls = []
        self.timeouts = []
        self.closed = False

    def request(self, method, url, json=None, timeout=None):
        self.calls.append((method, url, json))
        self.timeouts.append(timeout)

        if url.endswith('/api/template'):
            expression = json['template'][3:-3]
            time.sleep(self.delays.get(expression, 0))
            if expression in self.failing:
                return make_response(500, 'error', url)
            if expression in self.raw:
                return make_response(200, self.raw[expression], url)
            if expression == 'areas()':
                return make_response(200, repr(list(self.areas)), url)
            area_id = expression[len("area_entities('"):-len("')")]
            return make_response(200, repr(list(self.areas.get(area_id, []))), url)

        if '/api/services/' in url:
            if json['entity_id'] in self.failing:
                return make_response(500, 'error', url)
            return make_response(200, '[]', url)

        return make_response(200, '{"message": "API running."}', url)

    def close(self):
        self.closed = True

    def templates(self):
        return [body['template'] for method, url, body in self.calls if url.endswith('/api/template')]

    def toggled(self):
        return [body['entity_id'] for method, url, body in self.calls if '/api/services/light/toggle' in url]


@pytest.fixture
def credentials():
    return {'base_url': 'http://homeassistant.local:8123', 'token': 'secret'}


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point the config file at a temporary directory and clear env credentials."""
    monkeypatch.setenv('HACL_CONFIG_DIR', str(tmp_path))
    monkeypatch.delenv('HACL_BASE_URL', raising=False)
    monkeypatch.delenv('HACL_TOKEN', raising=False)
    return tmp_path
