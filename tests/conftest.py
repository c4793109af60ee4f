import pytest

from czone_server import create_app
from czone_server.config import TestConfig


class FakeGeocoder:
    """Geocoder stand-in returning canned results and recording calls."""

    def __init__(self, forward=None, reverse=None):
        self.forward = forward or []
        self.reverse = reverse or []
        self.calls = []

    def geocode(self, address):
        self.calls.append(('geocode', address))
        return self.forward

    def reverse_geocode(self, lat, lng):
        self.calls.append(('reverse_geocode', lat, lng))
        return self.reverse


@pytest.fixture()
def geocoder():
    return FakeGeocoder()


@pytest.fixture()
def app(geocoder):
    app = create_app(TestConfig, geocoder=geocoder)
    with app.app_context():
        yield app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_zone(client):
    def _make_zone(**overrides):
        body = {
            'name': 'Oklahoma City',
            'label': 'okc',
            'latitude': 35.4676,
            'longitude': -97.5164,
            'cbg_list': ['401091001001', '401091001002'],
            'start_date': '2024-03-01T12:00:00Z',
            'size': 500,
        }
        body.update(overrides)
        r = client.post('/convenience-zones', json=body)
        assert r.status_code == 200
        return r.get_json()['data']
    return _make_zone
