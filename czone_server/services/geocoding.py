"""
Geocoding Service

Thin wrapper around the Google Geocoding API (forward and reverse lookups).
"""

import logging
import requests

logger = logging.getLogger(__name__)

GOOGLE_GEOCODE_URL = 'https://maps.googleapis.com/maps/api/geocode/json'


class GeocodingError(Exception):
    """Raised when the geocoding provider cannot be reached or answers with an HTTP error."""


class GoogleGeocoder:
    """Client for the Google Geocoding API.

    Args:
        api_key: Google Maps Platform key, sent with every request
        base_url: geocode JSON endpoint
        timeout: transport timeout in seconds (None waits indefinitely)
    """

    def __init__(self, api_key, base_url=GOOGLE_GEOCODE_URL, timeout=None):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout

    def geocode(self, address):
        """Resolve free text to a list of geocode results."""
        logger.debug('Forward geocoding %r', address)
        return self._request({'address': address})

    def reverse_geocode(self, lat, lng):
        """Resolve a coordinate pair to a list of geocode results."""
        logger.debug('Reverse geocoding %s,%s', lat, lng)
        return self._request({'latlng': f'{lat},{lng}'})

    def _request(self, params):
        params = dict(params, key=self.api_key)
        try:
            resp = requests.get(self.base_url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise GeocodingError(f'Geocoding request failed: {e.__class__.__name__}') from e

        if resp.status_code != 200:
            raise GeocodingError(f'Geocoding API error {resp.status_code}')

        try:
            data = resp.json()
        except ValueError as e:
            raise GeocodingError('Geocoding API returned invalid JSON') from e

        status = data.get('status')
        if status not in ('OK', 'ZERO_RESULTS'):
            logger.warning('Geocoding API returned status %s: %s', status, data.get('error_message', ''))

        return data.get('results') or []
