"""
Location Resolution Service

Turns free-text locations into a postal code and city name. When the forward
geocode carries no postal code (landmarks, whole regions) the first result's
coordinates are reverse geocoded instead.
"""

import logging

logger = logging.getLogger(__name__)


class LocationLookupError(Exception):
    """Raised when a location cannot be resolved from the provider's data."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


def _has_type(component, type_name):
    return type_name in (component.get('types') or [])


def _find_component(components, type_name):
    for component in components:
        if _has_type(component, type_name):
            return component
    return None


class LocationResolver:
    """Resolve locations to ``{'zip_code', 'city'}`` using a geocoder.

    The geocoder needs ``geocode(address)`` and ``reverse_geocode(lat, lng)``,
    each returning a list of Google-style result dicts.
    """

    def __init__(self, geocoder):
        self.geocoder = geocoder

    def resolve(self, location):
        if not isinstance(location, str) or not location:
            raise LocationLookupError('Location is required')

        results = self.geocoder.geocode(location)

        address_result = next((r for r in results if r.get('address_components')), None)
        if address_result is None:
            raise LocationLookupError('No address components found')

        components = address_result['address_components']
        postal = _find_component(components, 'postal_code')
        if postal is not None:
            locality = _find_component(components, 'locality')
            return {
                'zip_code': postal.get('long_name', ''),
                'city': locality.get('long_name', '') if locality else ''
            }

        logger.info('No postal code in forward geocode for %r, falling back to reverse lookup', location)
        return self._resolve_by_coordinates(results)

    def _resolve_by_coordinates(self, results):
        point = None
        for result in results:
            point = (result.get('geometry') or {}).get('location')
            if point:
                break
        if not point:
            raise LocationLookupError('No geometry found for reverse lookup')

        zip_code = ''
        city = ''
        # Every component of every result is scanned; later matches overwrite earlier ones
        for result in self.geocoder.reverse_geocode(point['lat'], point['lng']):
            for component in result.get('address_components') or []:
                if _has_type(component, 'postal_code'):
                    zip_code = component.get('long_name', '')
                if _has_type(component, 'locality'):
                    city = component.get('long_name', '')

        return {'zip_code': zip_code, 'city': city}
