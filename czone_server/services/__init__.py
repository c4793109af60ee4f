"""
Services Package

Exports all services for easy importing.
"""

from czone_server.services.geocoding import GoogleGeocoder, GeocodingError
from czone_server.services.location import LocationResolver, LocationLookupError

__all__ = [
    'GoogleGeocoder',
    'GeocodingError',
    'LocationResolver',
    'LocationLookupError'
]
