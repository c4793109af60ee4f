"""
Request Schemas

JSON-schema documents for every endpoint that accepts a body. Bodies are
checked by the ``expects_json`` decorator before a handler runs.
"""

from datetime import datetime, timezone

from jsonschema import FormatChecker

format_checker = FormatChecker()


def parse_timestamp(value):
    """Parse an ISO-8601 timestamp into a naive UTC datetime."""
    if value.endswith(('Z', 'z')):
        value = value[:-1] + '+00:00'
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


@format_checker.checks('date-time', raises=ValueError)
def _is_timestamp(instance):
    if not isinstance(instance, str):
        return True
    parse_timestamp(instance)
    return True


ZONE_SCHEMA = {
    'type': 'object',
    'properties': {
        'name': {'type': 'string', 'minLength': 1},
        'label': {'type': 'string'},
        'latitude': {'type': 'number'},
        'longitude': {'type': 'number'},
        'cbg_list': {'type': 'array', 'items': {'type': 'string'}},
        'start_date': {'type': 'string', 'format': 'date-time'},
        'size': {'type': 'number', 'minimum': 0},
    },
    'required': ['name', 'latitude', 'longitude', 'cbg_list', 'start_date', 'size'],
}

PATTERNS_SCHEMA = {
    'type': 'object',
    'properties': {
        'czone_id': {'type': 'integer'},
        'papdata': {'type': 'object'},
        'patterns': {'type': 'object'},
    },
    'required': ['czone_id', 'papdata', 'patterns'],
}

SIMDATA_SCHEMA = {
    'type': 'object',
    'properties': {
        'czone_id': {'type': 'integer'},
        'simdata': {'type': 'string'},
    },
    'required': ['czone_id', 'simdata'],
}

LOOKUP_SCHEMA = {
    'type': 'object',
    'properties': {
        'location': {'type': 'string', 'minLength': 1},
    },
    'required': ['location'],
}
