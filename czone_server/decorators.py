"""
Request Validation Decorator
"""

from functools import wraps

from flask import request, jsonify
from jsonschema import Draft7Validator

from czone_server.schemas import format_checker


def expects_json(schema):
    """Decorator rejecting requests whose JSON body does not match ``schema``.

    Invalid bodies get a 400 with one message per violation; the wrapped
    view is never called.
    """
    validator = Draft7Validator(schema, format_checker=format_checker)

    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            payload = request.get_json(silent=True)
            errors = list(validator.iter_errors(payload))
            if errors:
                return jsonify({
                    'message': 'Invalid request body',
                    'errors': [_describe(e) for e in errors],
                }), 400
            return f(*args, **kwargs)
        return wrapper
    return decorator


def _describe(error):
    field = '.'.join(str(p) for p in error.path)
    return f'{field}: {error.message}' if field else error.message
