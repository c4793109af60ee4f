"""
JSON Error Handlers
"""

import logging

from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from czone_server.extensions import db
from czone_server.services import GeocodingError, LocationLookupError

logger = logging.getLogger(__name__)


def register_error_handlers(app):
    """Render every error the API raises as a JSON body."""

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        return jsonify({'message': e.description}), e.code

    @app.errorhandler(LocationLookupError)
    def handle_lookup_error(e):
        return jsonify({'message': e.message}), 400

    @app.errorhandler(GeocodingError)
    def handle_geocoding_error(e):
        logger.warning('Geocoding provider failure: %s', e)
        return jsonify({'message': 'Geocoding service unavailable'}), 502

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(e):
        db.session.rollback()
        logger.exception('Database error')
        return jsonify({'message': 'Database error', 'error': str(e)}), 500
