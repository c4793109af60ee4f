"""
Convenience Zone API - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging

from flask import Flask
from czone_server.extensions import db, cors
from czone_server.config import Config


def create_app(config_class=Config, geocoder=None):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)
        geocoder: Geocoding client used by the zip lookup; a GoogleGeocoder
            built from the configuration when omitted

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(level=app.config.get('LOG_LEVEL', 'INFO'),
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    # Initialize extensions
    db.init_app(app)
    cors.init_app(app, origins=app.config.get('CORS_ORIGINS', '*'))

    from czone_server.services import GoogleGeocoder, LocationResolver
    if geocoder is None:
        geocoder = GoogleGeocoder(api_key=app.config['GOOGLE_API_KEY'],
                                  base_url=app.config['GEOCODING_URL'],
                                  timeout=app.config.get('GEOCODING_TIMEOUT'))
    app.extensions['location_resolver'] = LocationResolver(geocoder)

    if not app.config['GOOGLE_API_KEY']:
        app.logger.warning('GOOGLE_API_KEY is not set; /lookup-zip requests will be rejected upstream')

    # Register blueprints
    from czone_server.main import main_bp
    from czone_server.zones import zones_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(zones_bp)

    from czone_server.errors import register_error_handlers
    register_error_handlers(app)

    # Create database tables
    with app.app_context():
        from czone_server import models  # noqa: F401
        db.create_all()

    return app
