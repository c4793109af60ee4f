"""
Main Routes
"""

from flask import current_app, jsonify, request
from czone_server.decorators import expects_json
from czone_server.main import main_bp
from czone_server.schemas import LOOKUP_SCHEMA


@main_bp.route('/')
def index():
    return jsonify({'message': 'Hello, World!'})


@main_bp.route('/lookup-zip', methods=['POST'])
@expects_json(LOOKUP_SCHEMA)
def lookup_zip():
    """Resolve a free-text location to its zip code and city"""
    resolver = current_app.extensions['location_resolver']
    location = request.get_json()['location']
    return jsonify(resolver.resolve(location))
