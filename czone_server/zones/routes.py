"""
Zone Routes

JSON endpoints for convenience zones, movement patterns and simulator data.
"""

import logging

from flask import abort, jsonify, request
from czone_server.decorators import expects_json
from czone_server.schemas import ZONE_SCHEMA, PATTERNS_SCHEMA, SIMDATA_SCHEMA
from czone_server.zones import zones_bp
from czone_server.zones import services

logger = logging.getLogger(__name__)


@zones_bp.route('/convenience-zones')
def list_convenience_zones():
    return jsonify({'data': services.list_zones()})


@zones_bp.route('/convenience-zones', methods=['POST'])
@expects_json(ZONE_SCHEMA)
def create_convenience_zone():
    zone = services.create_zone(request.get_json())
    return jsonify({'data': zone.to_dict()})


@zones_bp.route('/convenience-zones/<int:czone_id>', methods=['DELETE'])
def delete_convenience_zone(czone_id):
    """Delete a zone; fails while patterns or simulator data still reference it"""
    try:
        zone_info = services.delete_zone(czone_id)
    except Exception as e:
        logger.warning('Could not delete convenience zone %s: %s', czone_id, e)
        return jsonify({'message': 'Failed to delete convenience zone', 'error': str(e)}), 400
    return jsonify({'data': zone_info})


@zones_bp.route('/patterns', methods=['POST'])
@expects_json(PATTERNS_SCHEMA)
def create_patterns():
    payload = request.get_json()
    pap, movement = services.create_patterns(int(payload['czone_id']), payload['papdata'], payload['patterns'])
    return jsonify({
        'data': {
            'papdata': {'id': pap.id},
            'patterns': {'id': movement.id}
        }
    })


@zones_bp.route('/patterns/<int:czone_id>')
def get_patterns(czone_id):
    found = services.get_patterns(czone_id)
    if found is None:
        abort(404, description='Patterns not found for this convenience zone')
    papdata, patterns = found
    return jsonify({'data': {'papdata': papdata, 'patterns': patterns}})


@zones_bp.route('/simdata', methods=['POST'])
@expects_json(SIMDATA_SCHEMA)
def save_simdata():
    payload = request.get_json()
    services.upsert_simdata(int(payload['czone_id']), payload['simdata'])
    return jsonify({'message': 'Success'})


@zones_bp.route('/simdata/<int:czone_id>')
def get_simdata(czone_id):
    simdata = services.get_simdata(czone_id)
    if simdata is None:
        abort(404, description='Simulation data not found for this convenience zone')
    return jsonify({'data': simdata})
