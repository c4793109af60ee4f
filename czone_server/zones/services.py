"""
Zone Services

Persistence logic for convenience zones and their sub-resources.
"""

import json
import logging

from sqlalchemy.orm import joinedload

from czone_server.extensions import db
from czone_server.models import ConvenienceZone, PaPData, MovementPattern, SimData
from czone_server.schemas import parse_timestamp

logger = logging.getLogger(__name__)


def list_zones():
    """All zones in store order, each flagged ``ready`` once its PaP data exists."""
    zones = ConvenienceZone.query.options(joinedload(ConvenienceZone.papdata)).all()
    zone_data = []
    for zone in zones:
        zone_info = zone.to_dict()
        zone_info['ready'] = zone.papdata is not None
        zone_data.append(zone_info)
    return zone_data


def create_zone(payload):
    zone = ConvenienceZone(
        name=payload['name'],
        label=payload.get('label'),
        latitude=payload['latitude'],
        longitude=payload['longitude'],
        cbg_list=list(payload['cbg_list']),
        size=payload['size'],
        start_date=parse_timestamp(payload['start_date'])
    )
    db.session.add(zone)
    db.session.commit()
    logger.info('Created convenience zone %s (%s)', zone.id, zone.name)
    return zone


def delete_zone(czone_id):
    """Delete a zone by id.

    Raises if the zone does not exist or still owns sub-resources; the
    session is rolled back before the error propagates.
    """
    try:
        zone = ConvenienceZone.query.filter_by(id=czone_id).one()
        zone_info = zone.to_dict()
        db.session.delete(zone)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    logger.info('Deleted convenience zone %s', czone_id)
    return zone_info


def create_patterns(czone_id, papdata, patterns):
    """Store PaP data and movement patterns for a zone in one transaction."""
    pap = PaPData(czone_id=czone_id, papdata=json.dumps(papdata))
    movement = MovementPattern(czone_id=czone_id, patterns=json.dumps(patterns))
    db.session.add_all([pap, movement])
    db.session.commit()
    return pap, movement


def get_patterns(czone_id):
    """Return ``(papdata, patterns)`` decoded, or None if either is missing."""
    pap = PaPData.query.filter_by(czone_id=czone_id).first()
    movement = MovementPattern.query.filter_by(czone_id=czone_id).first()
    if pap is None or movement is None:
        return None
    return json.loads(pap.papdata), json.loads(movement.patterns)


def upsert_simdata(czone_id, simdata):
    record = SimData.query.filter_by(czone_id=czone_id).first()
    if record is None:
        record = SimData(czone_id=czone_id, simdata=simdata)
        db.session.add(record)
    else:
        record.simdata = simdata
    db.session.commit()
    return record


def get_simdata(czone_id):
    record = SimData.query.filter_by(czone_id=czone_id).first()
    return record.simdata if record else None
