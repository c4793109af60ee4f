"""
Movement Pattern and PaP Data Models

Both payloads are opaque JSON documents stored as serialized text.
"""

from czone_server.extensions import db


class PaPData(db.Model):
    """Precomputed analysis data for a zone"""
    __tablename__ = 'papdata'

    id = db.Column(db.Integer, primary_key=True)
    papdata = db.Column(db.Text, nullable=False)
    czone_id = db.Column(db.Integer, db.ForeignKey('convenience_zones.id'), nullable=False, unique=True)

    def __repr__(self):
        return f'<PaPData Zone:{self.czone_id}>'


class MovementPattern(db.Model):
    """Mobility data for a zone"""
    __tablename__ = 'movement_patterns'

    id = db.Column(db.Integer, primary_key=True)
    patterns = db.Column(db.Text, nullable=False)
    czone_id = db.Column(db.Integer, db.ForeignKey('convenience_zones.id'), nullable=False, unique=True)
    start_date = db.Column(db.DateTime, default=db.func.current_timestamp(), nullable=False)

    def __repr__(self):
        return f'<MovementPattern Zone:{self.czone_id} at {self.start_date}>'
