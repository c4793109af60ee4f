"""
Convenience Zone Model
"""

from czone_server.extensions import db


class ConvenienceZone(db.Model):
    """A named region with coordinates, size and its census block groups"""
    __tablename__ = 'convenience_zones'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    label = db.Column(db.String(255))
    latitude = db.Column(db.Float, nullable=False)
    longitude = db.Column(db.Float, nullable=False)
    cbg_list = db.Column(db.JSON, nullable=False, default=list)
    size = db.Column(db.Float, nullable=False)
    start_date = db.Column(db.DateTime, nullable=False)

    # One-to-one sub-resources, keyed by czone_id
    papdata = db.relationship('PaPData', backref='zone', uselist=False, lazy=True)
    patterns = db.relationship('MovementPattern', backref='zone', uselist=False, lazy=True)
    simdata = db.relationship('SimData', backref='zone', uselist=False, lazy=True)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'label': self.label,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'cbg_list': list(self.cbg_list or []),
            'size': self.size,
            'start_date': self.start_date.isoformat() if self.start_date else None,
        }

    def __repr__(self):
        return f'<ConvenienceZone {self.name}>'
