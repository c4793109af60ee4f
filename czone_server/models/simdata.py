"""
Simulator Cache Model
"""

from czone_server.extensions import db


class SimData(db.Model):
    """Cached simulator output for a zone, replaced on every upload"""
    __tablename__ = 'simdata'

    id = db.Column(db.Integer, primary_key=True)
    simdata = db.Column(db.Text, nullable=False)
    czone_id = db.Column(db.Integer, db.ForeignKey('convenience_zones.id'), nullable=False, unique=True)

    def __repr__(self):
        return f'<SimData Zone:{self.czone_id}>'
