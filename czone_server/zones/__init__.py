"""
Zones Blueprint

Convenience zones and their per-zone patterns and simulator data.
"""

from flask import Blueprint

zones_bp = Blueprint('zones', __name__)

from czone_server.zones import routes  # noqa: E402, F401
