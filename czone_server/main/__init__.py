"""
Main Blueprint

Root greeting and location-to-zip lookup.
"""

from flask import Blueprint

main_bp = Blueprint('main', __name__)

from czone_server.main import routes  # noqa: E402, F401
