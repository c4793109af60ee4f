"""
Models Package

Exports all models for easy importing.
"""

from czone_server.models.zone import ConvenienceZone
from czone_server.models.patterns import PaPData, MovementPattern
from czone_server.models.simdata import SimData

__all__ = ['ConvenienceZone', 'PaPData', 'MovementPattern', 'SimData']
