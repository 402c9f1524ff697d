# noray.py
"""
noray - homogeneous-coordinate and color arithmetic for a ray tracer
"""
__version__ = "0.1.0"

import logging

from utils.constants import PACKAGE_LOGGERS

# Library logging: stay silent unless the application configures handlers
for _name in PACKAGE_LOGGERS:
    logging.getLogger(_name).addHandler(logging.NullHandler())

# Import main components to expose them at package level
from domain.geometry.constants import MACHINE_EPSILON, EPSILON
from domain.geometry.tetrad import Point, Vector, TetradLike, point, vector
from domain.color.rgb import Color, RGB

# Make them available when someone does 'import noray'
__all__ = [
    'Point',
    'Vector',
    'TetradLike',
    'point',
    'vector',
    'Color',
    'RGB',
    'MACHINE_EPSILON',
    'EPSILON',
]
