"""
.. include:: ../../README.md

See individual module documentation for detailed information.
"""
import logging

from . import primitives
from . import case
from . import segmenter
from . import truncate
from . import hashing
from . import generate
from . import functions
from . import frames
from . import entities
from . import defaults

from .primitives import *
from .case import *
from .segmenter import *
from .truncate import *
from .hashing import *
from .generate import *
from .functions import *

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'primitives',
    'case',
    'segmenter',
    'truncate',
    'hashing',
    'generate',
    'functions',
    'entities',
    'defaults',
    'frames',
    *primitives.__all__,
    *case.__all__,
    *segmenter.__all__,
    *truncate.__all__,
    *hashing.__all__,
    *generate.__all__,
    *functions.__all__
]
