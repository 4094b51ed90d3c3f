"""Thin wrappers for trimming, quoting, replacement, containment and padding.

These functions carry no decision logic beyond the empty-argument and
no-match fallbacks they document.
"""

from .functions import __all__
from .functions import *

__all__ = __all__
