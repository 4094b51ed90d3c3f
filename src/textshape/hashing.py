"""Named-algorithm digests of text.
"""

__docformat__ = 'google'

__all__ = [
    'hash',
    'hash_algorithms'
]

import hashlib
import logging
from functools import cache
from typing import Tuple
from textshape.defaults import DEFAULTS

logger = logging.getLogger(__name__)

VARIABLE_LENGTH_PREFIX = 'shake_'

@cache
def hash_algorithms() -> Tuple[str, ...]:
    """
    Names of the fixed-length digest algorithms available to `hash`.

    Taken from `hashlib.algorithms_available`, so the list depends on the
    OpenSSL build Python links against. Variable-length SHAKE algorithms
    are left out because they need an output length. The result is a
    tuple shared by every caller, so it cannot be changed in place.
    """
    return tuple(sorted(
        name for name in hashlib.algorithms_available
        if not name.lower().startswith(VARIABLE_LENGTH_PREFIX)
    ))

def hash(string: str, algorithm: str = DEFAULTS.hashing_algorithm, raw_output: bool = False) -> str|bytes:
    """
    Digest a string with a named algorithm.

    An unrecognized algorithm name is not an error: the input comes back
    unchanged, so callers can pass user-chosen names without guarding.

    Args:
        string: Text to hash, encoded as UTF-8
        algorithm: One of `hash_algorithms()`
        raw_output: Return the raw digest bytes instead of lower-case hex

    Example:
        >>> hash('abc')
        '900150983cd24fb0d6963f7d28e17f72'
        >>> hash('abc', 'not-a-real-algo')
        'abc'
    """
    if algorithm not in hash_algorithms():
        logger.debug("Unknown hash algorithm %r, returning input unchanged", algorithm)
        return string

    digest = hashlib.new(algorithm, string.encode('utf-8'))
    return digest.digest() if raw_output else digest.hexdigest()
