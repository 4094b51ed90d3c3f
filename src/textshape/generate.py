"""Random strings and numbered suffixes.
"""

__docformat__ = 'google'

__all__ = [
    'random',
    'increment'
]

import secrets
from textshape.defaults import DEFAULTS
from textshape.patterns import increment_pattern

def random(length: int = DEFAULTS.generate_length, keyspace: str = DEFAULTS.generate_keyspace) -> str:
    """
    Build an unpredictable string from a keyspace.

    Characters are drawn with `secrets.choice`, so the result is suitable
    for tokens and keys.

    Args:
        length: Number of codepoints. Values below 1 are raised to 1.
        keyspace: Codepoints to draw from

    Raises:
        ValueError: If the keyspace is empty.
    """
    if keyspace == '':
        raise ValueError('Cannot generate a random string from an empty keyspace')

    length = max(length, 1)
    return ''.join(secrets.choice(keyspace) for _ in range(length))

def increment(string: str, first: int = DEFAULTS.generate_increment_first,
              separator: str = DEFAULTS.generate_increment_separator) -> str:
    """
    Append a numbered suffix, or bump the one already there.

    Example:
        >>> increment('page')
        'page_1'
        >>> increment('page_1')
        'page_2'
        >>> increment('copy', 2, '-')
        'copy-2'
    """
    match = increment_pattern(separator).fullmatch(string)

    if match is None:
        return f'{string}{separator}{first}'
    return f"{match.group('base')}{separator}{int(match.group('number')) + 1}"
