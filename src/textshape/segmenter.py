"""Delimiter-based extraction: segments, and text before or after a marker.

Every function here is total. A missing delimiter, an empty search string
or an out-of-range index falls back to the whole input or to an empty
string, as documented per function. Offsets are codepoint offsets, so a
multi-byte character is never split.
"""

__docformat__ = 'google'

__all__ = [
    'segments',
    'segment',
    'first_segment',
    'last_segment',
    'before',
    'before_last',
    'after',
    'after_last',
    'between'
]

from typing import List
from textshape.defaults import DEFAULTS

def segments(string: str, delimiter: str = DEFAULTS.segments_delimiter) -> List[str]:
    """
    Split a string on every occurrence of a delimiter.

    Empty segments between consecutive delimiters are kept.

    Args:
        string: Text to split
        delimiter: Separator. An empty delimiter yields the whole string as one segment.

    Example:
        >>> segments('a/b//c', '/')
        ['a', 'b', '', 'c']
        >>> segments('one two')
        ['one', 'two']
    """
    if delimiter == '':
        return [string]
    return string.split(delimiter)

def segment(string: str, index: int, delimiter: str = DEFAULTS.segments_delimiter) -> str:
    """
    Get one segment by position.

    Negative indexes count from the end, so -1 is the last segment. The
    sequence is reversed and the index mapped to `abs(index) - 1`, which
    selects the same element as `len(segments) + index`.

    Args:
        string: Text to split
        index: Zero-based position, or negative position from the end
        delimiter: Separator

    Returns:
        The segment, or an empty string if the index is out of range

    Example:
        >>> segment('a/b/c', -1, '/')
        'c'
        >>> segment('a/b/c', 5, '/')
        ''
    """
    parts = segments(string, delimiter)

    if index < 0:
        parts.reverse()
        index = abs(index) - 1

    if index < len(parts):
        return parts[index]
    else:
        return ''

def first_segment(string: str, delimiter: str = DEFAULTS.segments_delimiter) -> str:
    return segment(string, 0, delimiter)

def last_segment(string: str, delimiter: str = DEFAULTS.segments_delimiter) -> str:
    return segment(string, -1, delimiter)

def before(string: str, search: str) -> str:
    """
    Text before the first occurrence of `search`.

    Example:
        >>> before('user@example.com', '@')
        'user'
        >>> before('no marker', '@')
        'no marker'
    """
    if search == '':
        return string
    return string.split(search, 1)[0]

def before_last(string: str, search: str) -> str:
    """
    Text before the last occurrence of `search`.

    Example:
        >>> before_last('a.b.c', '.')
        'a.b'
    """
    if search == '':
        return string

    position = string.rfind(search)
    if position == -1:
        return string
    return string[:position]

def after(string: str, search: str) -> str:
    """
    Text after the first occurrence of `search`.

    Example:
        >>> after('user@example.com', '@')
        'example.com'
        >>> after('no marker', '@')
        'no marker'
    """
    if search == '':
        return string
    return string.split(search, 1)[-1]

def after_last(string: str, search: str) -> str:
    """
    Text after the last occurrence of `search`.

    Example:
        >>> after_last('a.b.c', '.')
        'c'
    """
    if search == '':
        return string

    position = string.rfind(search)
    if position == -1:
        return string
    return string[position + len(search):]

def between(string: str, start: str, end: str) -> str:
    """
    Text between the first `start` and the first `end` that follows it.

    Returns the input unchanged if either marker is empty or missing.

    Example:
        >>> between('[tag] rest', '[', ']')
        'tag'
    """
    if start == '' or end == '':
        return string

    opening = string.find(start)
    if opening == -1:
        return string

    offset = opening + len(start)
    closing = string.find(end, offset)
    if closing == -1:
        return string
    return string[offset:closing]
