__docformat__ = 'google'

__all__ = [
    # Trimming and whitespace
    'trim',
    'trim_left',
    'trim_right',
    'trim_slashes',
    'reduce_slashes',
    'strip_spaces',
    'normalize_spaces',
    'normalize_new_lines',

    # Quotes
    'strip_quotes',
    'quotes_to_entities',

    # Replacement
    'replace_first',
    'replace_last',
    'replace_all',

    # Containment
    'contains',
    'contains_any',
    'contains_all',
    'starts_with',
    'starts_with_any',
    'ends_with',
    'ends_with_any',
    'start',
    'finish',

    # Padding
    'pad_left',
    'pad_right',
    'pad_both',

    # Other
    'reverse',
    'repeat',
    'chain_operations'
]

from functools import reduce
from typing import Callable, Dict, Iterable, Optional, Sequence
from textshape.patterns import (
    WHITESPACE_PATTERN,
    REPEATED_SLASHES_PATTERN,
    NEW_LINES_PATTERN,
    QUOTES,
    QUOTE_ENTITIES
)

def trim(string: str, characters: Optional[str] = None) -> str:
    """Strip whitespace, or the given characters, from both ends."""
    return string.strip(characters)

def trim_left(string: str, characters: Optional[str] = None) -> str:
    return string.lstrip(characters)

def trim_right(string: str, characters: Optional[str] = None) -> str:
    return string.rstrip(characters)

def trim_slashes(string: str) -> str:
    """
    Remove leading and trailing slashes.

    Example:
        >>> trim_slashes('/blog/posts/')
        'blog/posts'
    """
    return string.strip('/')

def reduce_slashes(string: str) -> str:
    """
    Collapse repeated slashes, leaving `scheme://` intact.

    Example:
        >>> reduce_slashes('https://example.com//blog///post')
        'https://example.com/blog/post'
    """
    return REPEATED_SLASHES_PATTERN.sub('/', string)

def strip_spaces(string: str) -> str:
    """Remove all whitespace."""
    return WHITESPACE_PATTERN.sub('', string)

def normalize_spaces(string: str) -> str:
    """
    Replace every run of whitespace with a single space.

    Example:
        >>> normalize_spaces('a  b\\n\\tc')
        'a b c'
    """
    return WHITESPACE_PATTERN.sub(' ', string)

def normalize_new_lines(string: str) -> str:
    """Convert `\\r\\n` and `\\r` line endings to `\\n`."""
    return NEW_LINES_PATTERN.sub('\n', string)

def strip_quotes(string: str) -> str:
    """
    Remove single and double quotes.

    Example:
        >>> strip_quotes('"it\\'s"')
        'its'
    """
    for quote in QUOTES:
        string = string.replace(quote, '')
    return string

def quotes_to_entities(string: str) -> str:
    """
    Convert single and double quotes, escaped or not, to HTML entities.

    A string without quotes comes back unchanged.

    Example:
        >>> quotes_to_entities('say "hi"')
        'say &quot;hi&quot;'
    """
    return replace_all(QUOTE_ENTITIES, string)

def replace_first(string: str, search: str, replace: str) -> str:
    """
    Replace the first occurrence of `search`.

    Example:
        >>> replace_first('a-b-c', '-', '+')
        'a+b-c'
    """
    if search == '':
        return string
    return string.replace(search, replace, 1)

def replace_last(string: str, search: str, replace: str) -> str:
    """
    Replace the last occurrence of `search`.

    An empty search string or one that does not occur leaves the input unchanged.

    Example:
        >>> replace_last('a-b-c', '-', '+')
        'a-b+c'
    """
    if search == '':
        return string

    position = string.rfind(search)
    if position == -1:
        return string
    return string[:position] + replace + string[position + len(search):]

def replace_all(replacements: Dict[str, str], string: str) -> str:
    """
    Apply literal replacements in dictionary order.

    Example:
        >>> replace_all({'cat': 'dog', 'dog': 'wolf'}, 'cat')
        'wolf'
    """
    for search, replace in replacements.items():
        string = string.replace(search, replace)
    return string

def contains_any(string: str, needles: Sequence[str]) -> bool:
    """
    True if any non-empty candidate occurs in the string.

    Example:
        >>> contains_any('hello world', ['xyz', 'world'])
        True
    """
    return any(needle != '' and needle in string for needle in needles)

def contains_all(string: str, needles: Sequence[str]) -> bool:
    """
    True if every candidate occurs in the string.

    An empty candidate never matches, so its presence makes this False.
    """
    return all(contains_any(string, [needle]) for needle in needles)

def contains(string: str, needle: str) -> bool:
    return contains_any(string, [needle])

def starts_with_any(string: str, prefixes: Sequence[str]) -> bool:
    return any(prefix != '' and string.startswith(prefix) for prefix in prefixes)

def starts_with(string: str, prefix: str) -> bool:
    return starts_with_any(string, [prefix])

def ends_with_any(string: str, suffixes: Sequence[str]) -> bool:
    return any(suffix != '' and string.endswith(suffix) for suffix in suffixes)

def ends_with(string: str, suffix: str) -> bool:
    return ends_with_any(string, [suffix])

def start(string: str, prefix: str) -> str:
    """
    Begin a string with a single instance of `prefix`.

    Example:
        >>> start('//path', '/')
        '/path'
    """
    if prefix == '':
        return string
    while string.startswith(prefix):
        string = string[len(prefix):]
    return prefix + string

def finish(string: str, suffix: str) -> str:
    """
    End a string with a single instance of `suffix`.

    Example:
        >>> finish('path', '/')
        'path/'
    """
    if suffix == '':
        return string
    while string.endswith(suffix):
        string = string[:-len(suffix)]
    return string + suffix

def _fill(pad: str, width: int) -> str:
    if width <= 0 or pad == '':
        return ''
    return (pad * width)[:width]

def pad_left(string: str, length: int, pad: str = ' ') -> str:
    """
    Pad on the left to `length` codepoints.

    Example:
        >>> pad_left('7', 3, '0')
        '007'
    """
    return _fill(pad, length - len(string)) + string

def pad_right(string: str, length: int, pad: str = ' ') -> str:
    return string + _fill(pad, length - len(string))

def pad_both(string: str, length: int, pad: str = ' ') -> str:
    """
    Pad on both sides to `length` codepoints; an odd remainder goes right.

    Example:
        >>> pad_both('ab', 7, '-')
        '--ab---'
    """
    short = max(0, length - len(string))
    left = short // 2
    return _fill(pad, left) + string + _fill(pad, short - left)

def reverse(string: str) -> str:
    return string[::-1]

def repeat(string: str, times: int) -> str:
    return string * max(times, 0)

def chain_operations(value: str, operations: Iterable[Callable[[str], str]]) -> str:
    """
    Feed a value through a sequence of single-argument functions.

    Example:
        >>> chain_operations('  Foo Bar ', [str.strip, str.lower])
        'foo bar'
    """
    return reduce(lambda result, operation: operation(result), operations, value)
