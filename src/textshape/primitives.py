"""Codepoint-level primitives used by the rest of the package.

All offsets and lengths in this package count Unicode codepoints, never
bytes. Display width is the terminal column count of a string, where wide
and fullwidth codepoints (CJK ideographs, fullwidth forms) count as two
columns and every other codepoint as one.
"""

__docformat__ = 'google'

__all__ = [
    # Errors
    'UnsupportedEncodingError',

    # Functions
    'text',
    'length',
    'lower',
    'upper',
    'ucfirst',
    'lcfirst',
    'substr',
    'char_width',
    'display_width',
    'strimwidth',
    'is_upper_letter',
    'is_lower_word'
]

import unicodedata
from typing import Optional
from wcwidth import wcwidth

class UnsupportedEncodingError(LookupError, ValueError):
    """Raised when text is requested in an encoding Python does not know."""

    def __init__(self, encoding: str):
        self.encoding = encoding
        super().__init__(f'Unsupported encoding: {encoding}')

def text(value: str|bytes, encoding: str = 'utf-8') -> str:
    """
    Coerce a value to text.

    Bytes are decoded with `encoding`. Undecodable bytes become U+FFFD,
    one replacement codepoint per invalid byte sequence.

    Args:
        value: A string or bytes
        encoding: Codec name used for bytes

    Raises:
        UnsupportedEncodingError: If `encoding` is not a known text codec.
            Bytes-to-bytes codecs such as `hex` or `base64` are rejected too.

    Example:
        >>> text(b'caf\\xc3\\xa9')
        'café'
    """
    try:
        b"".decode(encoding)
    except LookupError:
        raise UnsupportedEncodingError(encoding) from None

    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode(encoding, errors='replace')
    return value

def length(value: str|bytes, encoding: str = 'utf-8') -> int:
    """
    Count codepoints.

    Example:
        >>> length('naïve')
        5
        >>> length('naïve'.encode('utf-8'))
        5
    """
    return len(text(value, encoding))

def lower(string: str) -> str:
    return string.lower()

def upper(string: str) -> str:
    return string.upper()

def _fold_char(char: str, folded: str) -> str:
    return folded if len(folded) == 1 else char

def ucfirst(string: str) -> str:
    """
    Titlecase the first codepoint only.

    A codepoint whose case mapping expands to several codepoints
    (`ß` to `Ss`) is left as it is.

    Example:
        >>> ucfirst('ǆemal')
        'ǅemal'
        >>> ucfirst('ßtraße')
        'ßtraße'
    """
    return _fold_char(string[:1], string[:1].title()) + string[1:]

def lcfirst(string: str) -> str:
    """
    Lowercase the first codepoint only.

    A codepoint whose lowercase form expands to several codepoints
    (`İ` to `i̇`) is left as it is.
    """
    return _fold_char(string[:1], string[:1].lower()) + string[1:]

def substr(string: str, start: int, length: Optional[int] = None) -> str:
    """
    Codepoint-indexed substring.

    Args:
        string: Source text
        start: Offset of the first codepoint. Negative offsets count from the end.
        length: Number of codepoints to take. Negative values leave that
            many codepoints off the end. `None` takes the rest of the string.

    Returns:
        The substring, or an empty string if the range is empty

    Example:
        >>> substr('héllo', 1, 3)
        'éll'
        >>> substr('héllo', -3)
        'llo'
        >>> substr('héllo', 1, -1)
        'éll'
    """
    if length is None:
        return string[start:]
    elif length < 0:
        return string[start:length]
    else:
        return string[start:][:length]

def char_width(char: str) -> int:
    """
    Display width of a single codepoint.

    Example:
        >>> char_width('a')
        1
        >>> char_width('漢')
        2
    """
    return 2 if wcwidth(char) == 2 else 1

def display_width(string: str) -> int:
    """
    Terminal column count of a string.

    Example:
        >>> display_width('abc')
        3
        >>> display_width('日本語')
        6
    """
    return sum(map(char_width, string))

def strimwidth(string: str, width: int) -> str:
    """
    Longest prefix whose display width does not exceed `width`.

    A wide codepoint that would straddle the boundary is left out whole.

    Example:
        >>> strimwidth('日本語', 3)
        '日'
        >>> strimwidth('hello', 3)
        'hel'
    """
    used = 0
    for index, char in enumerate(string):
        used += char_width(char)
        if used > width:
            return string[:index]
    return string

def is_upper_letter(char: str) -> bool:
    """True for uppercase and titlecase letters in any script."""
    return unicodedata.category(char) in ('Lu', 'Lt')

def is_lower_word(string: str) -> bool:
    """
    True if the string is non-empty and made only of lowercase letters.

    Digits, whitespace and punctuation all make this False.

    Example:
        >>> is_lower_word('straße')
        True
        >>> is_lower_word('foo_bar')
        False
    """
    return len(string) > 0 and all(unicodedata.category(c) == 'Ll' for c in string)
