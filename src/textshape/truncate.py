"""Truncation by display width or by word count.
"""

__docformat__ = 'google'

__all__ = [
    'limit',
    'words',
    'words_count'
]

from textshape.defaults import DEFAULTS
from textshape.patterns import WORD_PATTERN, words_pattern
from textshape.primitives import display_width, length, strimwidth

def limit(string: str, limit: int = DEFAULTS.truncate_limit, append: str = DEFAULTS.truncate_append) -> str:
    """
    Truncate a string to a display width.

    Width, not codepoint count, decides the cut: wide characters such as
    CJK ideographs take two columns. The kept prefix never ends inside a
    codepoint and has trailing whitespace removed before `append` is added.

    Args:
        string: Text to truncate
        limit: Maximum display width of the kept prefix
        append: Marker added after a truncated prefix

    Returns:
        The input if it fits, otherwise the truncated prefix plus `append`.
        A limit of zero or less keeps nothing, leaving `append` alone.

    Example:
        >>> limit('hello world', 5)
        'hello...'
        >>> limit('日本語テキスト', 5)
        '日本...'
        >>> limit('short', 10)
        'short'
    """
    if string == '' or display_width(string) <= limit:
        return string
    elif limit <= 0:
        return append
    else:
        return strimwidth(string, limit).rstrip() + append

def words(string: str, words: int = DEFAULTS.truncate_words, append: str = DEFAULTS.truncate_append) -> str:
    """
    Truncate a string to a number of words.

    Args:
        string: Text to truncate
        words: Maximum number of whitespace-delimited words to keep
        append: Marker added after a truncated prefix

    Returns:
        The input if it has no more than `words` words, otherwise the
        first `words` words plus `append`. A word count of zero or less
        keeps nothing, leaving `append` alone.

    Example:
        >>> words('the quick brown fox', 2)
        'the quick...'
        >>> words('the quick', 2)
        'the quick'
    """
    if words <= 0:
        matched = ''
    else:
        match = words_pattern(words).match(string)
        if match is None:
            return string
        matched = match.group(0)

    if length(matched) == length(string):
        return string
    return matched.rstrip() + append

def words_count(string: str) -> int:
    """
    Count whitespace-delimited words.

    Example:
        >>> words_count('  one two\\tthree ')
        3
    """
    return len(WORD_PATTERN.findall(string))
