"""Case-style conversion: StudlyCase, camelCase, snake_case and kebab-case.

Conversions are memoized in a `textshape.entities.ConversionCache`. The
module-level functions share `DEFAULT_CACHE`, which lives for the whole
process. Build a `CaseConverter` with its own cache when isolation is
needed, for example in tests.
"""

__docformat__ = 'google'

__all__ = [
    # Classes
    'CaseConverter',

    # Functions
    'studly',
    'camel',
    'snake',
    'kebab',
    'convert',

    # Cache
    'DEFAULT_CACHE'
]

import logging
from typing import Optional
from textshape.defaults import DEFAULTS
from textshape.entities import CaseStyle, ConversionCache
from textshape.primitives import is_lower_word, is_upper_letter, lcfirst, ucfirst
from textshape.patterns import (
    WORD_START_PATTERN,
    WHITESPACE_PATTERN,
    WORD_DELIMITER_PATTERN
)

logger = logging.getLogger(__name__)

def _upper_words(string: str) -> str:
    """Titlecase the first character of each whitespace-delimited word."""
    return WORD_START_PATTERN.sub(lambda m: m.group(1) + ucfirst(m.group(2)), string)

class CaseConverter:
    """
    Converts text between case styles, memoizing every result.

    Args:
        cache: Cache to read from and write to. A fresh one is created when omitted.
    """
    def __init__(self, cache: Optional[ConversionCache] = None):
        self.cache = cache if cache is not None else ConversionCache()

    def studly(self, string: str) -> str:
        """
        Convert to StudlyCase.

        Hyphens and underscores become word breaks, the first letter of
        each word is titlecased and all whitespace is removed. The rest of
        each word is left as it was, as is a first letter whose titlecase
        form would expand to several codepoints.

        Example:
            >>> CaseConverter().studly('foo_bar-baz')
            'FooBarBaz'
            >>> CaseConverter().studly('hello world')
            'HelloWorld'
        """
        cached = self.cache.get(CaseStyle.STUDLY, string)
        if cached is not None:
            return cached

        logger.debug("studly cache miss: %r", string)
        words = _upper_words(WORD_DELIMITER_PATTERN.sub(' ', string))
        return self.cache.put(CaseStyle.STUDLY, string, WHITESPACE_PATTERN.sub('', words))

    def camel(self, string: str) -> str:
        """
        Convert to camelCase: StudlyCase with the first letter lowered.

        Example:
            >>> CaseConverter().camel('foo_bar-baz')
            'fooBarBaz'
        """
        cached = self.cache.get(CaseStyle.CAMEL, string)
        if cached is not None:
            return cached

        logger.debug("camel cache miss: %r", string)
        return self.cache.put(CaseStyle.CAMEL, string, lcfirst(self.studly(string)))

    def snake(self, string: str, delimiter: str = DEFAULTS.case_snake_delimiter) -> str:
        """
        Convert to snake_case, or any other lower-case delimited style.

        A string made only of lowercase letters is returned as-is.
        Otherwise every word is capitalized, whitespace is removed, the
        delimiter goes in front of each uppercase letter that does not
        start the string, and the result is lowercased.

        Args:
            string: Text to convert
            delimiter: Separator inserted between words

        Example:
            >>> CaseConverter().snake('fooBarBaz')
            'foo_bar_baz'
            >>> CaseConverter().snake('Foo Bar')
            'foo_bar'
            >>> CaseConverter().snake('fooBar', '.')
            'foo.bar'
        """
        cached = self.cache.get(CaseStyle.SNAKE, string, delimiter)
        if cached is not None:
            return cached

        logger.debug("snake cache miss: %r (delimiter %r)", string, delimiter)
        if is_lower_word(string):
            result = string
        else:
            compact = WHITESPACE_PATTERN.sub('', _upper_words(string))
            result = ''.join(
                delimiter + char if index > 0 and is_upper_letter(char) else char
                for index, char in enumerate(compact)
            ).lower()
        return self.cache.put(CaseStyle.SNAKE, string, result, delimiter)

    def kebab(self, string: str) -> str:
        """
        Convert to kebab-case, i.e. `snake` with a hyphen delimiter.

        Example:
            >>> CaseConverter().kebab('fooBarBaz')
            'foo-bar-baz'
        """
        return self.snake(string, '-')

    def convert(self, string: str, style: CaseStyle|str) -> str:
        """
        Convert to the given style.

        Args:
            string: Text to convert
            style: A `CaseStyle` or its value ('studly', 'camel', 'snake', 'kebab')

        Raises:
            ValueError: If `style` is not a known case style.
        """
        style = CaseStyle(style)
        return getattr(self, style.value)(string)

DEFAULT_CACHE: ConversionCache = ConversionCache()
"""Process-wide cache behind the module-level conversion functions."""

_converter = CaseConverter(DEFAULT_CACHE)

def studly(string: str) -> str:
    """
    Convert to StudlyCase using the shared cache.

    Example:
        >>> studly('foo_bar-baz')
        'FooBarBaz'
    """
    return _converter.studly(string)

def camel(string: str) -> str:
    """
    Convert to camelCase using the shared cache.

    Example:
        >>> camel('foo bar')
        'fooBar'
    """
    return _converter.camel(string)

def snake(string: str, delimiter: str = DEFAULTS.case_snake_delimiter) -> str:
    """
    Convert to snake_case using the shared cache.

    Example:
        >>> snake('fooBarBaz')
        'foo_bar_baz'
    """
    return _converter.snake(string, delimiter)

def kebab(string: str) -> str:
    """
    Convert to kebab-case using the shared cache.

    Example:
        >>> kebab('FooBar')
        'foo-bar'
    """
    return _converter.kebab(string)

def convert(string: str, style: CaseStyle|str) -> str:
    return _converter.convert(string, style)
