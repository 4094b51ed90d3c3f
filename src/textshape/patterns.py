"""Regex patterns and character sets shared by the text operations.
"""

__docformat__ = 'google'

import re
from typing import Dict, List

## Case conversion
# Constants
WORD_DELIMITERS: List[str] = ["-", "_"]
"""Characters treated as word boundaries before StudlyCase conversion.

Used in `textshape.case.CaseConverter.studly`."""

# Patterns
WORD_START_PATTERN: re.Pattern = re.compile(r"(^|\s)(\S)")
"""Compiled regex matching the first character of every whitespace-delimited word.

Capture groups:
    * 1: the preceding whitespace (or the empty start of the string)
    * 2: the first character of the word

Used in `textshape.case`."""

WHITESPACE_PATTERN: re.Pattern = re.compile(r"\s+")
"""Compiled regex matching runs of Unicode whitespace.

Used in `textshape.case` and `textshape.functions`."""

WORD_DELIMITER_PATTERN: re.Pattern = re.compile(
    f"[{''.join(map(re.escape, WORD_DELIMITERS))}]"
    )
"""Compiled regex matching any of `textshape.patterns.WORD_DELIMITERS`."""


## Truncation
# Building blocks
LEADING_SPACE: str = r"^\s*"
WORD_GROUP: str = r"(?:\S+\s*)"

def words_pattern(words: int) -> re.Pattern:
    """
    Build the anchored pattern matching the first `words` word groups.

    Example:
        >>> words_pattern(2).match('one two three').group(0)
        'one two '
    """
    return re.compile(f"{LEADING_SPACE}{WORD_GROUP}{{1,{words}}}")

WORD_PATTERN: re.Pattern = re.compile(r"\S+")
"""Compiled regex matching a single word.

Used in `textshape.truncate.words_count`."""


## Slashes and quotes
# Patterns
REPEATED_SLASHES_PATTERN: re.Pattern = re.compile(r"(?<!:)//+")
"""Compiled regex matching runs of two or more slashes not preceded by a colon.

The colon exception keeps URL schemes (`https://`) intact.

Used in `textshape.functions.reduce_slashes`."""

QUOTES: List[str] = ['"', "'"]
"""Quote characters removed by `textshape.functions.strip_quotes`."""

QUOTE_ENTITIES: Dict[str, str] = {
    "\\'": "&#39;",
    '\\"': "&quot;",
    "'": "&#39;",
    '"': "&quot;"
}
"""Quote sequences and their HTML entities, applied in order.

Escaped quotes come first so the backslash is consumed with the quote.

Used in `textshape.functions.quotes_to_entities`."""

NEW_LINES_PATTERN: re.Pattern = re.compile(r"\r\n|\r")
"""Compiled regex matching Windows and classic Mac line endings."""


## Generation
# Constants
ALPHANUMERIC: str = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
"""Default keyspace for `textshape.generate.random`."""

def increment_pattern(separator: str) -> re.Pattern:
    """
    Build the pattern matching a string that already ends in a numeric suffix.

    Capture groups:
        * base
        * number
    """
    return re.compile(f"(?P<base>.+){re.escape(separator)}(?P<number>[0-9]+)", re.S)
