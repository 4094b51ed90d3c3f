from dataclasses import dataclass, field
from enum import Enum
from threading import Lock
from typing import Dict, Optional

class CaseStyle(Enum):
    """
    Enumeration of case styles produced by `textshape.case.CaseConverter`.

    Values are the names of the conversion functions.
    """
    STUDLY = "studly"
    CAMEL = "camel"
    SNAKE = "snake"
    KEBAB = "kebab"

@dataclass(frozen=True)
class CacheKey:
    """ A frozen key identifying one conversion: style, input and delimiter.
    """
    style: CaseStyle
    text: str
    delimiter: Optional[str] = None

@dataclass
class ConversionCache:
    """
    Memoized results of case conversions.

    Entries are never evicted, so a cache lives as long as its owner. A
    stored value is always what a fresh conversion of the same key would
    return, which makes concurrent writers on one key harmless: they
    store equal values. Writes hold a lock so readers never see a
    partially inserted entry.

    Example:
        >>> cache = ConversionCache()
        >>> cache.put(CaseStyle.SNAKE, 'fooBar', 'foo_bar', '_')
        'foo_bar'
        >>> cache.get(CaseStyle.SNAKE, 'fooBar', '_')
        'foo_bar'
        >>> cache.get(CaseStyle.SNAKE, 'fooBar', '-') is None
        True
    """
    entries: Dict[CacheKey, str] = field(default_factory=dict)
    _lock: Lock = field(default_factory=Lock, repr=False, compare=False)

    def get(self, style: CaseStyle, text: str, delimiter: Optional[str] = None) -> Optional[str]:
        return self.entries.get(CacheKey(style, text, delimiter))

    def put(self, style: CaseStyle, text: str, value: str, delimiter: Optional[str] = None) -> str:
        with self._lock:
            self.entries[CacheKey(style, text, delimiter)] = value
        return value

    def clear(self):
        with self._lock:
            self.entries.clear()

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: CacheKey) -> bool:
        return key in self.entries
