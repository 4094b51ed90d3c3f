"""Default arguments for the text operations, loaded from packaged YAML.

Each `section: {key: value}` pair in `textshape/data/defaults.yaml` becomes
a `section_key` attribute, e.g. `truncate.append` is `Defaults().truncate_append`.
"""

__docformat__ = 'google'

__all__ = [
    'Defaults',
    'DEFAULTS'
]

import logging
from keyword import iskeyword
from pathlib import Path
import yaml
from textshape.connections import DefaultsDataSource

logger = logging.getLogger(__name__)

REQUIRED = {
    'case': ['snake_delimiter'],
    'segments': ['delimiter'],
    'truncate': ['limit', 'words', 'append'],
    'hashing': ['algorithm'],
    'generate': ['length', 'keyspace', 'increment_first', 'increment_separator']
}
"""Sections and keys every defaults file must define."""

class Defaults(DefaultsDataSource):
    """
    Configuration values read from a YAML file.

    Args:
        file_path: Optional path to a YAML file. The packaged
            `defaults.yaml` is used when omitted.

    Raises:
        ValueError: If a required section or key is missing.

    Example:
        >>> Defaults().truncate_append
        '...'
    """
    def __init__(self, file_path = None):
        file_path = Path(file_path) if file_path else self.yaml_path()

        with file_path.open('r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        self._validate_data(data)

        for section, values in data.items():
            for key, value in values.items():
                name = f'{section}_{key}'
                if not iskeyword(name):
                    setattr(self, name, value)

        logger.debug("Loaded defaults from %s", file_path)

    @staticmethod
    def _validate_data(data):
        for section, keys in REQUIRED.items():
            values = data.get(section)
            if not isinstance(values, dict):
                raise ValueError(f'Missing section in defaults file: {section}')
            missing = [key for key in keys if key not in values]
            if missing:
                raise ValueError(f'Missing keys in defaults section {section}: {", ".join(missing)}')

DEFAULTS: Defaults = Defaults()
"""Process-wide defaults, loaded once at import."""
