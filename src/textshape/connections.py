from importlib import resources
from functools import cache

class DefaultsDataSource:
    @classmethod
    @cache
    def yaml_path(cls):
        """ Packaged default configuration """
        return resources.files('textshape.data').joinpath('defaults.yaml')
