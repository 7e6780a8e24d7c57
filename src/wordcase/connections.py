from importlib import resources
from functools import cache

class CaseTableSource:
    @classmethod
    @cache
    def yaml_path(cls):
        """ Packaged case presets """
        return resources.files('wordcase.data').joinpath('cases.yaml')
