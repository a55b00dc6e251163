from importlib import resources
from functools import cache

class EntityDataSource:
    @classmethod
    @cache
    def csv_path(cls):
        """ Character to HTML entity table, in escaping order """
        return resources.files('objectstring.data').joinpath('html_entities.csv')

class DefaultsDataSource:
    @classmethod
    @cache
    def yaml_path(cls):
        """ Packaged configuration defaults """
        return resources.files('objectstring.data').joinpath('defaults.yaml')
