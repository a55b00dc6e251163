import logging
import pandas as pd
import yaml
from functools import cached_property
from typing import Dict, List, Optional
from objectstring.connections import EntityDataSource, DefaultsDataSource

logger = logging.getLogger(__name__)

class EntityData(EntityDataSource):
    def __init__(self):
        logger.debug("Loading HTML entity table from %s", self.csv_path())
        with self.csv_path().open('r', encoding='utf-8') as f:
            data = pd.read_csv(f, dtype=str, keep_default_na=False)
            self.character = data['character']
            self.entity = data['entity']

    @cached_property
    def char_to_entity(self) -> Dict[str, str]:
        return dict(zip(self.character, self.entity))

    @cached_property
    def entity_to_char(self) -> Dict[str, str]:
        return dict(zip(self.entity, self.character))

class DefaultsData(DefaultsDataSource):
    def __init__(self, data: Optional[dict] = None):
        if data is None:
            logger.debug("Loading packaged defaults from %s", self.yaml_path())
            with self.yaml_path().open('r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        self._data = data or {}

    @cached_property
    def normalization(self) -> Optional[str]:
        return self._data.get('normalization')

    @cached_property
    def truthy(self) -> Optional[List[str]]:
        return (self._data.get('booleans') or {}).get('truthy')

    @cached_property
    def falsy(self) -> Optional[List[str]]:
        return (self._data.get('booleans') or {}).get('falsy')

    @cached_property
    def seed(self) -> Optional[int]:
        return self._data.get('seed')
