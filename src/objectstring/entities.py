"""Configuration objects shared by every `objectstring.strings.StringValue`.

State that would otherwise be ambient (the random source used by shuffling,
the Unicode normalization form used for accent stripping, the words understood
as booleans and the HTML entity table) lives on a `StringConfig`.
"""

__docformat__ = 'google'

__all__ = [
    'NormalizationForm',
    'StringConfig'
]

import logging
import random
import yaml
from dataclasses import dataclass
from functools import cache
from enum import Enum
from typing import Dict, Tuple
from objectstring import lookups

logger = logging.getLogger(__name__)

class NormalizationForm(Enum):
    """
    Unicode normalization forms accepted by `unicodedata.normalize`.
    """
    NFC = "NFC"
    NFD = "NFD"
    NFKC = "NFKC"
    NFKD = "NFKD"

@dataclass
class StringConfig:
    """
    Settings used by string operations.

    Args:
        normalization: Normalization form applied before stripping non-spacing marks
        rng: Random source used by `shuffle`
        true_words: Words read as True by `to_boolean` (case-insensitive)
        false_words: Words read as False by `to_boolean` (case-insensitive)
        html_entities: Ordered mapping of character to entity used for HTML escaping

    Can be initiated with any argument. Arguments left as None are populated
    from the packaged defaults.
    """
    normalization: NormalizationForm|str = None
    rng: random.Random = None
    true_words: Tuple[str, ...] = None
    false_words: Tuple[str, ...] = None
    html_entities: Dict[str, str] = None

    def __post_init__(self):
        self._normalize_types()
        self._assign_missing_attributes()

    @classmethod
    @cache
    def _defaults(cls):
        return lookups.DefaultsData()

    @classmethod
    @cache
    def _entities(cls):
        return lookups.EntityData()

    @classmethod
    @cache
    def default(cls) -> 'StringConfig':
        """Shared configuration used when a string is built without one."""
        return cls()

    def _normalize_types(self):
        if isinstance(self.normalization, str): self.normalization = NormalizationForm(self.normalization.upper())
        if self.true_words is not None: self.true_words = tuple(self.true_words)
        if self.false_words is not None: self.false_words = tuple(self.false_words)

    def _assign_missing_attributes(self):
        d = self._defaults()
        self.normalization = self.normalization or NormalizationForm(d.normalization)
        self.rng = self.rng or random.Random(d.seed)
        self.true_words = self.true_words or tuple(d.truthy)
        self.false_words = self.false_words or tuple(d.falsy)
        if self.html_entities is None:
            self.html_entities = dict(self._entities().char_to_entity)

    @classmethod
    def load_from_yaml(cls, file_path, **overrides) -> 'StringConfig':
        """
        Build a configuration from a YAML file.

        The file uses the same keys as the packaged `defaults.yaml`; keys that are
        absent fall back to the packaged defaults.

        Args:
            file_path: Path to a YAML file
            **overrides: Field values that take precedence over the file

        Returns:
            A new `StringConfig`

        Example:
            >>> config = StringConfig.load_from_yaml('strings.yaml')
            >>> config.normalization
            <NormalizationForm.NFKD: 'NFKD'>
        """
        logger.debug("Loading string configuration from %s", file_path)
        with open(file_path, 'r', encoding='utf-8') as f:
            data = lookups.DefaultsData(yaml.safe_load(f))

        seed = data.seed
        settings = {
            'normalization': data.normalization,
            'rng': random.Random(seed) if seed is not None else None,
            'true_words': data.truthy,
            'false_words': data.falsy
        }
        settings.update(overrides)
        return cls(**settings)
