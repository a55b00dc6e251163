"""
.. include:: ../../README.md

See individual module documentation for detailed information.
"""
from . import strings
from . import styles
from . import transliteration
from . import patterns
from . import entities
from . import errors
from .strings import StringValue, make_string
from .entities import StringConfig, NormalizationForm
from .errors import ObjectStringError, InvalidRangeSpec

__all__ = [
    'strings',
    'styles',
    'transliteration',
    'patterns',
    'entities',
    'errors',
    'StringValue',
    'make_string',
    'StringConfig',
    'NormalizationForm',
    'ObjectStringError',
    'InvalidRangeSpec'
]
