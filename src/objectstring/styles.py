"""Case-style conversion and text formatting utilities.

This module provides functions for converting strings between naming styles
(snake_case, dash-case, camelCase), stripping accents and punctuation, and
escaping HTML.

All functions in this module take and return a plain string. They are the
building blocks of the chainable methods on `objectstring.strings.StringValue`.
"""

__docformat__ = 'google'

__all__ = [
    # Case
    'lower_first',
    'upper_first',
    'capitalize',
    # Whitespace
    'trim',
    'clean',
    # Styles
    'underscore',
    'dasherize',
    'camelize',
    'humanize',
    'slugify',
    'titleize',
    # Characters
    'latinise',
    'strip_punctuation',
    'escape_html',
    'unescape_html'
]

import unicodedata
from typing import Dict
from objectstring.functions import chain_operations, replace_all
from objectstring.transliteration import transliterate
from objectstring.patterns import (
    LEADING_BLANKS_PATTERN,
    TRAILING_BLANKS_PATTERN,
    BLANK_RUN_PATTERN,
    PUNCTUATION,
    WORD_SEPARATORS,
    NAMESPACE_SEPARATOR,
    PATH_SEPARATOR,
    LEADING_UPPER_PATTERN,
    ACRONYM_BOUNDARY_PATTERN,
    CAMEL_BOUNDARY_PATTERN,
    BOUNDARY_FORMAT
)

def lower_first(text: str) -> str:
    return text[:1].lower() + text[1:]

def upper_first(text: str) -> str:
    return text[:1].upper() + text[1:]

def capitalize(text: str) -> str:
    """
    Lowercase the whole string, then uppercase its first character.

    Example:
        >>> capitalize('TEST')
        'Test'
    """
    return upper_first(text.lower())

def trim(text: str) -> str:
    """
    Strip leading and trailing spaces and tabs.

    Other whitespace, such as newlines, is kept.

    Example:
        >>> trim('\\t  \\ttest \\t\\t')
        'test'
    """
    return TRAILING_BLANKS_PATTERN.sub('', LEADING_BLANKS_PATTERN.sub('', text))

def clean(text: str) -> str:
    """
    Collapse every run of spaces and tabs into one space, then trim.

    Example:
        >>> clean('This\\t   \\tis  \\t a     \\t test')
        'This is a test'
    """
    return trim(BLANK_RUN_PATTERN.sub(' ', text))

def underscore(text: str) -> str:
    """
    Convert a string to snake case.

    Operations performed:
        1. Turn spaces and hyphens into underscores
        2. Turn '::' namespace separators into '/'
        3. Prefix a leading uppercase letter with an underscore
        4. Split an acronym from a following capitalized word
        5. Split a lowercase letter or digit from a following uppercase letter
        6. Lowercase the result

    Args:
        text: String in any naming style

    Returns:
        Snake cased string

    Example:
        >>> underscore('thisIsATest')
        'this_is_a_test'
        >>> underscore('ThisIsATest')
        '_this_is_a_test'
        >>> underscore('This::IsATest')
        '_this/is_a_test'
        >>> underscore('This Is A Test')
        '_this_is_a_test'
        >>> underscore('this Is A test')
        'this_is_a_test'
    """
    underscored = transliterate(text, WORD_SEPARATORS, '_')
    underscored = underscored.replace(NAMESPACE_SEPARATOR, PATH_SEPARATOR)
    underscored = LEADING_UPPER_PATTERN.sub(r'_\1', underscored, count=1)
    underscored = ACRONYM_BOUNDARY_PATTERN.sub(BOUNDARY_FORMAT, underscored)
    underscored = CAMEL_BOUNDARY_PATTERN.sub(BOUNDARY_FORMAT, underscored)
    return underscored.lower()

def dasherize(text: str) -> str:
    """
    Convert a string to dash case.

    Example:
        >>> dasherize('thisIsATest')
        'this-is-a-test'
        >>> dasherize('ThisIsATest')
        '-this-is-a-test'
    """
    return transliterate(underscore(text), '_', '-')

def camelize(text: str) -> str:
    """
    Convert a string to camel case.

    Words are joined without a separator and '/' path segments are joined
    with '::'. The first character is lowercased unless the underscored form
    of `text` starts with an underscore.

    Example:
        >>> camelize('this-is-a-test')
        'thisIsATest'
        >>> camelize('_this_is_a_test')
        'ThisIsATest'
        >>> camelize('_this/is/a-test')
        'This::Is::ATest'
    """
    underscored = underscore(text)
    words = ''.join(map(upper_first, underscored.split('_')))
    camelized = NAMESPACE_SEPARATOR.join(map(upper_first, words.split(PATH_SEPARATOR)))
    if underscored.startswith('_'):
        return camelized
    return lower_first(camelized)

def latinise(text: str, form: str = 'NFKD') -> str:
    """
    Remove accents by decomposing characters and dropping non-spacing marks.

    Args:
        text: String to latinise
        form: Unicode normalization form applied before the marks are dropped

    Example:
        >>> latinise('où es-tu en été ?')
        'ou es-tu en ete ?'
    """
    decomposed = unicodedata.normalize(form, text)
    return ''.join(c for c in decomposed if unicodedata.category(c) != 'Mn')

def strip_punctuation(text: str) -> str:
    """
    Remove ASCII punctuation and symbols as well as all Unicode punctuation.

    Example:
        >>> strip_punctuation('this. is, %a (test)')
        'this is a test'
    """
    return ''.join(
        c for c in text
        if c not in PUNCTUATION and not unicodedata.category(c).startswith('P')
        )

def escape_html(text: str, entities: Dict[str, str]) -> str:
    """
    Replace characters by HTML entities in the order `entities` lists them.

    The ampersand must come first so the entities introduced by later
    replacements are not escaped again.

    Example:
        >>> escape_html("<h1>l'été & co</h1>", {'&': '&amp;', "'": '&#39;', '<': '&lt;', '>': '&gt;'})
        '&lt;h1&gt;l&#39;été &amp; co&lt;/h1&gt;'
    """
    return replace_all(entities, text)

def unescape_html(text: str, entities: Dict[str, str]) -> str:
    """
    Replace HTML entities by their characters, walking `entities` in the same order as `escape_html`.

    Example:
        >>> unescape_html('&lt;b&gt;&amp;&lt;/b&gt;', {'&': '&amp;', '<': '&lt;', '>': '&gt;'})
        '<b>&</b>'
    """
    return replace_all({entity: char for char, entity in entities.items()}, text)

def humanize(text: str) -> str:
    """
    Transform a string into a human friendly form.

    Example:
        >>> humanize('-this_is a test')
        'This is a test'
    """
    operations = [
        underscore
        , lambda s: s.replace('_', ' ')
        , trim
        , capitalize
    ]
    return chain_operations(text, operations)

def slugify(text: str, form: str = 'NFKD') -> str:
    """
    Transform a string into a URL slug.

    Operations performed:
        1. Trim
        2. Humanize
        3. Latinise
        4. Strip punctuation
        5. Lowercase
        6. Dasherize

    Example:
        >>> slugify('En été, il fera chaud')
        'en-ete-il-fera-chaud'
    """
    operations = [
        trim
        , humanize
        , lambda s: latinise(s, form)
        , strip_punctuation
        , str.lower
        , dasherize
    ]
    return chain_operations(text, operations)

def titleize(text: str) -> str:
    """
    Strip punctuation and capitalize each word.

    Example:
        >>> titleize('this is a test')
        'This Is A Test'
        >>> titleize("it's A  TEST, isn't it?")
        'Its A Test Isnt It'
        >>> titleize('hello ,')
        'Hello'
    """
    words = strip_punctuation(clean(text)).split(' ')
    # trailing empty fields are dropped, leading ones kept
    while words and not words[-1]:
        words.pop()
    return ' '.join(map(capitalize, words))
