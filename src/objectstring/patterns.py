"""Regex patterns and building blocks shared by string operations.
"""

__docformat__ = 'google'

import re
from functools import lru_cache
from string import punctuation
from typing import List

## Whitespace
# Constants
BLANKS: str = " \t"
"""Characters removed by trimming and chomping.

Only literal spaces and tabs count; newlines and other whitespace survive
`trim`, `clean` and the chomp operations."""

# Building blocks
BLANK: str = f"[{BLANKS}]"

# Patterns
LEADING_BLANKS_PATTERN: re.Pattern = re.compile(f"^{BLANK}+")
"""Compiled regex matching the run of spaces and tabs at the start of a string.

Used in `objectstring.strings.StringValue.trim_left`."""

TRAILING_BLANKS_PATTERN: re.Pattern = re.compile(f"{BLANK}+\\Z")
"""Compiled regex matching the run of spaces and tabs at the end of a string.

Used in `objectstring.strings.StringValue.trim_right`."""

BLANK_RUN_PATTERN: re.Pattern = re.compile(f"{BLANK}+")
"""Compiled regex matching any run of spaces and tabs.

Used in `objectstring.strings.StringValue.clean`."""

WHITESPACE_PATTERN: re.Pattern = re.compile("\\s")
"""Compiled regex matching a single whitespace character of any kind.

Used in `objectstring.strings.StringValue.is_empty`."""


## Character classes
NUMERIC_PATTERN: re.Pattern = re.compile("[0-9]+")
ALPHA_PATTERN: re.Pattern = re.compile("[a-zA-Z]+")
ALPHA_NUMERIC_PATTERN: re.Pattern = re.compile("[a-zA-Z0-9]+")
"""ASCII-only classes, always applied with `fullmatch`.

Used in `objectstring.strings.StringValue.is_numeric`, `is_alpha` and `is_alpha_numeric`."""

PUNCTUATION: str = punctuation
"""ASCII punctuation and symbols, the POSIX `[:punct:]` class.

Unicode punctuation (general category P*) is removed in addition to these.
Used in `objectstring.styles.strip_punctuation`."""


## Regex arguments
INLINE_FLAGS_PATTERN: re.Pattern = re.compile("((?:\\(\\?[aiLmsux]+\\))*)(.*)", re.S)
"""Compiled regex splitting a user pattern into its leading global inline flags and the rest.

Capture groups:
    * 1: the leading flag groups, such as '(?i)'
    * 2: the remainder of the pattern

Used in `objectstring.strings.StringValue.ends_with`."""


## Case styles
# Constants
WORD_SEPARATORS: str = " -"
"""Characters turned into underscores before a string is underscored."""

NAMESPACE_SEPARATOR: str = "::"
"""Namespace separator written by `camelize` and read back as '/' by `underscore`."""

PATH_SEPARATOR: str = "/"

# Patterns
LEADING_UPPER_PATTERN: re.Pattern = re.compile("^([A-Z])")
"""Compiled regex matching an uppercase letter at the start of the string.

Used in `objectstring.styles.underscore`."""

ACRONYM_BOUNDARY_PATTERN: re.Pattern = re.compile("([A-Z]+)([A-Z][a-z])")
"""Compiled regex matching the end of an acronym followed by a capitalized word.

Capture groups:
    * 1: the acronym
    * 2: the first two letters of the following word

Used in `objectstring.styles.underscore`."""

CAMEL_BOUNDARY_PATTERN: re.Pattern = re.compile("([a-z0-9])([A-Z])")
"""Compiled regex matching a lowercase letter or digit followed by an uppercase letter.

Used in `objectstring.styles.underscore`."""

BOUNDARY_FORMAT: str = r"\1_\2"
"""Replacement inserting an underscore between the two captured groups."""


## Increment
INCREMENTABLE_PATTERN: re.Pattern = re.compile("[a-zA-Z]*[0-9]*")
"""Strings eligible for magic (alphanumeric) increment, applied with `fullmatch`.

Used in `objectstring.functions.magic_increment`."""

DECIMAL_PATTERN: re.Pattern = re.compile(
    "\\s*[+-]?(?:[0-9]+(?:\\.[0-9]*)?|\\.[0-9]+)(?:[eE][+-]?[0-9]+)?\\s*"
    )
"""Strings that are incremented numerically, applied with `fullmatch`.

Used in `objectstring.functions.magic_increment`."""

INCREMENT_CYCLES: List[str] = [
    "0123456789",
    "abcdefghijklmnopqrstuvwxyz",
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
]
"""Alphabets a character wraps around in when a string is incremented."""


## Booleans
@lru_cache(maxsize=None)
def boolean_pattern(words) -> re.Pattern:
    """Compile a case-insensitive pattern matching exactly one of `words`."""
    return re.compile(f"(?:{'|'.join(map(re.escape, words))})", re.I)
