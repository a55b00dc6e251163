"""Character-range transliteration utilities.

This module parses character-range specifications in the syntax of the Perl
`tr` operator (for example 'a-z' or 'A-Za-z_') into explicit character lists
and builds translation tables from them. Specifications are parsed, never
evaluated, and malformed ones raise `objectstring.errors.InvalidRangeSpec`.

Range specification syntax:
    * `x-y` is every code point from x to y inclusive
    * a `-` at the very start or the very end is a literal hyphen
    * `\\n`, `\\t`, `\\r`, `\\f`, `\\e`, `\\a` and `\\0` are control characters;
      any other escaped character (such as `\\-` or `\\\\`) stands for itself
"""

__docformat__ = 'google'

__all__ = [
    'parse_range_spec',
    'translation_table',
    'transliterate',
    'squeeze',
    'swapcase',
    'rot13'
]

import logging
from functools import lru_cache
from typing import Dict, List, NamedTuple
from objectstring.errors import InvalidRangeSpec

logger = logging.getLogger(__name__)

ESCAPES: Dict[str, str] = {
    'n': '\n',
    't': '\t',
    'r': '\r',
    'f': '\f',
    'e': '\x1b',
    'a': '\a',
    '0': '\0'
}
"""Escape sequences with a special meaning inside a range specification."""

class _Token(NamedTuple):
    char: str
    position: int
    escaped: bool

    @property
    def is_hyphen(self) -> bool:
        return self.char == '-' and not self.escaped

def _reject(spec, reason: str, position: int = None) -> InvalidRangeSpec:
    logger.debug("Rejected range specification %r: %s", spec, reason)
    return InvalidRangeSpec(spec, reason, position)

def _tokenize(spec: str) -> List[_Token]:
    tokens = []
    i = 0
    while i < len(spec):
        if spec[i] == '\\':
            if i + 1 == len(spec):
                raise _reject(spec, "trailing backslash", i)
            tokens.append(_Token(ESCAPES.get(spec[i + 1], spec[i + 1]), i, True))
            i += 2
        else:
            tokens.append(_Token(spec[i], i, False))
            i += 1
    return tokens

@lru_cache(maxsize=256)
def _parse(spec: str) -> tuple:
    tokens = _tokenize(spec)
    chars = []
    i = 0
    while i < len(tokens):
        start = tokens[i]
        if i + 2 < len(tokens) and tokens[i + 1].is_hyphen:
            end = tokens[i + 2]
            if ord(end.char) < ord(start.char):
                raise _reject(spec, f"invalid range '{start.char}-{end.char}'", start.position)
            if i + 4 < len(tokens) and tokens[i + 3].is_hyphen:
                raise _reject(spec, "ambiguous chained range", tokens[i + 3].position)
            chars.extend(map(chr, range(ord(start.char), ord(end.char) + 1)))
            i += 3
        else:
            chars.append(start.char)
            i += 1
    return tuple(chars)

def parse_range_spec(spec: str) -> List[str]:
    """
    Expand a character-range specification into the characters it lists.

    Args:
        spec: A range specification such as 'a-z' or ' -'

    Returns:
        The listed characters, in order and with duplicates kept

    Raises:
        InvalidRangeSpec: If `spec` is not a string or is malformed

    Example:
        >>> parse_range_spec('a-e')
        ['a', 'b', 'c', 'd', 'e']
        >>> parse_range_spec(' -')
        [' ', '-']
        >>> parse_range_spec('x\\\\-z')
        ['x', '-', 'z']
    """
    if not isinstance(spec, str):
        raise _reject(spec, "range specification must be a string")
    return list(_parse(spec))

def translation_table(from_spec: str, to_spec: str) -> Dict[int, str]:
    """
    Build a `str.translate` table mapping `from_spec` onto `to_spec` positionally.

    The first occurrence of a source character wins. When the target list is
    shorter than the source list its last character is repeated, and an empty
    target list maps every source character onto itself.

    Returns:
        A new dict on every call; changing it does not affect later calls

    Example:
        >>> translation_table(' -', '_')
        {32: '_', 45: '_'}
    """
    return dict(_checked_table(from_spec, to_spec))

def _checked_table(from_spec: str, to_spec: str) -> Dict[int, str]:
    for spec in (from_spec, to_spec):
        if not isinstance(spec, str):
            raise _reject(spec, "range specification must be a string")
    return _table(from_spec, to_spec)

@lru_cache(maxsize=256)
def _table(from_spec: str, to_spec: str) -> Dict[int, str]:
    source = parse_range_spec(from_spec)
    target = parse_range_spec(to_spec) or source
    if source and len(target) < len(source):
        target = target + [target[-1]] * (len(source) - len(target))

    table = {}
    for find, replace in zip(source, target):
        table.setdefault(ord(find), replace)
    return table

def transliterate(text: str, from_spec: str, to_spec: str) -> str:
    """
    Replace every character listed in `from_spec` by its counterpart in `to_spec`.

    Example:
        >>> transliterate('test', 'a-z', 'A-Z')
        'TEST'
        >>> transliterate('this is-a test', ' -', '_')
        'this_is_a_test'
    """
    return text.translate(_checked_table(from_spec, to_spec))

def squeeze(text: str, keep: str = '') -> str:
    """
    Collapse runs of the same character into one, except for characters in `keep`.

    Kept characters are never collapsed and interrupt the runs around them.

    Args:
        text: String to squeeze
        keep: Range specification of characters to leave alone

    Returns:
        The squeezed string

    Example:
        >>> squeeze('woooaaaah, balls')
        'woah, bals'
        >>> squeeze('woooaaaah, balls', 'l-o')
        'woooah, balls'
    """
    kept = set(parse_range_spec(keep))
    squeezed = []
    previous = None
    for char in text:
        if char in kept:
            previous = None
        elif char == previous:
            continue
        else:
            previous = char
        squeezed.append(char)
    return ''.join(squeezed)

def swapcase(text: str) -> str:
    """
    Swap the case of ASCII letters only.

    Example:
        >>> swapcase('TeSt')
        'tEsT'
    """
    return transliterate(text, 'a-zA-Z', 'A-Za-z')

def rot13(text: str) -> str:
    """
    Rotate ASCII letters by 13 positions, preserving case.

    Example:
        >>> rot13('this is a test')
        'guvf vf n grfg'
    """
    return transliterate(text, 'A-Za-z', 'N-ZA-Mn-za-m')
