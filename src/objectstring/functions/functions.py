__docformat__ = 'google'

__all__ = [
    'chain_operations',
    'replace_all',
    'magic_increment'
]

import logging
from functools import reduce
from typing import Callable, Dict, Iterable
from objectstring.patterns import (
    INCREMENTABLE_PATTERN,
    DECIMAL_PATTERN,
    INCREMENT_CYCLES
)

logger = logging.getLogger(__name__)

def chain_operations(value: str, operations: Iterable[Callable[[str], str]]) -> str:
    """
    Apply each operation in turn, feeding every result into the next one.

    Example:
        >>> chain_operations(' a b ', [str.strip, str.upper])
        'A B'
    """
    return reduce(lambda result, operation: operation(result), operations, value)

def replace_all(replacements: Dict[str, str], text: str) -> str:
    """
    Replace literal substrings in the order the mapping lists them.

    Earlier replacements are visible to later ones, so the order of
    `replacements` is significant.

    Args:
        replacements: Mapping of substring to replacement
        text: String to modify

    Returns:
        The modified string

    Example:
        >>> replace_all({'&': '&amp;', '<': '&lt;'}, '<a & b>')
        '&lt;a &amp; b>'
    """
    for find, replace in replacements.items():
        text = text.replace(find, replace)
    return text

def _cycle_of(char: str) -> str:
    return next(cycle for cycle in INCREMENT_CYCLES if char in cycle)

def _increment_alphanumeric(text: str) -> str:
    chars = list(text)
    for i in reversed(range(len(chars))):
        cycle = _cycle_of(chars[i])
        position = cycle.index(chars[i])
        if position + 1 < len(cycle):
            chars[i] = cycle[position + 1]
            return ''.join(chars)
        chars[i] = cycle[0]

    # carry out of the first character lengthens the string
    first = _cycle_of(text[0])
    head = first[1] if first.isdigit() else first[0]
    return head + ''.join(chars)

def _increment_number(text: str) -> str:
    stripped = text.strip()
    number = float(stripped) if any(c in stripped for c in '.eE') else int(stripped)
    result = number + 1
    if isinstance(result, float) and result.is_integer():
        return str(int(result))
    return str(result)

def magic_increment(text: str) -> str:
    """
    Increment a string the way Perl's `++` operator does.

    Strings made of letters followed by digits are incremented per character
    from the right: digits wrap 9 to 0, letters wrap z to a and Z to A, and the
    carry moves one position left. A carry out of the first character prepends
    '1', 'a' or 'A' depending on that character's class. Strings that read as
    decimal numbers are incremented numerically and the empty string becomes '1'.
    Any other string is returned unchanged.

    Args:
        text: String to increment

    Returns:
        The incremented string

    Example:
        >>> magic_increment('a')
        'b'
        >>> magic_increment('Az')
        'Ba'
        >>> magic_increment('zz')
        'aaa'
        >>> magic_increment('a9')
        'b0'
        >>> magic_increment('1.5')
        '2.5'
    """
    if text == '':
        return '1'
    if INCREMENTABLE_PATTERN.fullmatch(text):
        return _increment_alphanumeric(text)
    if DECIMAL_PATTERN.fullmatch(text):
        return _increment_number(text)
    logger.debug("Cannot increment %r, leaving it unchanged", text)
    return text
