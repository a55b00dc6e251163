"""A chainable string object.

`StringValue` wraps a single piece of text. Transformations update the text in
place and return the same object so they can be chained; inspections return a
plain value.

Example:
    >>> make_string('testZ').chop_right().to_upper().value
    'TEST'
    >>> make_string('this', 'is', 'a', 'test').camelize().value
    'thisIsATest'
"""

__docformat__ = 'google'

__all__ = [
    'StringValue',
    'make_string'
]

import re
from dataclasses import dataclass, field
from typing import Optional

from objectstring import styles
from objectstring import transliteration
from objectstring.entities import StringConfig
from objectstring.functions import magic_increment
from objectstring.patterns import (
    BLANKS,
    LEADING_BLANKS_PATTERN,
    TRAILING_BLANKS_PATTERN,
    WHITESPACE_PATTERN,
    NUMERIC_PATTERN,
    ALPHA_PATTERN,
    ALPHA_NUMERIC_PATTERN,
    INLINE_FLAGS_PATTERN,
    boolean_pattern
)

@dataclass
class StringValue:
    """
    A string object supporting method chaining.

    Args:
        value: The text held by the object
        config: Settings for randomness, normalization, booleans and HTML entities.
            Defaults to the shared `objectstring.entities.StringConfig.default`.
    """
    value: str = ''
    config: StringConfig = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if self.value is None:
            self.value = ''
        self.config = self.config or StringConfig.default()

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    ## Access
    def to_string(self) -> str:
        """Return the text held by the object."""
        return self.value

    def length(self) -> int:
        """Number of code points in the text."""
        return len(self.value)

    def say(self) -> None:
        """Print the text followed by a newline."""
        print(self.value)

    ## Case
    def to_lower(self) -> 'StringValue':
        self.value = self.value.lower()
        return self

    def to_upper(self) -> 'StringValue':
        self.value = self.value.upper()
        return self

    def to_lower_first(self) -> 'StringValue':
        self.value = styles.lower_first(self.value)
        return self

    def to_upper_first(self) -> 'StringValue':
        self.value = styles.upper_first(self.value)
        return self

    def capitalize(self) -> 'StringValue':
        """
        Lowercase the text, then uppercase its first character.

        Example:
            >>> StringValue('TEST').capitalize().value
            'Test'
        """
        return self.to_lower().to_upper_first()

    def swapcase(self) -> 'StringValue':
        """Swap the case of ASCII letters; other characters are untouched."""
        self.value = transliteration.swapcase(self.value)
        return self

    def is_lower(self) -> bool:
        return self.value == self.value.lower()

    def is_upper(self) -> bool:
        return self.value == self.value.upper()

    ## Whitespace
    def trim_left(self) -> 'StringValue':
        self.value = LEADING_BLANKS_PATTERN.sub('', self.value)
        return self

    def trim_right(self) -> 'StringValue':
        self.value = TRAILING_BLANKS_PATTERN.sub('', self.value)
        return self

    def trim(self) -> 'StringValue':
        """
        Remove leading and trailing spaces and tabs.

        Example:
            >>> StringValue('\\t  \\ttest \\t\\t').trim().value
            'test'
        """
        return self.trim_left().trim_right()

    def clean(self) -> 'StringValue':
        """
        Collapse runs of spaces and tabs into a single space, then trim.

        Example:
            >>> StringValue('This\\t   \\tis  \\t a     \\t test').clean().value
            'This is a test'
        """
        self.value = styles.clean(self.value)
        return self

    def chomp_left(self) -> 'StringValue':
        """Remove one leading space or tab, if there is one."""
        if self.value and self.value[0] in BLANKS:
            return self.chop_left()
        return self

    def chomp_right(self) -> 'StringValue':
        """Remove one trailing space or tab, if there is one."""
        if self.value and self.value[-1] in BLANKS:
            return self.chop_right()
        return self

    def chop_left(self) -> 'StringValue':
        self.value = self.value[1:]
        return self

    def chop_right(self) -> 'StringValue':
        self.value = self.value[:-1]
        return self

    ## Predicates
    def starts_with(self, pattern: str) -> bool:
        """
        Test whether the text starts with a match of the regular expression `pattern`.

        Example:
            >>> StringValue('test').starts_with('te')
            True
            >>> StringValue('test').starts_with('[a-z]{3}t')
            True
        """
        return re.match(pattern, self.value) is not None

    def ends_with(self, pattern: str) -> bool:
        """
        Test whether the text ends with a match of the regular expression `pattern`.

        Example:
            >>> StringValue('TEST').ends_with('(?i)st')
            True
        """
        flags, body = INLINE_FLAGS_PATTERN.match(pattern).groups()
        return re.search(f"{flags}(?:{body})$", self.value) is not None

    def contains(self, substring: str) -> Optional[int]:
        """
        Find the first occurrence of `substring`.

        Returns:
            The 0-based index of the first occurrence, or None if there is none.
            Index 0 is a match, so compare the result with None rather than
            testing its truth value.

        Example:
            >>> StringValue('test').contains('es')
            1
            >>> StringValue('test').contains('te')
            0
            >>> StringValue('test').contains('z') is None
            True
        """
        return self.index_left(substring)

    def is_numeric(self) -> bool:
        return NUMERIC_PATTERN.fullmatch(self.value) is not None

    def is_alpha(self) -> bool:
        return ALPHA_PATTERN.fullmatch(self.value) is not None

    def is_alpha_numeric(self) -> bool:
        return ALPHA_NUMERIC_PATTERN.fullmatch(self.value) is not None

    def is_empty(self) -> bool:
        """
        Test whether the text is empty or contains whitespace.

        Note:
            Any whitespace character makes the text count as empty, even when
            it sits between other characters: 'a a' is empty, 'aaa' is not.
        """
        return self.value == '' or WHITESPACE_PATTERN.search(self.value) is not None

    def to_boolean(self) -> Optional[bool]:
        """
        Read the text as a boolean word.

        Returns:
            True for 'on', 'yes' or 'true', False for 'off', 'no' or 'false'
            (in any case), and None for anything else. The words come from
            `config.true_words` and `config.false_words`.

        Example:
            >>> StringValue('YES').to_boolean()
            True
            >>> StringValue('off').to_boolean()
            False
            >>> StringValue('test').to_boolean() is None
            True
        """
        if boolean_pattern(self.config.true_words).fullmatch(self.value):
            return True
        if boolean_pattern(self.config.false_words).fullmatch(self.value):
            return False
        return None

    ## Search
    def index_left(self, substring: str, position: Optional[int] = None) -> Optional[int]:
        """
        Index of the first occurrence of `substring` at or after `position`, or None.

        Example:
            >>> StringValue('this is a test').index_left('is')
            2
            >>> StringValue('this is a test').index_left('is', 3)
            5
        """
        start = min(max(position or 0, 0), len(self.value))
        index = self.value.find(substring, start)
        return None if index < 0 else index

    def index_right(self, substring: str, position: Optional[int] = None) -> Optional[int]:
        """
        Index of the last occurrence of `substring` starting at or before `position`, or None.

        Example:
            >>> StringValue('this is a test').index_right('is')
            5
            >>> StringValue('this is a test').index_right('is', 3)
            2
        """
        if position is None:
            index = self.value.rfind(substring)
        else:
            index = self.value.rfind(substring, 0, max(position, 0) + len(substring))
        return None if index < 0 else index

    def count(self, pattern: str) -> int:
        """
        Number of non-overlapping matches of the regular expression `pattern`.

        Example:
            >>> StringValue('This is a test').count('is')
            2
        """
        return sum(1 for _ in re.finditer(pattern, self.value))

    def count_words(self) -> int:
        """
        Number of whitespace separated words.

        Example:
            >>> StringValue('this\\tis a \\t test').count_words()
            4
        """
        return len(styles.clean(self.value).split())

    ## Substrings
    def left(self, count: int) -> 'StringValue':
        """
        Keep `count` characters from the left, or from the right when `count` is negative.

        Example:
            >>> StringValue('This is a test').left(3).value
            'Thi'
            >>> StringValue('This is a test').left(-3).value
            'est'
        """
        if count < 0:
            return self.right(-count)
        self.value = self.value[:count]
        return self

    def right(self, count: int) -> 'StringValue':
        """
        Keep `count` characters from the right, or from the left when `count` is negative.

        Example:
            >>> StringValue('This is a test').right(3).value
            'est'
            >>> StringValue('This is a test').right(-3).value
            'Thi'
        """
        if count < 0:
            return self.left(-count)
        self.value = self.value[max(len(self.value) - count, 0):]
        return self

    ## Building
    def repeat(self, count: int) -> 'StringValue':
        self.value = self.value * count
        return self

    def ensure_left(self, prefix: str) -> 'StringValue':
        """
        Prepend `prefix` unless the text already starts with it.

        Example:
            >>> StringValue('dir').ensure_left('/').value
            '/dir'
            >>> StringValue('/dir').ensure_left('/').value
            '/dir'
        """
        if not self.starts_with(prefix):
            self.prefix(prefix)
        return self

    def ensure_right(self, suffix: str) -> 'StringValue':
        """
        Append `suffix` unless the text already ends with it.

        Example:
            >>> StringValue('/dir').ensure_right('/').value
            '/dir/'
        """
        if not self.ends_with(suffix):
            self.concat(suffix)
        return self

    def prefix(self, *strings: str) -> 'StringValue':
        self.value = ''.join(strings) + self.value
        return self

    def concat(self, *strings: str) -> 'StringValue':
        self.value = self.value + ''.join(strings)
        return self

    def reverse(self) -> 'StringValue':
        self.value = self.value[::-1]
        return self

    def replace_all(self, find: str, replace: str) -> 'StringValue':
        """
        Replace every literal occurrence of `find` with `replace`.

        Example:
            >>> StringValue('This is a test').replace_all(' ', '_').value
            'This_is_a_test'
        """
        self.value = self.value.replace(find, replace)
        return self

    ## Padding
    def pad_left(self, count: int, char: str = ' ') -> 'StringValue':
        """
        Pad the text on the left with `char` up to `count` characters.

        Example:
            >>> StringValue('hello').pad_left(10, '.').value
            '.....hello'
        """
        if count > self.length():
            self.value = char * (count - self.length()) + self.value
        return self

    def pad_right(self, count: int, char: str = ' ') -> 'StringValue':
        if count > self.length():
            self.value = self.value + char * (count - self.length())
        return self

    def pad(self, count: int, char: str = ' ') -> 'StringValue':
        """
        Center the text between `char` padding up to `count` characters.

        The left side receives one more than half the missing characters, the
        right side receives the rest.

        Example:
            >>> StringValue('hello').pad(10, '.').value
            '...hello..'
        """
        if count <= self.length():
            return self
        count_left = 1 + (count - self.length()) // 2
        count_right = count - self.length() - count_left
        self.value = char * count_left + self.value + char * count_right
        return self

    ## Characters
    def quote_meta(self) -> 'StringValue':
        """
        Escape regular expression metacharacters.

        Example:
            >>> StringValue('hello world. (can you hear me?)').quote_meta().value
            'hello\\\\ world\\\\.\\\\ \\\\(can\\\\ you\\\\ hear\\\\ me\\\\?\\\\)'
        """
        self.value = re.escape(self.value)
        return self

    def rot13(self) -> 'StringValue':
        self.value = transliteration.rot13(self.value)
        return self

    def transliterate(self, from_spec: str, to_spec: str) -> 'StringValue':
        """
        Map every character listed in `from_spec` onto its counterpart in `to_spec`.

        Raises:
            InvalidRangeSpec: If either specification is malformed

        Example:
            >>> StringValue('test').transliterate('a-z', 'A-Z').value
            'TEST'
        """
        self.value = transliteration.transliterate(self.value, from_spec, to_spec)
        return self

    def squeeze(self, keep: str = '') -> 'StringValue':
        """
        Collapse runs of identical characters, except for those listed in `keep`.

        Raises:
            InvalidRangeSpec: If `keep` is malformed

        Example:
            >>> StringValue('woooaaaah, balls').squeeze().value
            'woah, bals'
            >>> StringValue('woooaaaah, balls').squeeze('l-o').value
            'woooah, balls'
        """
        self.value = transliteration.squeeze(self.value, keep)
        return self

    def shuffle(self) -> 'StringValue':
        """Randomly reorder the characters using `config.rng`."""
        chars = list(self.value)
        self.config.rng.shuffle(chars)
        self.value = ''.join(chars)
        return self

    def next(self) -> 'StringValue':
        """
        Increment the text like Perl's `++` operator.

        Example:
            >>> StringValue('a').next().value
            'b'
            >>> StringValue('Az').next().value
            'Ba'
            >>> StringValue('zz').next().value
            'aaa'
        """
        self.value = magic_increment(self.value)
        return self

    ## Styles
    def underscore(self) -> 'StringValue':
        """
        Convert to snake case.

        Example:
            >>> StringValue('thisIsATest').underscore().value
            'this_is_a_test'
        """
        self.value = styles.underscore(self.value)
        return self

    def dasherize(self) -> 'StringValue':
        self.value = styles.dasherize(self.value)
        return self

    def camelize(self) -> 'StringValue':
        """
        Convert to camel case.

        Example:
            >>> StringValue('_this_is_a_test').camelize().value
            'ThisIsATest'
        """
        self.value = styles.camelize(self.value)
        return self

    def latinise(self) -> 'StringValue':
        """Remove accents using the normalization form from `config.normalization`."""
        self.value = styles.latinise(self.value, self.config.normalization.value)
        return self

    def escape_html(self) -> 'StringValue':
        """
        Escape the characters listed in `config.html_entities`, ampersand first.

        Example:
            >>> StringValue("<h1>l'été sera beau & chaud</h1>").escape_html().value
            '&lt;h1&gt;l&#39;été sera beau &amp; chaud&lt;/h1&gt;'
        """
        self.value = styles.escape_html(self.value, self.config.html_entities)
        return self

    def unescape_html(self) -> 'StringValue':
        self.value = styles.unescape_html(self.value, self.config.html_entities)
        return self

    def strip_punctuation(self) -> 'StringValue':
        self.value = styles.strip_punctuation(self.value)
        return self

    def humanize(self) -> 'StringValue':
        """
        Example:
            >>> StringValue('-this_is a test').humanize().value
            'This is a test'
        """
        self.value = styles.humanize(self.value)
        return self

    def slugify(self) -> 'StringValue':
        """
        Transform the text into a URL slug.

        Example:
            >>> StringValue('En été, il fera chaud').slugify().value
            'en-ete-il-fera-chaud'
        """
        self.value = styles.slugify(self.value, self.config.normalization.value)
        return self

    def titleize(self) -> 'StringValue':
        """
        Strip punctuation and capitalize each word.

        Example:
            >>> StringValue('this is a test').titleize().value
            'This Is A Test'
        """
        self.value = styles.titleize(self.value)
        return self

    ## Aliases
    collapse_whitespace = clean
    times = repeat
    include = contains
    to_bool = to_boolean
    underscored = underscore
    suffix = concat
    titlecase = titleize

def make_string(*parts: str, config: Optional[StringConfig] = None) -> StringValue:
    """
    Join `parts` with single spaces and wrap the result in a `StringValue`.

    Example:
        >>> make_string('this', 'is', 'a', 'test').value
        'this is a test'
        >>> make_string().value
        ''
    """
    return StringValue(' '.join(parts), config)
