import unittest
from objectstring import transliteration
from objectstring.errors import InvalidRangeSpec

class TestParseRangeSpec(unittest.TestCase):
    def test_range(self):
        result = transliteration.parse_range_spec('a-e')
        self.assertEqual(result, ['a', 'b', 'c', 'd', 'e'])

    def test_multiple_ranges(self):
        result = transliteration.parse_range_spec('A-Ca-c')
        self.assertEqual(result, ['A', 'B', 'C', 'a', 'b', 'c'])

    def test_literal_hyphen_at_the_edges(self):
        self.assertEqual(transliteration.parse_range_spec(' -'), [' ', '-'])
        self.assertEqual(transliteration.parse_range_spec('-a'), ['-', 'a'])

    def test_escaped_hyphen(self):
        self.assertEqual(transliteration.parse_range_spec('a\\-c'), ['a', '-', 'c'])

    def test_escape_sequences(self):
        self.assertEqual(transliteration.parse_range_spec('\\t\\n\\\\'), ['\t', '\n', '\\'])

    def test_empty(self):
        self.assertEqual(transliteration.parse_range_spec(''), [])

    def test_reversed_range(self):
        with self.assertRaises(InvalidRangeSpec) as caught:
            transliteration.parse_range_spec('z-a')
        self.assertEqual(caught.exception.position, 0)
        self.assertEqual(caught.exception.spec, 'z-a')

    def test_trailing_backslash(self):
        with self.assertRaises(InvalidRangeSpec) as caught:
            transliteration.parse_range_spec('ab\\')
        self.assertEqual(caught.exception.position, 2)

    def test_chained_range(self):
        with self.assertRaises(InvalidRangeSpec):
            transliteration.parse_range_spec('a-c-e')

    def test_not_a_string(self):
        with self.assertRaises(InvalidRangeSpec):
            transliteration.parse_range_spec(5)

    def test_error_is_a_value_error(self):
        with self.assertRaises(ValueError):
            transliteration.parse_range_spec('9-0')

    def test_rejection_is_logged(self):
        with self.assertLogs('objectstring.transliteration', level='DEBUG') as logs:
            with self.assertRaises(InvalidRangeSpec):
                transliteration.parse_range_spec('z-a')
        self.assertIn('z-a', logs.output[0])

class TestTransliterate(unittest.TestCase):
    def test_transliterate(self):
        result = transliteration.transliterate('hello', 'a-y', 'b-z')
        self.assertEqual(result, 'ifmmp')

    def test_short_target_repeats_last_character(self):
        self.assertEqual(transliteration.transliterate('a-b c', ' -', '_'), 'a_b_c')
        self.assertEqual(transliteration.transliterate('abc', 'a-c', 'x'), 'xxx')

    def test_empty_target_is_identity(self):
        self.assertEqual(transliteration.transliterate('abc', 'a-c', ''), 'abc')

    def test_first_occurrence_wins(self):
        self.assertEqual(transliteration.transliterate('a', 'aa', 'xy'), 'x')

    def test_malformed_spec_is_never_evaluated(self):
        with self.assertRaises(InvalidRangeSpec):
            transliteration.transliterate('abc', 'a-c', '/;die;\\')

    def test_non_string_target(self):
        with self.assertRaises(InvalidRangeSpec):
            transliteration.transliterate('abc', 'a-c', ['x'])

    def test_returned_table_is_a_copy(self):
        table = transliteration.translation_table('a-z', 'A-Z')
        table[ord('t')] = '!'
        self.assertEqual(transliteration.transliterate('test', 'a-z', 'A-Z'), 'TEST')
        self.assertEqual(transliteration.translation_table('a-z', 'A-Z')[ord('t')], 'T')

    def test_swapcase(self):
        self.assertEqual(transliteration.swapcase('TeSt'), 'tEsT')

    def test_rot13(self):
        self.assertEqual(transliteration.rot13('Hello, World'), 'Uryyb, Jbeyq')

    def test_rot13_is_self_inverse(self):
        text = 'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ'
        self.assertEqual(transliteration.rot13(transliteration.rot13(text)), text)

class TestSqueeze(unittest.TestCase):
    def test_squeeze(self):
        self.assertEqual(transliteration.squeeze('woooaaaah, balls'), 'woah, bals')

    def test_squeeze_keep_range(self):
        self.assertEqual(transliteration.squeeze('woooaaaah, balls', 'l-o'), 'woooah, balls')

    def test_kept_characters_break_runs(self):
        self.assertEqual(transliteration.squeeze('aabaa', 'b'), 'aba')
        self.assertEqual(transliteration.squeeze('abba', 'b'), 'abba')

    def test_squeeze_empty(self):
        self.assertEqual(transliteration.squeeze(''), '')

    def test_squeeze_malformed_keep(self):
        with self.assertRaises(InvalidRangeSpec):
            transliteration.squeeze('aa', 'z-a')
