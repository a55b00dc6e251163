import unittest
from objectstring import functions

class TestChainOperations(unittest.TestCase):
    def test_chain_operations(self):
        result = functions.chain_operations(' a b ', [str.strip, str.upper])
        self.assertEqual(result, 'A B')

    def test_no_operations(self):
        self.assertEqual(functions.chain_operations('a', []), 'a')

class TestReplaceAll(unittest.TestCase):
    def test_replace_in_order(self):
        result = functions.replace_all({'a': 'b', 'b': 'c'}, 'ab')
        self.assertEqual(result, 'cc')

    def test_literal(self):
        self.assertEqual(functions.replace_all({'.*': '!'}, 'a.*b'), 'a!b')

class TestMagicIncrement(unittest.TestCase):
    def test_letters(self):
        self.assertEqual(functions.magic_increment('a'), 'b')
        self.assertEqual(functions.magic_increment('Az'), 'Ba')
        self.assertEqual(functions.magic_increment('zz'), 'aaa')
        self.assertEqual(functions.magic_increment('Zz'), 'AAa')

    def test_letters_then_digits(self):
        self.assertEqual(functions.magic_increment('a9'), 'b0')
        self.assertEqual(functions.magic_increment('Az99'), 'Ba00')
        self.assertEqual(functions.magic_increment('zZ9'), 'aaA0')

    def test_digits(self):
        self.assertEqual(functions.magic_increment('9'), '10')
        self.assertEqual(functions.magic_increment('099'), '100')

    def test_numbers(self):
        self.assertEqual(functions.magic_increment('-3'), '-2')
        self.assertEqual(functions.magic_increment('1.5'), '2.5')
        self.assertEqual(functions.magic_increment('1.0'), '2')

    def test_empty(self):
        self.assertEqual(functions.magic_increment(''), '1')

    def test_not_incrementable(self):
        self.assertEqual(functions.magic_increment('a-b'), 'a-b')
        self.assertEqual(functions.magic_increment('9a'), '9a')
        self.assertEqual(functions.magic_increment('!!'), '!!')
