import unittest
from objectstring import styles

class TestCaseHelpers(unittest.TestCase):
    def test_upper_first(self):
        self.assertEqual(styles.upper_first('été'), 'Été')
        self.assertEqual(styles.upper_first(''), '')

    def test_lower_first(self):
        self.assertEqual(styles.lower_first('TEST'), 'tEST')

    def test_capitalize(self):
        self.assertEqual(styles.capitalize('hELLO wORLD'), 'Hello world')

class TestUnderscore(unittest.TestCase):
    def test_camel(self):
        self.assertEqual(styles.underscore('thisIsATest'), 'this_is_a_test')

    def test_acronym(self):
        self.assertEqual(styles.underscore('parseHTMLString'), 'parse_html_string')

    def test_digits(self):
        self.assertEqual(styles.underscore('version2Beta'), 'version2_beta')

    def test_namespace(self):
        self.assertEqual(styles.underscore('Object::String'), '_object/string')

    def test_hyphens(self):
        self.assertEqual(styles.underscore('this-is a-test'), 'this_is_a_test')

    def test_leading_capital_after_spaces(self):
        self.assertEqual(styles.underscore('This Is A Test'), '_this_is_a_test')

class TestCamelize(unittest.TestCase):
    def test_lower_camel(self):
        self.assertEqual(styles.camelize('this_is_a_test'), 'thisIsATest')

    def test_upper_camel(self):
        self.assertEqual(styles.camelize('_this_is_a_test'), 'ThisIsATest')

    def test_namespaces(self):
        self.assertEqual(styles.camelize('_this/is/a-test'), 'This::Is::ATest')

    def test_camelize_of_underscore(self):
        self.assertEqual(styles.camelize(styles.underscore('ThisIsATest')), 'ThisIsATest')

class TestCharacters(unittest.TestCase):
    def test_latinise(self):
        self.assertEqual(styles.latinise('Ça déménage'), 'Ca demenage')

    def test_latinise_compatibility_characters(self):
        self.assertEqual(styles.latinise('ﬁancé'), 'fiance')

    def test_latinise_with_composed_form(self):
        self.assertEqual(styles.latinise('été', 'NFC'), 'été')

    def test_strip_punctuation_unicode(self):
        self.assertEqual(styles.strip_punctuation('«bonjour» ¿qué?'), 'bonjour qué')

    def test_strip_punctuation_symbols(self):
        self.assertEqual(styles.strip_punctuation('a+b=c$'), 'abc')

    def test_escape_order(self):
        entities = {'&': '&amp;', '<': '&lt;'}
        self.assertEqual(styles.escape_html('<&>', entities), '&lt;&amp;>')

    def test_unescape_order(self):
        entities = {'&': '&amp;', '<': '&lt;'}
        self.assertEqual(styles.unescape_html('&amp;lt;', entities), '<')

class TestComposites(unittest.TestCase):
    def test_humanize(self):
        self.assertEqual(styles.humanize('employeeSalary'), 'Employee salary')

    def test_slugify(self):
        self.assertEqual(styles.slugify('  Où es-tu  '), 'ou-es-tu')

    def test_titleize(self):
        self.assertEqual(styles.titleize("it's A  TEST, isn't it?"), 'Its A Test Isnt It')

    def test_titleize_no_trailing_space(self):
        self.assertEqual(styles.titleize('hello ,'), 'Hello')
        self.assertEqual(styles.titleize('one two !'), 'One Two')

    def test_clean(self):
        self.assertEqual(styles.clean(' a \t\t b '), 'a b')
