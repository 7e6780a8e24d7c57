import unittest
from wordcase.boundaries import (
    Boundary,
    DelimiterBoundary,
    DEFAULT_BOUNDARIES,
    list_from
)
from wordcase.errors import InvalidEnumName

class TestListFrom(unittest.TestCase):
    def test_delimiters_in_code_order(self):
        result = list_from('foo-bar_baz')
        self.assertEqual(result, [Boundary.HYPHEN, Boundary.UNDERSCORE])

    def test_case_shifts_and_delimiters(self):
        result = list_from('aB:Ba:_: ')
        self.assertEqual(set(result), {
            Boundary.LOWER_UPPER,
            Boundary.UPPER_LOWER,
            Boundary.UNDERSCORE,
            Boundary.SPACE
        })

    def test_digits(self):
        result = list_from('helloW1orld_HELLO me')
        self.assertEqual(set(result), {
            Boundary.DIGIT_LOWER,
            Boundary.UPPER_DIGIT,
            Boundary.LOWER_UPPER,
            Boundary.UNDERSCORE,
            Boundary.SPACE
        })

    def test_acronym_tail_is_not_upper_lower(self):
        self.assertEqual(list_from('HTTPServer'), [Boundary.ACRONYM])

    def test_single_triggers(self):
        cases = {
            '-': Boundary.HYPHEN,
            '_': Boundary.UNDERSCORE,
            ' ': Boundary.SPACE,
            'Aa': Boundary.UPPER_LOWER,
            'aA': Boundary.LOWER_UPPER,
            '1A': Boundary.DIGIT_UPPER,
            'A1': Boundary.UPPER_DIGIT,
            '1a': Boundary.DIGIT_LOWER,
            'a1': Boundary.LOWER_DIGIT,
            'AAa': Boundary.ACRONYM
        }
        for text, boundary in cases.items():
            with self.subTest(text=text):
                self.assertEqual(list_from(text), [boundary])

    def test_no_boundaries(self):
        self.assertEqual(list_from(''), [])
        self.assertEqual(list_from('plain'), [])
        self.assertEqual(list_from('SHOUT'), [])

    def test_result_is_sorted_by_code(self):
        result = list_from('a1-')
        self.assertEqual(result, [Boundary.HYPHEN, Boundary.LOWER_DIGIT])

class TestBoundaryGroups(unittest.TestCase):
    def test_defaults_exclude_upper_lower(self):
        self.assertNotIn(Boundary.UPPER_LOWER, Boundary.defaults())
        self.assertEqual(len(Boundary.defaults()), 9)
        self.assertEqual(DEFAULT_BOUNDARIES, Boundary.defaults())

    def test_all(self):
        self.assertEqual(Boundary.all(), frozenset(Boundary))
        self.assertEqual(len(Boundary.all()), 10)

    def test_delims(self):
        self.assertEqual(
            Boundary.delims(),
            {Boundary.HYPHEN, Boundary.UNDERSCORE, Boundary.SPACE}
        )

    def test_digit_groups(self):
        self.assertEqual(
            Boundary.digits(),
            Boundary.letter_digit() | Boundary.digit_letter()
        )
        self.assertEqual(Boundary.letter_digit(), {Boundary.UPPER_DIGIT, Boundary.LOWER_DIGIT})
        self.assertEqual(Boundary.digit_letter(), {Boundary.DIGIT_UPPER, Boundary.DIGIT_LOWER})

class TestBoundaryDetection(unittest.TestCase):
    def test_detect_two(self):
        self.assertTrue(Boundary.LOWER_UPPER.detect_two('o', 'B'))
        self.assertFalse(Boundary.LOWER_UPPER.detect_two('O', 'B'))
        self.assertTrue(Boundary.DIGIT_LOWER.detect_two('2', 'x'))
        self.assertFalse(Boundary.ACRONYM.detect_two('A', 'B'))
        self.assertFalse(Boundary.HYPHEN.detect_two('-', 'a'))

    def test_detect_three(self):
        self.assertTrue(Boundary.ACRONYM.detect_three('P', 'S', 'e'))
        self.assertFalse(Boundary.ACRONYM.detect_three('P', 'S', 'E'))
        self.assertFalse(Boundary.LOWER_UPPER.detect_three('a', 'B', 'c'))

    def test_delim_property(self):
        self.assertEqual(Boundary.HYPHEN.delim, '-')
        self.assertEqual(Boundary.SPACE.delim, ' ')
        self.assertIsNone(Boundary.ACRONYM.delim)
        self.assertTrue(Boundary.UNDERSCORE.is_delimiter)
        self.assertFalse(Boundary.LOWER_UPPER.is_delimiter)

class TestDelimiterBoundary(unittest.TestCase):
    def test_from_delim(self):
        boundary = Boundary.from_delim('::')
        self.assertEqual(boundary, DelimiterBoundary('::'))
        self.assertEqual(boundary.delim, '::')
        self.assertTrue(boundary.is_delimiter)

    def test_hashable_in_sets(self):
        boundaries = {Boundary.from_delim('.'), Boundary.from_delim('.'), Boundary.HYPHEN}
        self.assertEqual(len(boundaries), 2)

    def test_empty_delimiter_rejected(self):
        with self.assertRaises(ValueError):
            Boundary.from_delim('')

class TestFromName(unittest.TestCase):
    def test_loose_names(self):
        self.assertIs(Boundary.from_name('lower-upper'), Boundary.LOWER_UPPER)
        self.assertIs(Boundary.from_name('Acronym'), Boundary.ACRONYM)
        self.assertIs(Boundary.from_name('digitUpper'), Boundary.DIGIT_UPPER)

    def test_unknown_name(self):
        with self.assertRaises(InvalidEnumName):
            Boundary.from_name('comma')
