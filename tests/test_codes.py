import unittest
from wordcase.boundaries import Boundary
from wordcase.cases import Case
from wordcase.codes import (
    BOUNDARY_CODES, CASE_CODES, PATTERN_CODES,
    decode_boundaries, decode_boundary, decode_case, decode_pattern, encode_boundaries
)
from wordcase.errors import InvalidEnumCode, WordCaseError
from wordcase.patterns import Pattern

class TestCodeTables(unittest.TestCase):
    def test_tables_cover_every_member(self):
        for table, enum in ((CASE_CODES, Case), (PATTERN_CODES, Pattern), (BOUNDARY_CODES, Boundary)):
            with self.subTest(enum=enum):
                self.assertEqual(set(table.values()), set(enum))
                for code, member in table.items():
                    self.assertEqual(member.value, code)

    def test_fixed_codes(self):
        self.assertIs(CASE_CODES[0], Case.UPPER)
        self.assertIs(CASE_CODES[9], Case.SCREAMING_SNAKE)
        self.assertIs(CASE_CODES[18], Case.PSEUDO_RANDOM)
        self.assertIs(PATTERN_CODES[3], Pattern.SENTENCE)
        self.assertIs(BOUNDARY_CODES[9], Boundary.ACRONYM)

class TestDecodeCase(unittest.TestCase):
    def test_valid(self):
        self.assertIs(decode_case(7), Case.SNAKE)
        self.assertIs(decode_case(Case.KEBAB), Case.KEBAB)

    def test_out_of_range(self):
        for value in (77, -9, 20):
            with self.subTest(value=value):
                with self.assertRaises(InvalidEnumCode):
                    decode_case(value)

    def test_wrong_type(self):
        for value in (True, 7.0, '7', None, Pattern.CAMEL):
            with self.subTest(value=value):
                with self.assertRaises(InvalidEnumCode):
                    decode_case(value)

    def test_error_details(self):
        with self.assertRaises(InvalidEnumCode) as ctx:
            decode_case(77, 'target_case')
        error = ctx.exception
        self.assertEqual(error.argument, 'target_case')
        self.assertEqual(error.value, 77)
        self.assertIs(error.enum, Case)
        self.assertEqual(str(error), 'target_case: 77 is not a valid Case code (0-19)')
        self.assertIsInstance(error, ValueError)
        self.assertIsInstance(error, WordCaseError)

class TestDecodePattern(unittest.TestCase):
    def test_valid(self):
        self.assertIs(decode_pattern(1), Pattern.UPPERCASE)

    def test_invalid(self):
        with self.assertRaises(InvalidEnumCode) as ctx:
            decode_pattern(9)
        self.assertEqual(str(ctx.exception), 'pattern: 9 is not a valid Pattern code (0-8)')

class TestDecodeBoundaries(unittest.TestCase):
    def test_single(self):
        self.assertIs(decode_boundary(6), Boundary.UPPER_DIGIT)

    def test_list(self):
        self.assertEqual(decode_boundaries([0, 9]), [Boundary.HYPHEN, Boundary.ACRONYM])
        self.assertEqual(decode_boundaries([]), [])

    def test_reports_position(self):
        with self.assertRaises(InvalidEnumCode) as ctx:
            decode_boundaries([0, 1, 42])
        self.assertEqual(ctx.exception.argument, 'boundaries[2]')
        self.assertEqual(str(ctx.exception), 'boundaries[2]: 42 is not a valid Boundary code (0-9)')

    def test_rejects_non_list(self):
        with self.assertRaises(TypeError):
            decode_boundaries('012')
        with self.assertRaises(TypeError):
            decode_boundaries(3)

class TestEncodeBoundaries(unittest.TestCase):
    def test_code_order(self):
        self.assertEqual(encode_boundaries({Boundary.ACRONYM, Boundary.HYPHEN, Boundary.SPACE}), [0, 2, 9])
