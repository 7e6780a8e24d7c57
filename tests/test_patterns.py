import random
import unittest
from wordcase.patterns import Pattern, apply, capitalize, iter_apply, toggle
from wordcase.errors import InvalidEnumName

class TestApply(unittest.TestCase):
    def test_lowercase(self):
        self.assertEqual(apply(Pattern.LOWERCASE, ['Foo', 'BAR']), ['foo', 'bar'])

    def test_uppercase(self):
        self.assertEqual(apply(Pattern.UPPERCASE, ['Foo', 'bar']), ['FOO', 'BAR'])

    def test_capital(self):
        self.assertEqual(apply(Pattern.CAPITAL, ['my', 'VAR']), ['My', 'Var'])

    def test_sentence(self):
        self.assertEqual(apply(Pattern.SENTENCE, ['testing', 'String']), ['Testing', 'string'])

    def test_camel(self):
        self.assertEqual(apply(Pattern.CAMEL, ['Testing', 'string']), ['testing', 'String'])

    def test_toggle(self):
        result = apply(Pattern.TOGGLE, ['ONE', 'two', 'ThRee'])
        self.assertEqual(result, ['oNE', 'tWO', 'tHREE'])

    def test_alternating_continues_across_words(self):
        result = apply(Pattern.ALTERNATING, ['SCREAMING', 'SNAKE'])
        self.assertEqual(result, ['sCrEaMiNg', 'SnAkE'])

    def test_alternating_skips_uncased(self):
        self.assertEqual(apply(Pattern.ALTERNATING, ['a1b', 'c']), ['a1B', 'c'])

    def test_empty_sequence(self):
        for pattern in Pattern:
            with self.subTest(pattern=pattern):
                self.assertEqual(apply(pattern, []), [])

    def test_preserves_order_and_count(self):
        words = ['one', 'Two', 'THREE', '4']
        for pattern in Pattern:
            with self.subTest(pattern=pattern):
                result = apply(pattern, words, random.Random(0))
                self.assertEqual([w.lower() for w in result], [w.lower() for w in words])

    def test_rejects_non_pattern(self):
        with self.assertRaises(TypeError):
            apply('lowercase', ['a'])

class TestRandomPatterns(unittest.TestCase):
    def test_seeded_random_is_reproducible(self):
        first = apply(Pattern.RANDOM, ['hello', 'world'], random.Random(7))
        second = apply(Pattern.RANDOM, ['hello', 'world'], random.Random(7))
        self.assertEqual(first, second)

    def test_pseudo_random_pairs_differ(self):
        for seed in range(20):
            [word] = apply(Pattern.PSEUDO_RANDOM, ['conversion'], random.Random(seed))
            for i in range(0, len(word) - 1, 2):
                with self.subTest(seed=seed, word=word, i=i):
                    self.assertNotEqual(word[i].isupper(), word[i + 1].isupper())

    def test_pseudo_random_pairs_run_across_words(self):
        for seed in range(20):
            words = apply(Pattern.PSEUDO_RANDOM, ['abc', 'd', 'e1f'], random.Random(seed))
            letters = [char for char in ''.join(words) if char.isalpha()]
            with self.subTest(seed=seed, words=words):
                self.assertEqual(len(words), 3)
                for i in range(0, len(letters) - 1, 2):
                    self.assertNotEqual(letters[i].isupper(), letters[i + 1].isupper())
                for i in range(len(letters) - 2):
                    cases = {char.isupper() for char in letters[i:i + 3]}
                    self.assertEqual(len(cases), 2)

    def test_is_random(self):
        self.assertTrue(Pattern.RANDOM.is_random)
        self.assertTrue(Pattern.PSEUDO_RANDOM.is_random)
        self.assertFalse(Pattern.CAMEL.is_random)

class TestWordTransforms(unittest.TestCase):
    def test_capitalize(self):
        self.assertEqual(capitalize('hELLO'), 'Hello')
        self.assertEqual(capitalize(''), '')

    def test_toggle(self):
        self.assertEqual(toggle('Hello'), 'hELLO')
        self.assertEqual(toggle(''), '')

    def test_iter_apply_is_lazy(self):
        transformed = iter_apply(Pattern.UPPERCASE, iter(['a', 'b']))
        self.assertEqual(next(transformed), 'A')

class TestFromName(unittest.TestCase):
    def test_names(self):
        self.assertIs(Pattern.from_name('pseudo random'), Pattern.PSEUDO_RANDOM)
        self.assertIs(Pattern.from_name('Uppercase'), Pattern.UPPERCASE)

    def test_unknown(self):
        with self.assertRaises(InvalidEnumName):
            Pattern.from_name('shouting')
