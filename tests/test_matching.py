import re
import unittest
from stringkit.errors import InvalidPatternError
from stringkit.matching import MatchResult, Pattern, as_pattern, compile_pattern, is_pattern

class TestCompilePattern(unittest.TestCase):
    def test_global_flag(self):
        self.assertTrue(compile_pattern('a', 'g').is_global)
        self.assertFalse(compile_pattern('a').is_global)

    def test_regex_flags(self):
        pattern = compile_pattern('^a.b$', 'ims')
        self.assertTrue(pattern.regex.flags & re.IGNORECASE)
        self.assertTrue(pattern.regex.flags & re.MULTILINE)
        self.assertTrue(pattern.regex.flags & re.DOTALL)
        self.assertIsNotNone(pattern.regex.search('x\nA\nB'))

    def test_unicode_flag_accepted(self):
        self.assertFalse(compile_pattern('a', 'u').is_global)

    def test_keeps_compiled_flags(self):
        pattern = compile_pattern(re.compile('a', re.IGNORECASE), 'g')
        self.assertTrue(pattern.is_global)
        self.assertTrue(pattern.regex.flags & re.IGNORECASE)
        self.assertEqual(pattern.source, 'a')

    def test_invalid_flags(self):
        for flags in ['x', 'gg', 'y']:
            with self.subTest(flags=flags):
                with self.assertRaises(InvalidPatternError):
                    compile_pattern('a', flags)

    def test_invalid_source(self):
        with self.assertRaises(InvalidPatternError) as context:
            compile_pattern('(unclosed')
        self.assertIsInstance(context.exception.__cause__, re.error)

class TestAsPattern(unittest.TestCase):
    def test_pattern_passes_through(self):
        pattern = compile_pattern('a', 'g')
        self.assertIs(as_pattern(pattern), pattern)

    def test_compiled_re_is_not_global(self):
        pattern = as_pattern(re.compile('a'))
        self.assertIsInstance(pattern, Pattern)
        self.assertFalse(pattern.is_global)

    def test_text_is_compiled(self):
        self.assertTrue(as_pattern('a', is_global=True).is_global)
        self.assertEqual(as_pattern(12).source, '12')

    def test_is_pattern(self):
        self.assertTrue(is_pattern(re.compile('a')))
        self.assertTrue(is_pattern(compile_pattern('a')))
        self.assertFalse(is_pattern('a'))

class TestMatchResult(unittest.TestCase):
    def test_from_match(self):
        found = re.search(r'(?P<word>b+)(x)?', 'aabbc')
        result = MatchResult.from_match(found)
        self.assertEqual(result.match, 'bb')
        self.assertEqual(result.index, 2)
        self.assertEqual(result.end, 4)
        self.assertEqual(result.groups, ('bb', None))
        self.assertEqual(result.named_groups, {'word': 'bb'})
        self.assertEqual(result.input, 'aabbc')

    def test_sequence_protocol(self):
        result = MatchResult('ab', 0, ('a', None))
        self.assertEqual(len(result), 3)
        self.assertEqual(result[0], 'ab')
        self.assertEqual(result[-1], None)
        self.assertEqual(list(result), ['ab', 'a', None])

if __name__ == '__main__':
    unittest.main()
