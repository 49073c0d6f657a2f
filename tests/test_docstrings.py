import doctest
import unittest
from stringkit import coercion, core, matching, strings

MODULES = [coercion, core, matching, strings]

class TestDocstringExamples(unittest.TestCase):
    def test_examples(self):
        for module in MODULES:
            with self.subTest(module=module.__name__):
                failed, _ = doctest.testmod(module)
                self.assertEqual(failed, 0)

if __name__ == '__main__':
    unittest.main()
