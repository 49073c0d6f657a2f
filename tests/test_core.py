import unittest
from stringkit import strings
from stringkit.core import chain_operations

class TestChainOperations(unittest.TestCase):
    def test_order(self):
        result = chain_operations('  abc ', [strings.trim, strings.capitalize, strings.reverse_string])
        self.assertEqual(result, 'cbA')

    def test_empty(self):
        self.assertEqual(chain_operations('abc', []), 'abc')

    def test_generator_of_operations(self):
        operations = (lambda s, n=n: s + str(n) for n in range(3))
        self.assertEqual(chain_operations('', operations), '012')

if __name__ == '__main__':
    unittest.main()
