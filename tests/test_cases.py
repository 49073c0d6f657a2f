import unittest
from pathlib import Path
import yaml
from stringkit import errors, strings

CASES_PATH = Path(__file__).parent / 'data' / 'cases.yaml'

def load_cases():
    with open(CASES_PATH, 'r') as f:
        return yaml.safe_load(f)

class TestTableDrivenCases(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.data = load_cases()

    def test_cases(self):
        for case in self.data['cases']:
            operation = getattr(strings, case['operation'])
            with self.subTest(operation=case['operation'], args=case['args']):
                self.assertEqual(operation(*case['args']), case['expected'])

    def test_errors(self):
        for case in self.data['errors']:
            operation = getattr(strings, case['operation'])
            error = getattr(errors, case['error'])
            with self.subTest(operation=case['operation'], args=case['args']):
                with self.assertRaises(error):
                    operation(*case['args'])

if __name__ == '__main__':
    unittest.main()
