import unittest
import pandas as pd
from textshape import frames
from textshape.entities import CaseStyle

class TestTransform(unittest.TestCase):
    def test_named_operation(self):
        result = frames.transform(pd.Series(['Foo Bar', 'bazQux']), 'snake')
        self.assertEqual(result.tolist(), ['foo_bar', 'baz_qux'])

    def test_operation_arguments(self):
        result = frames.transform(pd.Series(['hello world']), 'limit', limit=5)
        self.assertEqual(result.tolist(), ['hello...'])

    def test_callable(self):
        result = frames.transform(pd.Series(['a/b/c']), lambda value: value.upper())
        self.assertEqual(result.tolist(), ['A/B/C'])

    def test_chain(self):
        result = frames.transform(pd.Series(['  Foo Bar ']), ['trim', 'kebab'])
        self.assertEqual(result.tolist(), ['foo-bar'])

    def test_nulls_skipped(self):
        result = frames.transform(pd.Series(['Foo Bar', None], dtype=object), 'camel')
        self.assertEqual(result[0], 'fooBar')
        self.assertTrue(pd.isna(result[1]))

    def test_unknown_operation(self):
        with self.assertRaises(ValueError):
            frames.transform(pd.Series(['x']), 'no_such_operation')

    def test_chain_rejects_keyword_arguments(self):
        with self.assertRaises(ValueError):
            frames.transform(pd.Series(['x']), ['trim'], limit=3)

    def test_registry(self):
        for name in ('studly', 'segment', 'limit', 'hash', 'trim', 'length'):
            self.assertIn(name, frames.OPERATIONS)
        self.assertNotIn('UnsupportedEncodingError', frames.OPERATIONS)

class TestNormalizeColumns(unittest.TestCase):
    def test_snake_columns(self):
        frame = pd.DataFrame({'First Name': ['Ada'], 'lastName': ['Lovelace']})
        self.assertEqual(frames.normalize_columns(frame).columns.tolist(), ['first_name', 'last_name'])

    def test_other_style(self):
        frame = pd.DataFrame({'first name': [1]})
        self.assertEqual(frames.normalize_columns(frame, CaseStyle.CAMEL).columns.tolist(), ['firstName'])
        self.assertEqual(frames.normalize_columns(frame, 'kebab').columns.tolist(), ['first-name'])

    def test_data_untouched(self):
        frame = pd.DataFrame({'A b': ['X Y']})
        self.assertEqual(frames.normalize_columns(frame)['a_b'].tolist(), ['X Y'])
