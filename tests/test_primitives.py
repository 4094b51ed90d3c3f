import unittest
from textshape import primitives
from textshape.primitives import UnsupportedEncodingError

class TestText(unittest.TestCase):
    def test_passthrough(self):
        self.assertEqual(primitives.text('abc'), 'abc')

    def test_decode(self):
        self.assertEqual(primitives.text('café'.encode('latin-1'), 'latin-1'), 'café')

    def test_invalid_bytes_replaced(self):
        self.assertEqual(primitives.text(b'a\xffb'), 'a\ufffdb')

    def test_unsupported_encoding(self):
        with self.assertRaises(UnsupportedEncodingError) as context:
            primitives.text(b'abc', 'no-such-codec')
        self.assertEqual(context.exception.encoding, 'no-such-codec')
        self.assertIsInstance(context.exception, ValueError)
        self.assertIsInstance(context.exception, LookupError)

class TestLength(unittest.TestCase):
    def test_codepoints_not_bytes(self):
        self.assertEqual(primitives.length('日本語'), 3)
        self.assertEqual(primitives.length('日本語'.encode('utf-8')), 3)

    def test_unsupported_encoding(self):
        with self.assertRaises(UnsupportedEncodingError):
            primitives.length('abc', 'no-such-codec')

    def test_bytes_to_bytes_codec_rejected(self):
        for codec in ('hex', 'rot13', 'base64'):
            with self.assertRaises(UnsupportedEncodingError) as context:
                primitives.length(b'abc', codec)
            self.assertEqual(context.exception.encoding, codec)
        with self.assertRaises(UnsupportedEncodingError):
            primitives.text('abc', 'hex')

class TestCaseFolding(unittest.TestCase):
    def test_lower_upper(self):
        self.assertEqual(primitives.lower('ÀÉÎ'), 'àéî')
        self.assertEqual(primitives.upper('àéî'), 'ÀÉÎ')

    def test_first_character(self):
        self.assertEqual(primitives.ucfirst('élan'), 'Élan')
        self.assertEqual(primitives.lcfirst('ÉLAN'), 'éLAN')
        self.assertEqual(primitives.ucfirst(''), '')
        self.assertEqual(primitives.lcfirst(''), '')

    def test_first_character_is_titlecased(self):
        self.assertEqual(primitives.ucfirst('ǆemal'), 'ǅemal')

    def test_expanding_first_character_kept(self):
        self.assertEqual(primitives.ucfirst('ßtraße'), 'ßtraße')
        self.assertEqual(primitives.lcfirst('İx'), 'İx')
        self.assertEqual(len(primitives.lcfirst('İx')), 2)

    def test_letter_tests(self):
        self.assertTrue(primitives.is_upper_letter('É'))
        self.assertTrue(primitives.is_upper_letter('Σ'))
        self.assertFalse(primitives.is_upper_letter('é'))
        self.assertFalse(primitives.is_upper_letter('1'))
        self.assertTrue(primitives.is_lower_word('straße'))
        self.assertFalse(primitives.is_lower_word(''))
        self.assertFalse(primitives.is_lower_word('foo bar'))
        self.assertFalse(primitives.is_lower_word('foo1'))

class TestSubstr(unittest.TestCase):
    def test_ranges(self):
        self.assertEqual(primitives.substr('héllo', 1, 3), 'éll')
        self.assertEqual(primitives.substr('héllo', -3), 'llo')
        self.assertEqual(primitives.substr('héllo', -3, 2), 'll')
        self.assertEqual(primitives.substr('héllo', 1, -1), 'éll')
        self.assertEqual(primitives.substr('héllo', 10), '')
        self.assertEqual(primitives.substr('héllo', 1, -10), '')

class TestWidth(unittest.TestCase):
    def test_char_width(self):
        self.assertEqual(primitives.char_width('a'), 1)
        self.assertEqual(primitives.char_width('漢'), 2)
        self.assertEqual(primitives.char_width('Ａ'), 2)
        self.assertEqual(primitives.char_width('\u0301'), 1)

    def test_display_width(self):
        self.assertEqual(primitives.display_width(''), 0)
        self.assertEqual(primitives.display_width('ab日本'), 6)

    def test_strimwidth(self):
        self.assertEqual(primitives.strimwidth('日本語', 3), '日')
        self.assertEqual(primitives.strimwidth('日本語', 4), '日本')
        self.assertEqual(primitives.strimwidth('abc', 10), 'abc')
        self.assertEqual(primitives.strimwidth('abc', 0), '')
