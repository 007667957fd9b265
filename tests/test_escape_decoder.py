#!/usr/bin/env python3
'''Unit tests for the UAST escape decoder'''

from pathlib import Path
import sys
import unittest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from escape_decoder import decode_escapes


class TestDecodeEscapes(unittest.TestCase):

    def test_om(self):
        self.assertEqual(decode_escapes('/om/'), 'ॐ')

    def test_trailing_token(self):
        self.assertEqual(decode_escapes('ka/nu/'), 'kaṅ')

    def test_words(self):
        cases = [
            ('ma/nu/gala/m/', 'maṅgalaṃ'),
            ('bhagav/a/nvi/sl//nl/u', 'bhagavānviṣṇu'),
            ('garu/d/adhvaja/h/.', 'garuḍadhvajaḥ.'),
            ('agnim/i//ll/e', 'agnimīḻe'),
            ('dev/a//au/', 'devāã'),
            ('/su/iva', 'śiva'),
        ]
        for word, expected in cases:
            with self.subTest(word = word):
                self.assertEqual(decode_escapes(word), expected)

    def test_unterminated_token(self):
        '''An open token runs to the end of the word'''
        self.assertEqual(decode_escapes('k/a'), 'kā')
        self.assertEqual(decode_escapes('k/xyz'), 'k')

    def test_unknown_and_empty_tokens_dropped(self):
        self.assertEqual(decode_escapes('/x/'), '')
        self.assertEqual(decode_escapes('a//b'), 'ab')
        self.assertEqual(decode_escapes('a/q/c'), 'ac')
        self.assertEqual(decode_escapes('/'), '')

    def test_lower_cases_input(self):
        self.assertEqual(decode_escapes('KA/NU/'), 'kaṅ')
        self.assertEqual(decode_escapes('/OM/'), 'ॐ')

    def test_plain_text_copied(self):
        self.assertEqual(decode_escapes('bhūrbhuvaḥ'), 'bhūrbhuvaḥ')
        self.assertEqual(decode_escapes(''), '')


if __name__ == '__main__':
    unittest.main()
