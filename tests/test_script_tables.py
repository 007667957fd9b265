#!/usr/bin/env python3
'''Unit tests for the shared script tables'''

from pathlib import Path
import sys
import unittest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from script_tables import (
    CONSONANTS,
    DIGITS,
    MISC,
    VOWELS,
    VOWEL_SIGNS,
    Category,
    lookup,
    reverse_lookup,
    table,
)


class TestLookup(unittest.TestCase):
    '''Forward and reverse lookups'''

    def test_forward_lookup(self):
        self.assertEqual(lookup(Category.CONSONANT, 'kh'), 'ख')
        self.assertEqual(lookup(Category.VOWEL, 'ai'), 'ऐ')
        self.assertEqual(lookup(Category.VOWEL_SIGN, 'ṛ'), 'ृ')
        self.assertEqual(lookup(Category.MISC, '..'), '॥')
        self.assertEqual(lookup(Category.SPECIAL, 'halanta'), '्')

    def test_missing_spelling(self):
        self.assertIsNone(lookup(Category.CONSONANT, 'x'))
        self.assertIsNone(lookup(Category.VOWEL_SIGN, 'a'))
        self.assertIsNone(lookup(Category.DIGIT, ''))

    def test_reverse_lookup(self):
        self.assertEqual(reverse_lookup(Category.CONSONANT, 'ळ'), 'ḻ')
        self.assertEqual(reverse_lookup(Category.VOWEL_SIGN, 'ौ'), 'au')
        self.assertEqual(reverse_lookup(Category.SPECIAL, 'ॐ'), 'om')

    def test_marks_are_not_signs_when_reading(self):
        '''Anusvara, visarga and candrabindu are handled as specials'''
        self.assertIsNone(reverse_lookup(Category.VOWEL_SIGN, 'ं'))
        self.assertIsNone(reverse_lookup(Category.VOWEL_SIGN, 'ः'))
        self.assertIsNone(reverse_lookup(Category.MISC, 'ँ'))

    def test_table_view(self):
        self.assertIs(table(Category.DIGIT), DIGITS)


class TestTableInvariants(unittest.TestCase):
    '''Structure of the tables'''

    def test_digits_bijective(self):
        self.assertEqual(sorted(DIGITS), [str(d) for d in range(10)])
        glyphs = set(DIGITS.values())
        self.assertEqual(len(glyphs), 10)
        for digit, glyph in DIGITS.items():
            with self.subTest(digit = digit):
                self.assertEqual(reverse_lookup(Category.DIGIT, glyph), digit)

    def test_exclusive_categories(self):
        letters = set(VOWELS) | set(VOWEL_SIGNS)
        for name, spellings in (('consonant', CONSONANTS), ('digit', DIGITS), ('misc', MISC)):
            with self.subTest(category = name):
                self.assertFalse(set(spellings) & letters)
        self.assertFalse(set(CONSONANTS) & set(DIGITS))
        self.assertFalse(set(CONSONANTS) & set(MISC))
        self.assertFalse(set(DIGITS) & set(MISC))

    def test_glyphs_unique_per_table(self):
        for name, mapping in (('vowel', VOWELS), ('sign', VOWEL_SIGNS), ('consonant', CONSONANTS)):
            with self.subTest(table = name):
                self.assertEqual(len(set(mapping.values())), len(mapping))

    def test_tables_are_read_only(self):
        with self.assertRaises(TypeError):
            CONSONANTS['q'] = 'क़'


if __name__ == '__main__':
    unittest.main()
