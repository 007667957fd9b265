"""
Sanskrit script tables shared by the synthesizer and the decomposer

Forward tables map a Latin (IAST) spelling to one Devanagari code point.
Glyph-keyed views for the reverse direction are built by inverting them.
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional


class Category(Enum):
    """Character categories of the script tables"""
    VOWEL = 'vowel'
    VOWEL_SIGN = 'vowel_sign'
    CONSONANT = 'consonant'
    DIGIT = 'digit'
    MISC = 'misc'
    SPECIAL = 'special'


# Independent vowels (word-initial)
VOWELS = MappingProxyType({
    'a': 'अ', 'ā': 'आ', 'i': 'इ', 'ī': 'ई', 'u': 'उ', 'ū': 'ऊ',
    'ṛ': 'ऋ', 'ṝ': 'ॠ', 'ḷ': 'ऌ', 'ḹ': 'ॡ',
    'e': 'ए', 'ai': 'ऐ', 'o': 'ओ', 'au': 'औ'
})

# Vowel signs (mātrā); anusvara and visarga attach the same way
VOWEL_SIGNS = MappingProxyType({
    'ā': 'ा', 'i': 'ि', 'ī': 'ी', 'u': 'ु', 'ū': 'ू',
    'ṛ': 'ृ', 'ṝ': 'ॄ', 'ḷ': 'ॢ', 'ḹ': 'ॣ',
    'e': 'े', 'ai': 'ै', 'o': 'ो', 'au': 'ौ',
    'ṃ': 'ं', 'ḥ': 'ः'
})

CONSONANTS = MappingProxyType({
    # Velars
    'k': 'क', 'kh': 'ख', 'g': 'ग', 'gh': 'घ', 'ṅ': 'ङ',
    # Palatals
    'c': 'च', 'ch': 'छ', 'j': 'ज', 'jh': 'झ', 'ñ': 'ञ',
    # Retroflexes
    'ṭ': 'ट', 'ṭh': 'ठ', 'ḍ': 'ड', 'ḍh': 'ढ', 'ṇ': 'ण',
    # Dentals
    't': 'त', 'th': 'थ', 'd': 'द', 'dh': 'ध', 'n': 'न',
    # Labials
    'p': 'प', 'ph': 'फ', 'b': 'ब', 'bh': 'भ', 'm': 'म',
    # Semivowels
    'y': 'य', 'r': 'र', 'l': 'ल', 'v': 'व',
    # Sibilants
    'ś': 'श', 'ṣ': 'ष', 's': 'स',
    # Aspirate
    'h': 'ह',
    # Vedic retroflex lateral
    'ḻ': 'ळ'
})

DIGITS = MappingProxyType({
    '0': '०', '1': '१', '2': '२', '3': '३', '4': '४',
    '5': '५', '6': '६', '7': '७', '8': '८', '9': '९'
})

# Punctuation and marks written between syllables
MISC = MappingProxyType({
    '.': '।',   # Danda
    '..': '॥',  # Double danda
    "'": 'ऽ',   # Avagraha
    'ã': 'ँ'    # Candrabindu
})

# Specials are keyed by name, their behaviour is hard-coded in each direction
SPECIAL = MappingProxyType({
    'om': 'ॐ',
    'halanta': '्',
    'anusvara': 'ं',
    'visarga': 'ः',
    'candrabindu': 'ँ',
    'danda': '।',
    'double_danda': '॥',
    'abbreviation': '॰'
})

OM = SPECIAL['om']
HALANTA = SPECIAL['halanta']
ANUSVARA = SPECIAL['anusvara']
VISARGA = SPECIAL['visarga']
CANDRABINDU = SPECIAL['candrabindu']
DANDA = SPECIAL['danda']
DOUBLE_DANDA = SPECIAL['double_danda']
ABBREVIATION = SPECIAL['abbreviation']

# Fixed spellings of the nasal and aspiration marks in IAST output
ANUSVARA_SPELLING = 'ṃ'
VISARGA_SPELLING = 'ḥ'
CANDRABINDU_SPELLING = 'ã'

INHERENT_VOWEL = 'a'

# Consonants that take a following 'h' as an aspirated digraph
UNASPIRATED_CONSONANTS = frozenset('bcdgjkptḍṭ')

_TABLES: Dict[Category, Mapping[str, str]] = {
    Category.VOWEL: VOWELS,
    Category.VOWEL_SIGN: VOWEL_SIGNS,
    Category.CONSONANT: CONSONANTS,
    Category.DIGIT: DIGITS,
    Category.MISC: MISC,
    Category.SPECIAL: SPECIAL,
}


def _invert(mapping: Mapping[str, str], exclude=()) -> Mapping[str, str]:
    return MappingProxyType({
        glyph: spelling for spelling, glyph in mapping.items()
        if spelling not in exclude
    })


# Glyph-keyed views used when reading Devanagari. Anusvara, visarga and
# candrabindu are specials on this side, never vowel signs or misc.
_REVERSE_TABLES: Dict[Category, Mapping[str, str]] = {
    Category.VOWEL: _invert(VOWELS),
    Category.VOWEL_SIGN: _invert(VOWEL_SIGNS, exclude=(ANUSVARA_SPELLING, VISARGA_SPELLING)),
    Category.CONSONANT: _invert(CONSONANTS),
    Category.DIGIT: _invert(DIGITS),
    Category.MISC: _invert(MISC, exclude=(CANDRABINDU_SPELLING,)),
    Category.SPECIAL: _invert(SPECIAL),
}


def lookup(category: Category, spelling: str) -> Optional[str]:
    """
    Look up the Devanagari glyph for a Latin spelling

    Args:
        category: Table to search
        spelling: IAST spelling (1-2 characters), or a special's name

    Returns:
        The glyph, or None when the spelling is not in that table
    """
    return _TABLES[category].get(spelling)


def reverse_lookup(category: Category, glyph: str) -> Optional[str]:
    """Look up the IAST spelling (or special name) of a Devanagari glyph"""
    return _REVERSE_TABLES[category].get(glyph)


def table(category: Category) -> Mapping[str, str]:
    """Read-only view of a whole forward table"""
    return _TABLES[category]


def devanagari_glyphs() -> frozenset:
    """Every Devanagari code point the tables know about"""
    glyphs = set()
    for mapping in _TABLES.values():
        glyphs.update(mapping.values())
    return frozenset(glyphs)
