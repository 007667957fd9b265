"""
One-to-one script substitutions

- Devanagari to Gujarati: the Gujarati Unicode block mirrors the Devanagari
  block at a fixed offset, so each known glyph maps to exactly one Gujarati glyph.
- SLP1 to IAST: each SLP1 letter stands for one IAST letter or digraph.

Characters outside the tables are dropped.
"""

from types import MappingProxyType

from script_tables import DANDA, DOUBLE_DANDA, devanagari_glyphs

GUJARATI_OFFSET = 0x0A80 - 0x0900

# Gujarati text uses the Devanagari dandas
SHARED_PUNCTUATION = (DANDA, DOUBLE_DANDA)


def _build_gujarati_table():
    mapping = {}
    for glyph in devanagari_glyphs():
        if glyph in SHARED_PUNCTUATION:
            mapping[glyph] = glyph
        else:
            mapping[glyph] = chr(ord(glyph) + GUJARATI_OFFSET)
    return MappingProxyType(mapping)


DEVANAGARI_TO_GUJARATI = _build_gujarati_table()

SLP1_TO_IAST = MappingProxyType({
    # Vowels
    'a': 'a', 'A': 'ā', 'i': 'i', 'I': 'ī', 'u': 'u', 'U': 'ū',
    'f': 'ṛ', 'F': 'ṝ', 'x': 'ḷ', 'X': 'ḹ',
    'e': 'e', 'E': 'ai', 'o': 'o', 'O': 'au',
    # Anusvara, Visarga, Candrabindu
    'M': 'ṃ', 'H': 'ḥ', '~': 'ã',
    # Punctuation
    '.': '.', "'": "'",
    # Digits
    '0': '0', '1': '1', '2': '2', '3': '3', '4': '4',
    '5': '5', '6': '6', '7': '7', '8': '8', '9': '9',
    # Velars
    'k': 'k', 'K': 'kh', 'g': 'g', 'G': 'gh', 'N': 'ṅ',
    # Palatals
    'c': 'c', 'C': 'ch', 'j': 'j', 'J': 'jh', 'Y': 'ñ',
    # Retroflexes
    'w': 'ṭ', 'W': 'ṭh', 'q': 'ḍ', 'Q': 'ḍh', 'R': 'ṇ',
    # Dentals
    't': 't', 'T': 'th', 'd': 'd', 'D': 'dh', 'n': 'n',
    # Labials
    'p': 'p', 'P': 'ph', 'b': 'b', 'B': 'bh', 'm': 'm',
    # Semivowels
    'y': 'y', 'r': 'r', 'l': 'l', 'v': 'v',
    # Sibilants
    'S': 'ś', 'z': 'ṣ', 's': 's',
    # Aspirate
    'h': 'h',
    'L': 'ḻ'
})


def devanagari_to_gujarati(text: str) -> str:
    """Convert Devanagari text to Gujarati script"""
    return ''.join(DEVANAGARI_TO_GUJARATI.get(char, '') for char in text)


def slp1_to_iast(text: str) -> str:
    """Convert SLP1 text to IAST"""
    return ''.join(SLP1_TO_IAST.get(char, '') for char in text)
