"""
Devanagari to IAST transliterator
"""

from script_tables import (
    ABBREVIATION,
    ANUSVARA,
    ANUSVARA_SPELLING,
    CANDRABINDU,
    CANDRABINDU_SPELLING,
    Category,
    HALANTA,
    INHERENT_VOWEL,
    OM,
    VISARGA,
    VISARGA_SPELLING,
    reverse_lookup,
)

# Nasal and aspiration marks written after a syllable
MARKS = {
    ANUSVARA: ANUSVARA_SPELLING,
    VISARGA: VISARGA_SPELLING,
    CANDRABINDU: CANDRABINDU_SPELLING,
}

# Symbols copied through unchanged
VERBATIM = (OM, ABBREVIATION)


def _misc_spelling(char: str):
    """Spelling of a danda, avagraha or digit glyph"""
    spelling = reverse_lookup(Category.MISC, char)
    if spelling is None:
        spelling = reverse_lookup(Category.DIGIT, char)
    return spelling


def decompose(text: str) -> str:
    """
    Convert Devanagari text to IAST

    Args:
        text: Devanagari word

    Returns:
        IAST transliteration; glyphs with no table entry are dropped
    """
    text = text.lower()
    result = []
    i = 0

    # Check for a standalone vowel at the start
    if text and reverse_lookup(Category.VOWEL, text[0]) is not None:
        result.append(reverse_lookup(Category.VOWEL, text[0]))
        i = 1

    while i < len(text):
        char = text[i]

        if char in VERBATIM:
            result.append(char)
            i += 1
            continue

        # Dandas, avagraha, digits; two dandas in a row come out as '..'
        misc = _misc_spelling(char)
        if misc is not None:
            result.append(misc)
            i += 1
            continue

        # Anusvara, Visarga, Candrabindu
        if char in MARKS:
            result.append(MARKS[char])
            i += 1
            continue

        consonant = reverse_lookup(Category.CONSONANT, char)
        if consonant is not None:
            result.append(consonant)
            next_char = text[i + 1] if i + 1 < len(text) else None

            # Halanta (virama) - no vowel
            if next_char == HALANTA:
                i += 2
                continue

            # Vowel sign
            sign = reverse_lookup(Category.VOWEL_SIGN, next_char) if next_char else None
            if sign is not None:
                result.append(sign)
                i += 2
                continue

            # No following vowel sign = inherent 'a'
            result.append(INHERENT_VOWEL)
            i += 1
            continue

        # Unknown character - skip
        i += 1

    return ''.join(result)
