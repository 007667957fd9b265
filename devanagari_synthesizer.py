"""
IAST / UAST to Devanagari synthesizer

A Sanskrit syllable is a consonant followed by a vowel sign. Every consonant
glyph carries an inherent 'a', so a bare 'a' adds nothing, any other vowel
adds its sign, and a consonant with no vowel after it gets a halanta. A word
that starts with a vowel uses the independent vowel glyph instead of a sign.
"""

from typing import List, Optional, Tuple

from escape_decoder import decode_escapes
from script_tables import (
    Category,
    HALANTA,
    INHERENT_VOWEL,
    OM,
    UNASPIRATED_CONSONANTS,
    lookup,
)

DIPHTHONG_SECOND = ('i', 'u')
ASPIRATE = 'h'


def _diphthong_at(text: str, i: int) -> bool:
    """True when 'ai' or 'au' starts at position i"""
    return (
        i + 1 < len(text)
        and text[i] == INHERENT_VOWEL
        and text[i + 1] in DIPHTHONG_SECOND
    )


def _match_misc(text: str, i: int) -> Optional[Tuple[str, int]]:
    """Longest misc match at i: double danda before danda"""
    pair = text[i:i + 2]
    if len(pair) == 2 and lookup(Category.MISC, pair) is not None:
        return lookup(Category.MISC, pair), 2

    glyph = lookup(Category.MISC, text[i])
    if glyph is not None:
        return glyph, 1
    return None


def _match_consonant(text: str, i: int) -> Optional[Tuple[str, int]]:
    """Aspirated digraph before single consonant"""
    if (
        i + 1 < len(text)
        and text[i] in UNASPIRATED_CONSONANTS
        and text[i + 1] == ASPIRATE
    ):
        return lookup(Category.CONSONANT, text[i:i + 2]), 2

    glyph = lookup(Category.CONSONANT, text[i])
    if glyph is not None:
        return glyph, 1
    return None


def _is_letter(char: str) -> bool:
    return (
        lookup(Category.VOWEL_SIGN, char) is not None
        or lookup(Category.VOWEL, char) is not None
        or lookup(Category.CONSONANT, char) is not None
    )


def synthesize(text: str) -> str:
    """
    Convert phonemic IAST text to Devanagari

    Never fails: characters with no table entry are skipped.

    Args:
        text: IAST word (escapes already decoded)

    Returns:
        Devanagari word
    """
    text = text.lower()
    result: List[str] = []
    i = 0

    if not text:
        return ''

    # Word-initial vowel takes its independent form
    if lookup(Category.VOWEL, text[0]) is not None:
        i = 2 if _diphthong_at(text, 0) else 1
        result.append(lookup(Category.VOWEL, text[:i]))

    while i < len(text):
        char = text[i]

        if char == OM:
            result.append(OM)
            i += 1
            continue

        misc = _match_misc(text, i)
        if misc is not None:
            glyph, length = misc
            result.append(glyph)
            i += length
            continue

        digit = lookup(Category.DIGIT, char)
        if digit is not None:
            result.append(digit)
            i += 1
            continue

        # Illegal character - skip
        if not _is_letter(char):
            i += 1
            continue

        consonant = _match_consonant(text, i)
        if consonant is not None:
            glyph, length = consonant
            result.append(glyph)
            i += length

        # No vowel follows: kill the inherent 'a' and reprocess the next char
        if i == len(text) or (
            lookup(Category.VOWEL_SIGN, text[i]) is None
            and text[i] != INHERENT_VOWEL
        ):
            result.append(HALANTA)
            continue

        if _diphthong_at(text, i):
            result.append(lookup(Category.VOWEL_SIGN, text[i:i + 2]))
            i += 2
        else:
            # Inherent 'a' needs no sign
            if text[i] != INHERENT_VOWEL:
                result.append(lookup(Category.VOWEL_SIGN, text[i]))
            i += 1

    return ''.join(result)


def romanized_to_devanagari(word: str) -> str:
    """Convert a UAST word (IAST with '/' escapes) to Devanagari"""
    return synthesize(decode_escapes(word))
