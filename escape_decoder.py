"""
ASCII escape decoder for UAST input

Diacritic letters are written as short mnemonics between slashes, e.g.
'ma/nu/gala/m/' stands for 'maṅgalaṃ' and '/om/' for 'ॐ'.
"""

from types import MappingProxyType

# Escape mnemonics to IAST letters or Devanagari symbols
ESCAPES = MappingProxyType({
    # Long vowels
    'a': 'ā', 'i': 'ī', 'u': 'ū',
    # Vocalic r and l
    'r': 'ṛ', 'ru': 'ṝ', 'l': 'ḷ', 'lu': 'ḹ',
    # Retroflexes
    'll': 'ḻ', 't': 'ṭ', 'd': 'ḍ',
    # Anusvara, visarga
    'm': 'ṃ', 'h': 'ḥ',
    # Nasals
    'n': 'ñ', 'nu': 'ṅ', 'nl': 'ṇ',
    # Sibilants
    'su': 'ś', 'sl': 'ṣ',
    # Candrabindu
    'au': 'ã',
    'om': 'ॐ'
})

DELIMITER = '/'


def decode_escapes(word: str) -> str:
    """
    Replace '/'-delimited mnemonics with the characters they stand for

    The word is lower-cased first. Unknown or empty tokens are dropped, and an
    unterminated token runs to the end of the word.

    Args:
        word: UAST word

    Returns:
        Phonemic text ready for synthesis
    """
    text = word.lower()
    result = []
    i = 0

    while i < len(text):
        char = text[i]

        if char != DELIMITER:
            result.append(char)
            i += 1
            continue

        end = text.find(DELIMITER, i + 1)
        if end == -1:
            token = text[i + 1:]
            i = len(text)
        else:
            token = text[i + 1:end]
            i = end + 1

        decoded = ESCAPES.get(token)
        if decoded is not None:
            result.append(decoded)

    return ''.join(result)
