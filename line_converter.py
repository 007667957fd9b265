"""
Line-level wrapper around the word converters
"""

from typing import Callable


def convert_line(convert: Callable[[str], str], line: str) -> str:
    """
    Convert every whitespace-separated word of a line

    Args:
        convert: Word-level conversion function
        line: Input line

    Returns:
        Converted words in their original order, joined by single spaces
    """
    return ' '.join(convert(word) for word in line.split())
