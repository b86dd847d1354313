"""
ASCII Formatter - Three-line seven-segment rendering of an equation.
"""

from typing import Dict, List, Tuple

# Top, middle and bottom row of every glyph, three columns each
GLYPHS: Dict[str, Tuple[str, str, str]] = {
    '0': (' _ ', '| |', '|_|'),
    '1': ('   ', '  |', '  |'),
    '2': (' _ ', ' _|', '|_ '),
    '3': (' _ ', ' _|', ' _|'),
    '4': ('   ', '|_|', '  |'),
    '5': (' _ ', '|_ ', ' _|'),
    '6': (' _ ', '|_ ', '|_|'),
    '7': (' _ ', '  |', '  |'),
    '8': (' _ ', '|_|', '|_|'),
    '9': (' _ ', '|_|', ' _|'),
    '+': ('   ', '   ', ' + '),
    '-': ('   ', '   ', ' - '),
    'x': ('   ', '   ', ' x '),
    '/': ('   ', '  /', ' / '),
    '=': ('   ', '---', '---'),
    ' ': ('   ', '   ', '   '),
}
BLANK = GLYPHS[' ']

# Multiplication signs drawn with the x glyph
ALIASES: Dict[str, str] = {'*': 'x', '×': 'x'}


def format_lines(equation: str) -> List[str]:
    """
    Render an equation as three text rows.

    Every character is its own three-column block: "*" and "×" render
    like "x", whitespace and unknown characters render blank.
    """
    glyphs = [GLYPHS.get(ALIASES.get(char, char), BLANK) for char in equation]
    return ["".join(glyph[row] for glyph in glyphs) for row in range(3)]


def matchstick_formatter(equation: str) -> str:
    """
    Render an equation as seven-segment ASCII art.

    Args:
        equation: Equation text, e.g. "9-7=2"

    Returns:
        Three newline-separated rows, three columns per character
    """
    return "\n".join(format_lines(equation))
