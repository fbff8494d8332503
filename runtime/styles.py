"""
Cell tag to curses attribute mapping.

The engine only tags cells (border, body, head, food, plain); choosing how a
tag looks on screen is the terminal's business and lives here.
"""

import curses
from typing import Dict, Tuple

from domain.render import BORDER, BODY, HEAD, FOOD, PLAIN

# tag -> (xterm-256 colour, 8-colour fallback, bold)
PALETTE: Dict[str, Tuple[int, int, bool]] = {
    BORDER: (240, curses.COLOR_WHITE, False),
    BODY:   (46, curses.COLOR_GREEN, False),
    HEAD:   (82, curses.COLOR_GREEN, True),
    FOOD:   (196, curses.COLOR_RED, False),
}


def color_for(tag: str, num_colors: int) -> Tuple[int, bool]:
    """
    Pick the foreground colour and boldness for a tag on a terminal with
    num_colors colours. Unknown tags fall back to plain text (-1, False).
    """
    if tag not in PALETTE:
        return -1, False
    rich, basic, bold = PALETTE[tag]
    return (rich if num_colors >= 256 else basic), bold


def build_styles(use_color: bool = True) -> Dict[str, int]:
    """
    Register colour pairs with curses and return tag -> attribute.

    Must be called after curses has been initialised. Without colour
    support (or with use_color False) only the head keeps its bold attribute.
    """
    styles: Dict[str, int] = {PLAIN: curses.A_NORMAL}
    has_color = use_color and curses.has_colors()
    if has_color:
        curses.start_color()
        curses.use_default_colors()

    for pair_number, tag in enumerate(sorted(PALETTE), start=1):
        color, bold = color_for(tag, curses.COLORS if has_color else 0)
        attr = curses.A_BOLD if bold else curses.A_NORMAL
        if has_color:
            curses.init_pair(pair_number, color, -1)
            attr |= curses.color_pair(pair_number)
        styles[tag] = attr
    return styles
