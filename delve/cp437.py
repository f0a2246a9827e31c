"""Conversion between characters and code page 437 glyph numbers."""

_GLYPHS = (
    "☺☻♥♦♣♠•◘○◙♂♀♪♫☼"
    "►◄↕‼¶§▬↨↑↓→←∟↔▲▼"
    + "".join(map(chr, range(32, 127)))
    + "⌂"
    "ÇüéâäàåçêëèïîìÄÅ"
    "ÉæÆôöòûùÿÖÜ¢£¥₧ƒ"
    "áíóúñÑªº¿⌐¬½¼¡«»"
    "░▒▓│┤╡╢╖╕╣║╗╝╜╛┐"
    "└┴┬├─┼╞╟╚╔╩╦╠═╬╧"
    "╨╤╥╙╘╒╓╫╪┘┌█▄▌▐▀"
    "αßΓπΣσµτΦΘΩδ∞φε∩"
    "≡±≥≤⌠⌡÷≈°∙·√ⁿ²■"
)

_CODES = {glyph: code for code, glyph in enumerate(_GLYPHS, start=1)}


def to_cp437(char: str) -> int:
    """Return the code page 437 number of ``char``, or 0 if it has none."""
    return _CODES.get(char, 0)


def to_char(code: int) -> str:
    """Return the glyph for a code page 437 number; unknown codes give a space."""
    if 1 <= code <= len(_GLYPHS):
        return _GLYPHS[code - 1]
    return " "