"""5x5 bitmap glyphs for the letters, digits and colon drawn on screen.

Each glyph is a tuple of five rows, each a tuple of five cells holding
1 where the cell is lit and 0 where it is blank.
"""

from __future__ import annotations

Glyph = tuple[tuple[int, ...], ...]

_SIZE = 5

_ART: dict[str, tuple[str, ...]] = {
    "P": ("####.", "#..#.", "####.", "#....", "#...."),
    "T": ("#####", "..#..", "..#..", "..#..", "..#.."),
    "E": ("#####", "#....", "####.", "#....", "#####"),
    "R": ("#####", "#...#", "####.", "#.##.", "#..##"),
    "I": ("#####", "..#..", "..#..", "..#..", "#####"),
    "S": ("#####", "#....", ".##..", "...##", "#####"),
    ":": (".....", "..#..", ".....", ".....", "..#.."),
    "G": ("#####", "#....", "#.###", "#...#", "#####"),
    "A": ("..#..", ".#.#.", "#...#", "#####", "#...#"),
    "M": ("#...#", "##.##", "#.#.#", "#...#", "#...#"),
    "O": (".###.", "#...#", "#...#", "#...#", ".###."),
    "V": (".....", "#...#", "#...#", ".#.#.", "..#.."),
    "U": ("#...#", "#...#", "#...#", "#...#", "#####"),
    "N": ("#...#", "##..#", "#.#.#", "#..##", "#...#"),
    "B": ("####.", "#..#.", "###..", "#..#.", "####."),
    "J": ("..#..", "..#..", "..#..", "#.#..", "###.."),
    "0": ("#####", "#...#", "#...#", "#...#", "#####"),
    "1": (".##..", "..#..", "..#..", "..#..", "..#.."),
    "2": ("#####", "....#", "#####", "#....", "#####"),
    "3": ("#####", "....#", ".####", "....#", "#####"),
    "4": ("#...#", "#...#", "#####", "....#", "....#"),
    "5": ("#####", "#....", "#####", "....#", "#####"),
    "6": ("####.", "#....", "####.", "#..#.", "####."),
    "7": ("#####", "....#", "...#.", "..#..", ".#..."),
    "8": (".###.", "#...#", ".###.", "#...#", ".###."),
    "9": ("#####", "#...#", "#####", "....#", "#####"),
}


def _parse(rows: tuple[str, ...]) -> Glyph:
    if len(rows) != _SIZE or any(len(row) != _SIZE for row in rows):
        raise ValueError("glyph art must be 5x5")
    return tuple(tuple(1 if cell == "#" else 0 for cell in row) for row in rows)


_GLYPHS: dict[str, Glyph] = {name: _parse(rows) for name, rows in _ART.items()}


def glyph(char: str) -> Glyph:
    """Return the 5x5 bitmap for a letter, digit or ':' (letters case-insensitive)."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    try:
        return _GLYPHS[char.upper()]
    except KeyError:
        raise ValueError(f"no glyph for character {char!r}") from None


def digit(value: int) -> Glyph:
    """Return the 5x5 bitmap for a decimal digit 0-9."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"digit expects an int, got {type(value).__name__}")
    if not 0 <= value <= 9:
        raise ValueError(f"digit out of range: {value}")
    return _GLYPHS[str(value)]