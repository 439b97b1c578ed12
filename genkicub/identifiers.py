"""Parsing of the type-identifier header of a scene description."""

from __future__ import annotations

from .errors import (
    CLR_COMMA_ERR,
    CLR_RANGE_ERR,
    DUPLICATE_ID_ERR,
    INVALID_ID_ERR,
    MISSING_ID_ERR,
    PARSE_NL_ERR,
    CubError,
)
from .scene import Identifier, Textures, is_whitespace

_KEYS = {
    "NO": Identifier.NO,
    "EA": Identifier.EA,
    "SO": Identifier.SO,
    "WE": Identifier.WE,
    "C": Identifier.C,
    "F": Identifier.F,
}
_DIGITS = "0123456789"


class CharReader:
    """Reads text one character at a time, keeping the last character read.

    At the end of the text ``read`` returns an empty string, leaves
    ``current`` unchanged and sets ``exhausted``.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self.position = 0
        self.current = " "
        self.exhausted = False

    def read(self) -> str:
        """Advance one character and return it, or "" at the end."""
        if self.position >= len(self._text):
            self.exhausted = True
            return ""
        self.current = self._text[self.position]
        self.position += 1
        return self.current

    def remaining(self) -> str:
        """Return the text not yet read."""
        return self._text[self.position:]


def _skip_whitespace(reader: CharReader) -> bool:
    """Read past whitespace; False if the text ended while on whitespace."""
    while is_whitespace(reader.current):
        if not reader.read():
            return False
    return True


def _skip_to_value(reader: CharReader) -> None:
    """Skip blanks between an identifier and its value on the same line."""
    while is_whitespace(reader.current):
        if reader.current == "\n":
            raise CubError(PARSE_NL_ERR)
        if not reader.read():
            raise CubError(MISSING_ID_ERR)


def _is_set(textures: Textures, ident: Identifier) -> bool:
    if ident is Identifier.C:
        return textures.ceiling != -1
    if ident is Identifier.F:
        return textures.floor != -1
    return ident in textures.paths


def parse_identifier(reader: CharReader, textures: Textures) -> Identifier:
    """Read a one- or two-letter identifier starting at the current character."""
    key = reader.current
    following = reader.read()
    if following and not is_whitespace(following):
        key += following
        reader.read()
    ident = _KEYS.get(key)
    if ident is None:
        raise CubError(INVALID_ID_ERR)
    if _is_set(textures, ident):
        raise CubError(DUPLICATE_ID_ERR)
    return ident


def parse_texture_path(reader: CharReader) -> str:
    """Read a texture path: everything up to the next whitespace."""
    _skip_to_value(reader)
    chars = []
    while not is_whitespace(reader.current):
        chars.append(reader.current)
        if not reader.read():
            break
    return "".join(chars)


def _read_component(reader: CharReader) -> int:
    digits = ""
    while len(digits) < 3:
        c = reader.current
        if digits and (c == "," or is_whitespace(c)):
            break
        if len(c) != 1 or c not in _DIGITS:
            raise CubError(CLR_RANGE_ERR)
        digits += c
        if not reader.read():
            break
    value = int(digits)
    if value > 255:
        raise CubError(CLR_RANGE_ERR)
    return value


def _expect_comma(reader: CharReader) -> None:
    if not _skip_whitespace(reader) or reader.current != ",":
        raise CubError(CLR_COMMA_ERR)
    reader.read()
    _skip_whitespace(reader)


def parse_color(reader: CharReader) -> int:
    """Read an ``R,G,B`` colour and return it packed as 0xRRGGBB."""
    _skip_to_value(reader)
    color = 0
    for shift in (16, 8, 0):
        if shift != 16:
            _expect_comma(reader)
        color |= _read_component(reader) << shift
    return color


def read_textures(reader: CharReader) -> Textures:
    """Read identifiers until both colours and all four wall paths are known."""
    textures = Textures()
    while not textures.has_all():
        if not _skip_whitespace(reader) or reader.exhausted:
            raise CubError(MISSING_ID_ERR)
        ident = parse_identifier(reader, textures)
        if ident is Identifier.C:
            textures.ceiling = parse_color(reader)
        elif ident is Identifier.F:
            textures.floor = parse_color(reader)
        else:
            textures.paths[ident] = parse_texture_path(reader)
    return textures