"""8x8 bitmap font for SSD1306 displays, column-major with the LSB at the top."""

from __future__ import annotations

GLYPH_WIDTH = 8

_GLYPHS: tuple[bytes, ...] = tuple(
    bytes(rows)
    for rows in (
        (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00),  # blank
        (0x78, 0x14, 0x12, 0x11, 0x12, 0x14, 0x78, 0x00),  # A
        (0x7F, 0x49, 0x49, 0x49, 0x49, 0x49, 0x7F, 0x00),  # B
        (0x7E, 0x41, 0x41, 0x41, 0x41, 0x41, 0x41, 0x00),  # C
        (0x7F, 0x41, 0x41, 0x41, 0x41, 0x41, 0x7E, 0x00),  # D
        (0x7F, 0x49, 0x49, 0x49, 0x49, 0x49, 0x49, 0x00),  # E
        (0x7F, 0x09, 0x09, 0x09, 0x09, 0x01, 0x01, 0x00),  # F
        (0x7F, 0x41, 0x41, 0x41, 0x51, 0x51, 0x73, 0x00),  # G
        (0x7F, 0x08, 0x08, 0x08, 0x08, 0x08, 0x7F, 0x00),  # H
        (0x00, 0x00, 0x00, 0x7F, 0x00, 0x00, 0x00, 0x00),  # I
        (0x21, 0x41, 0x41, 0x3F, 0x01, 0x01, 0x01, 0x00),  # J
        (0x00, 0x7F, 0x08, 0x08, 0x14, 0x22, 0x41, 0x00),  # K
        (0x7F, 0x40, 0x40, 0x40, 0x40, 0x40, 0x40, 0x00),  # L
        (0x7F, 0x02, 0x04, 0x08, 0x04, 0x02, 0x7F, 0x00),  # M
        (0x7F, 0x02, 0x04, 0x08, 0x10, 0x20, 0x7F, 0x00),  # N
        (0x3E, 0x41, 0x41, 0x41, 0x41, 0x41, 0x3E, 0x00),  # O
        (0x7F, 0x11, 0x11, 0x11, 0x11, 0x11, 0x0E, 0x00),  # P
        (0x3E, 0x41, 0x41, 0x49, 0x51, 0x61, 0x7E, 0x00),  # Q
        (0x7F, 0x11, 0x11, 0x11, 0x31, 0x51, 0x0E, 0x00),  # R
        (0x46, 0x49, 0x49, 0x49, 0x49, 0x30, 0x00, 0x00),  # S
        (0x01, 0x01, 0x01, 0x7F, 0x01, 0x01, 0x01, 0x00),  # T
        (0x3F, 0x40, 0x40, 0x40, 0x40, 0x40, 0x3F, 0x00),  # U
        (0x0F, 0x10, 0x20, 0x40, 0x20, 0x10, 0x0F, 0x00),  # V
        (0x7F, 0x20, 0x10, 0x08, 0x10, 0x20, 0x7F, 0x00),  # W
        (0x00, 0x41, 0x22, 0x14, 0x14, 0x22, 0x41, 0x00),  # X
        (0x01, 0x02, 0x04, 0x78, 0x04, 0x02, 0x01, 0x00),  # Y
        (0x41, 0x61, 0x59, 0x45, 0x43, 0x41, 0x00, 0x00),  # Z
        (0x3E, 0x41, 0x41, 0x49, 0x41, 0x41, 0x3E, 0x00),  # 0
        (0x00, 0x00, 0x42, 0x7F, 0x40, 0x00, 0x00, 0x00),  # 1
        (0x30, 0x49, 0x49, 0x49, 0x49, 0x46, 0x00, 0x00),  # 2
        (0x00, 0x00, 0x49, 0x49, 0x49, 0x49, 0x36, 0x00),  # 3
        (0x00, 0x3F, 0x20, 0x20, 0x78, 0x20, 0x20, 0x00),  # 4
        (0x4F, 0x49, 0x49, 0x49, 0x49, 0x30, 0x00, 0x00),  # 5
        (0x3F, 0x48, 0x48, 0x48, 0x48, 0x48, 0x30, 0x00),  # 6
        (0x01, 0x01, 0x01, 0x61, 0x31, 0x0D, 0x03, 0x00),  # 7
        (0x36, 0x49, 0x49, 0x49, 0x49, 0x49, 0x36, 0x00),  # 8
        (0x06, 0x09, 0x09, 0x09, 0x09, 0x09, 0x7F, 0x00),  # 9
        (0x00, 0x20, 0x54, 0x54, 0x54, 0x78, 0x00, 0x00),  # a
        (0x00, 0x7F, 0x48, 0x44, 0x44, 0x38, 0x00, 0x00),  # b
        (0x00, 0x38, 0x44, 0x44, 0x44, 0x00, 0x00, 0x00),  # c
        (0x00, 0x38, 0x44, 0x44, 0x48, 0x7F, 0x00, 0x00),  # d
        (0x00, 0x38, 0x54, 0x54, 0x54, 0x18, 0x00, 0x00),  # e
        (0x08, 0x7E, 0x09, 0x01, 0x02, 0x00, 0x00, 0x00),  # f
        (0x00, 0x0C, 0x52, 0x52, 0x52, 0x3E, 0x00, 0x00),  # g
        (0x00, 0x7F, 0x08, 0x04, 0x04, 0x78, 0x00, 0x00),  # h
        (0x00, 0x44, 0x7D, 0x40, 0x00, 0x00, 0x00, 0x00),  # i
        (0x00, 0x20, 0x20, 0x40, 0x44, 0x3D, 0x00, 0x00),  # j
        (0x00, 0x7F, 0x10, 0x28, 0x44, 0x00, 0x00, 0x00),  # k
        (0x00, 0x41, 0x7F, 0x40, 0x00, 0x00, 0x00, 0x00),  # l
        (0x00, 0x7C, 0x04, 0x18, 0x04, 0x78, 0x00, 0x00),  # m
        (0x00, 0x7C, 0x08, 0x04, 0x04, 0x78, 0x00, 0x00),  # n
        (0x00, 0x38, 0x44, 0x44, 0x44, 0x38, 0x00, 0x00),  # o
        (0x00, 0x7C, 0x14, 0x14, 0x14, 0x08, 0x00, 0x00),  # p
        (0x00, 0x08, 0x14, 0x14, 0x18, 0x7C, 0x00, 0x00),  # q
        (0x00, 0x7C, 0x08, 0x04, 0x04, 0x08, 0x00, 0x00),  # r
        (0x00, 0x48, 0x54, 0x54, 0x54, 0x24, 0x00, 0x00),  # s
        (0x00, 0x04, 0x3F, 0x44, 0x40, 0x20, 0x00, 0x00),  # t
        (0x00, 0x3C, 0x40, 0x40, 0x40, 0x3C, 0x40, 0x00),  # u
        (0x00, 0x1C, 0x20, 0x40, 0x20, 0x1C, 0x00, 0x00),  # v
        (0x00, 0x3C, 0x40, 0x30, 0x40, 0x3C, 0x00, 0x00),  # w
        (0x00, 0x44, 0x28, 0x10, 0x28, 0x44, 0x00, 0x00),  # x
        (0x00, 0x0C, 0x50, 0x50, 0x50, 0x3C, 0x00, 0x00),  # y
        (0x00, 0x44, 0x64, 0x54, 0x4C, 0x44, 0x00, 0x00),  # z
        (0x00, 0x00, 0x00, 0x60, 0x60, 0x00, 0x00, 0x00),  # .
        (0x00, 0x00, 0x00, 0x6C, 0x6C, 0x00, 0x00, 0x00),  # :
        (0x00, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0x00),  # #
        (0x00, 0x00, 0x00, 0x5F, 0x5F, 0x00, 0x00, 0x00),  # !
        (0x00, 0x06, 0x01, 0x01, 0x71, 0x09, 0x06, 0x00),  # ?
        (0x00, 0x79, 0x15, 0x15, 0x15, 0x15, 0x79, 0x00),  # Ã
        (0x00, 0x78, 0x26, 0x25, 0x25, 0x26, 0x78, 0x00),  # Â
        (0x00, 0x78, 0x14, 0x14, 0x16, 0x15, 0x78, 0x00),  # Á
        (0x00, 0x78, 0x15, 0x16, 0x14, 0x14, 0x78, 0x00),  # À
        (0x00, 0x7C, 0x54, 0x54, 0x56, 0x55, 0x44, 0x00),  # É
        (0x00, 0x7C, 0x56, 0x55, 0x55, 0x56, 0x44, 0x00),  # Ê
        (0x00, 0x00, 0x00, 0x7D, 0x01, 0x00, 0x00, 0x00),  # Í
        (0x00, 0x38, 0x44, 0x44, 0x44, 0x46, 0x39, 0x00),  # Ó
        (0x00, 0x38, 0x46, 0x45, 0x45, 0x46, 0x38, 0x00),  # Ô
        (0x00, 0x38, 0x45, 0x45, 0x45, 0x45, 0x38, 0x00),  # Õ
        (0x00, 0x3E, 0x40, 0x42, 0x41, 0x40, 0x3E, 0x00),  # Ú
        (0x00, 0x1E, 0x21, 0x61, 0x61, 0x21, 0x21, 0x00),  # Ç
        (0x00, 0x1C, 0x22, 0x62, 0x62, 0x22, 0x22, 0x00),  # ç
        (0x00, 0x00, 0x20, 0x55, 0x55, 0x55, 0x79, 0x00),  # ã
        (0x00, 0x00, 0x20, 0x54, 0x56, 0x55, 0x78, 0x00),  # á
        (0x00, 0x00, 0x20, 0x55, 0x56, 0x54, 0x78, 0x00),  # à
        (0x00, 0x00, 0x20, 0x56, 0x55, 0x55, 0x7A, 0x00),  # â
        (0x00, 0x38, 0x54, 0x56, 0x55, 0x18, 0x00, 0x00),  # é
        (0x00, 0x3A, 0x55, 0x55, 0x55, 0x1A, 0x00, 0x00),  # ê
        (0x00, 0x44, 0x7E, 0x41, 0x00, 0x00, 0x00, 0x00),  # í
        (0x00, 0x38, 0x44, 0x46, 0x45, 0x38, 0x00, 0x00),  # ó
        (0x00, 0x3A, 0x45, 0x45, 0x45, 0x3A, 0x00, 0x00),  # ô
        (0x00, 0x3C, 0x40, 0x42, 0x41, 0x3C, 0x40, 0x00),  # ú
        (0x00, 0x40, 0x30, 0x00, 0x00, 0x00, 0x00, 0x00),  # ,
        (0x00, 0x18, 0x18, 0x18, 0x18, 0x00, 0x00, 0x00),  # -
    )
)

_SPECIAL: dict[int, int] = {
    ord("."): 63,
    ord(":"): 64,
    ord("#"): 65,
    ord("!"): 66,
    ord("?"): 67,
    0xC3: 68,  # Ã
    0xC2: 69,  # Â
    0xC1: 70,  # Á
    0xC0: 71,  # À
    0xC9: 72,  # É
    0xCA: 73,  # Ê
    0xCD: 74,  # Í
    0xD3: 75,  # Ó
    0xD4: 76,  # Ô
    0xD5: 77,  # Õ
    0xDA: 78,  # Ú
    0xC7: 79,  # Ç
    0xE7: 80,  # ç
    0xE3: 81,  # ã
    0xE1: 82,  # á
    0xE0: 83,  # à
    0xE2: 84,  # â
    0xE9: 85,  # é
    0xEA: 86,  # ê
    0xED: 87,  # í
    0xF3: 88,  # ó
    0xF4: 89,  # ô
    0xFA: 90,  # ú
    ord(","): 91,
    ord("-"): 92,
}


def _check_code(code: int) -> None:
    if not 0 <= code <= 0xFF:
        raise ValueError(f"character code out of range 0..255: {code}")


def glyph_index(code: int) -> int:
    """Return the font table index for a Latin-1 character code; 0 if it has no glyph."""
    _check_code(code)
    if ord("A") <= code <= ord("Z"):
        return code - ord("A") + 1
    if ord("0") <= code <= ord("9"):
        return code - ord("0") + 27
    if ord("a") <= code <= ord("z"):
        return code - ord("a") + 37
    return _SPECIAL.get(code, 0)


def glyph(code: int) -> bytes:
    """Return the eight column bytes drawn for a Latin-1 character code."""
    return _GLYPHS[glyph_index(code)]