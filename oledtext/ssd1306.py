"""SSD1306 OLED controller over I2C: framebuffer drawing and the wire protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .font import GLYPH_WIDTH, glyph

HEIGHT = 64
WIDTH = 128
I2C_ADDRESS = 0x3C
PAGE_HEIGHT = 8
N_PAGES = HEIGHT // PAGE_HEIGHT
BUFFER_LENGTH = N_PAGES * WIDTH

CHAR_WIDTH = GLYPH_WIDTH
CHAR_HEIGHT = 8

COMMAND_PREFIX = 0x80
DATA_PREFIX = 0x40

SET_MEMORY_MODE = 0x20
SET_COLUMN_ADDRESS = 0x21
SET_PAGE_ADDRESS = 0x22
SET_DISPLAY_START_LINE = 0x40
SET_CONTRAST = 0x81
SET_CHARGE_PUMP = 0x8D
SET_SEGMENT_REMAP = 0xA0
SET_ENTIRE_ON = 0xA4
SET_NORMAL_DISPLAY = 0xA6
SET_MUX_RATIO = 0xA8
SET_DISPLAY = 0xAE
SET_COMMON_OUTPUT_DIRECTION = 0xC0
SET_DISPLAY_OFFSET = 0xD3
SET_DISPLAY_CLOCK_DIVIDE_RATIO = 0xD5
SET_PRECHARGE = 0xD9
SET_COMMON_PIN_CONFIGURATION = 0xDA
SET_VCOMH_DESELECT_LEVEL = 0xDB


class I2CBus(Protocol):
    """Anything that can write a block of bytes to an I2C device."""

    def write(self, address: int, data: bytes) -> None: ...


@dataclass(frozen=True)
class RenderArea:
    """A rectangle of columns and pages to be sent to the display."""

    start_column: int
    end_column: int
    start_page: int
    end_page: int

    @property
    def buffer_length(self) -> int:
        """Number of framebuffer bytes covered by this area."""
        return (self.end_column - self.start_column + 1) * (
            self.end_page - self.start_page + 1
        )

    @staticmethod
    def full_screen() -> RenderArea:
        """The area covering the whole display."""
        return RenderArea(0, WIDTH - 1, 0, N_PAGES - 1)


def init_commands() -> bytes:
    """The command sequence that powers up and configures the controller."""
    pin_configuration = 0x12 if (WIDTH, HEIGHT) == (128, 64) else 0x02
    return bytes(
        [
            SET_DISPLAY,
            SET_MEMORY_MODE, 0x00,
            SET_DISPLAY_START_LINE,
            SET_SEGMENT_REMAP | 0x01,
            SET_MUX_RATIO, HEIGHT - 1,
            SET_COMMON_OUTPUT_DIRECTION | 0x08,
            SET_DISPLAY_OFFSET, 0x00,
            SET_COMMON_PIN_CONFIGURATION, pin_configuration,
            SET_DISPLAY_CLOCK_DIVIDE_RATIO, 0x80,
            SET_PRECHARGE, 0xF1,
            SET_VCOMH_DESELECT_LEVEL, 0x30,
            SET_CONTRAST, 0xFF,
            SET_ENTIRE_ON,
            SET_NORMAL_DISPLAY,
            SET_CHARGE_PUMP, 0x14,
            SET_DISPLAY | 0x01,
        ]
    )


class SSD1306:
    """An SSD1306 controller reached through an I2C bus."""

    def __init__(self, bus: I2CBus, address: int = I2C_ADDRESS) -> None:
        self.bus = bus
        self.address = address

    def send_command(self, command: int) -> None:
        self.bus.write(self.address, bytes([COMMAND_PREFIX, command]))

    def send_commands(self, commands) -> None:
        for command in commands:
            self.send_command(command)

    def send_buffer(self, data) -> None:
        self.bus.write(self.address, bytes([DATA_PREFIX]) + bytes(data))

    def init(self) -> None:
        """Configure the controller and switch the display on."""
        self.send_commands(init_commands())

    def render(self, buffer, area: RenderArea) -> None:
        """Send the start of the framebuffer into the given area of the display."""
        self.send_commands(
            [
                SET_COLUMN_ADDRESS, area.start_column, area.end_column,
                SET_PAGE_ADDRESS, area.start_page, area.end_page,
            ]
        )
        self.send_buffer(bytes(buffer[: area.buffer_length]))


def new_buffer() -> bytearray:
    """A blank framebuffer for the whole display."""
    return bytearray(BUFFER_LENGTH)


def draw_char(buffer: bytearray, x: int, y: int, code: int) -> None:
    """Draw one Latin-1 character with its top-left corner at (x, y).

    y is rounded down to a page boundary; characters that would not fit
    on the display are silently skipped.
    """
    if x < 0 or y < 0:
        raise ValueError(f"negative coordinates: ({x}, {y})")
    if x > WIDTH - CHAR_WIDTH or y > HEIGHT - CHAR_HEIGHT:
        return
    start = (y // PAGE_HEIGHT) * WIDTH + x
    buffer[start : start + CHAR_WIDTH] = glyph(code)


def draw_utf8_multiline(buffer: bytearray, x: int, y: int, text) -> None:
    """Draw UTF-8 text, wrapping to the next row at the right edge.

    Two-byte sequences are drawn as their Latin-1 character; every other
    non-ASCII byte is skipped but still takes up a character cell. Drawing
    stops at a NUL or once the text runs off the bottom of the display.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    data = data.split(b"\0", 1)[0]
    pos = 0
    while pos < len(data) and y <= HEIGHT - CHAR_HEIGHT:
        lead = data[pos]
        if lead & 0x80 == 0:
            draw_char(buffer, x, y, lead)
            pos += 1
        elif lead & 0xE0 == 0xC0:
            second = data[pos + 1] if pos + 1 < len(data) else 0
            latin1 = (((lead & 0x1F) << 6) | (second & 0x3F)) & 0xFF
            draw_char(buffer, x, y, latin1)
            pos += 2
        else:
            pos += 1
        x += CHAR_WIDTH
        if x > WIDTH - CHAR_WIDTH:
            x = 0
            y += CHAR_HEIGHT