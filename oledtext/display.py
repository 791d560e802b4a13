"""A 128x64 OLED text display showing up to three lines of text."""

from __future__ import annotations

from .ssd1306 import (
    I2C_ADDRESS,
    SSD1306,
    I2CBus,
    RenderArea,
    draw_utf8_multiline,
    new_buffer,
)

# Wiring of the display's I2C bus.
SDA_PIN = 14
SCL_PIN = 15
I2C_FREQUENCY = 400_000

LINE_ROWS = (0, 28, 56)


class Display:
    """Owns the framebuffer of one SSD1306 display and renders text to it."""

    def __init__(self, bus: I2CBus) -> None:
        self.controller = SSD1306(bus, I2C_ADDRESS)
        self.buffer = new_buffer()
        self.area = RenderArea.full_screen()

    def init(self) -> None:
        """Configure the controller and blank the screen."""
        self.controller.init()
        self.area = RenderArea.full_screen()
        self.clear()

    def clear(self) -> None:
        """Blank the framebuffer and the screen."""
        self.buffer[:] = bytes(len(self.buffer))
        self.controller.render(self.buffer, self.area)

    def show_message(self, line1=None, line2=None, line3=None) -> None:
        """Redraw the screen with up to three lines; None leaves a line empty."""
        self.buffer[:] = bytes(len(self.buffer))
        for row, line in zip(LINE_ROWS, (line1, line2, line3)):
            if line is not None:
                draw_utf8_multiline(self.buffer, 0, row, line)
        self.controller.render(self.buffer, self.area)