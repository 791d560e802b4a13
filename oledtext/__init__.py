"""Text drawing and I2C rendering for 128x64 SSD1306 OLED displays."""

__version__ = "0.1.0"
__all__ = ["display", "font", "ssd1306"]