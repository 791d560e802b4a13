# oledtext

Draw up to three lines of text on a 128x64 SSD1306 OLED display driven over I2C.

The package keeps a 1024-byte frame buffer (8 pages of 128 columns, one byte per
8-pixel column of a page, least significant bit at the top), draws text into it
with a built-in 8x8 font, and sends the buffer to the controller.

The font covers `A`-`Z`, `a`-`z`, `0`-`9`, the marks `. : # ! ? , -`, and the
accented letters Ã Â Á À É Ê Í Ó Ô Õ Ú Ç ç ã á à â é ê í ó ô ú. Any other
character is drawn as a blank cell.

## Installation

```
pip install oledtext
```

The package has no dependencies outside the standard library.

## The bus

`oledtext` does not open or configure a hardware bus itself. You give it an
object with a `write(address, data)` method that sends `data` (bytes) to the
device at `address` on the I2C bus. Adapt whatever your platform offers:

```python
class MyBus:
    def write(self, address, data):
        my_i2c_device.write_to(address, data)
```

Every command byte is sent as its own write, prefixed with `0x80`; frame
buffer data is sent as one write prefixed with `0x40`.

## Showing a message

```python
from oledtext.display import Display

display = Display(MyBus())
display.init()            # sends the controller set-up and clears the screen
display.show_message("Temperatura:", "23.5", "Ok!")
display.show_message("Linha 1", None, "Linha 3")   # None leaves a line empty
display.clear()
```

`show_message` blanks the buffer, draws each line that is not `None`, and
renders the whole screen. The three lines are drawn at y = 0, 28 and 56;
characters are placed on 8-pixel pages, so these land on pixel rows 0, 24
and 56. Text wraps to the next character row when it reaches the right edge,
and anything that would fall below the bottom row is dropped. Lines may be
`str` or UTF-8 `bytes`; drawing stops at a NUL character.

## Lower level

`oledtext.ssd1306` has the drawing functions and the controller:

```python
from oledtext.ssd1306 import SSD1306, RenderArea, new_buffer, draw_char, draw_utf8_multiline

buffer = new_buffer()                       # bytearray of 1024 zero bytes
draw_utf8_multiline(buffer, 0, 0, "Olá, mundo!")
draw_char(buffer, 120, 56, ord("#"))        # one Latin-1 character code

device = SSD1306(MyBus(), 0x3C)
device.init()                               # sends init_commands()
device.render(buffer, RenderArea.full_screen())
```

- `draw_char` rounds `y` down to a page and silently skips a character that
  would not fit; negative coordinates raise `ValueError`.
- `draw_utf8_multiline` draws two-byte UTF-8 sequences as their Latin-1
  character; longer sequences are not drawn but each of their bytes still
  takes up a character cell.
- `RenderArea(start_column, end_column, start_page, end_page)` describes the
  part of the display to update; its `buffer_length` is the number of bytes
  sent from the start of the buffer by `SSD1306.render`.
- `SSD1306` also has `send_command`, `send_commands` and `send_buffer` for
  raw access.

`oledtext.font` gives the glyphs themselves:

```python
from oledtext.font import glyph, glyph_index

glyph_index(ord("A"))   # 1; 0 for characters without a glyph
glyph(ord("A"))         # the eight column bytes of "A"
```

Both raise `ValueError` for codes outside 0..255.

## What it does not do

There is no command-line program and no hardware access: the package does not
set up I2C pins or the bus speed. `oledtext.display` records the intended
wiring as `SDA_PIN` (14), `SCL_PIN` (15) and `I2C_FREQUENCY` (400 kHz) for your
own bus set-up, but never uses them. The display size is fixed at 128x64 and the
I2C address used by `Display` is `0x3C`.

## Running the tests

```
pip install oledtext[test]
pytest
```