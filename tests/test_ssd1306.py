import pytest

from oledtext import ssd1306
from oledtext.font import glyph
from oledtext.ssd1306 import (
    BUFFER_LENGTH,
    I2C_ADDRESS,
    WIDTH,
    SSD1306,
    RenderArea,
    draw_char,
    draw_utf8_multiline,
    init_commands,
    new_buffer,
)


class FakeBus:
    def __init__(self):
        self.writes = []

    def write(self, address, data):
        self.writes.append((address, bytes(data)))


def test_full_screen_area_covers_buffer():
    area = RenderArea.full_screen()
    assert (area.start_column, area.end_column) == (0, WIDTH - 1)
    assert (area.start_page, area.end_page) == (0, ssd1306.N_PAGES - 1)
    assert area.buffer_length == BUFFER_LENGTH


def test_partial_area_length():
    assert RenderArea(0, 3, 0, 1).buffer_length == 8


def test_init_commands_shape():
    commands = init_commands()
    assert commands[0] == 0xAE
    assert commands[-1] == 0xAF
    pin = commands.index(ssd1306.SET_COMMON_PIN_CONFIGURATION)
    assert commands[pin + 1] == 0x12
    mux = commands.index(ssd1306.SET_MUX_RATIO)
    assert commands[mux + 1] == ssd1306.HEIGHT - 1


def test_send_command_frame():
    bus = FakeBus()
    SSD1306(bus, I2C_ADDRESS).send_command(0xAE)
    assert bus.writes == [(0x3C, bytes([0x80, 0xAE]))]


def test_init_sends_one_frame_per_command():
    bus = FakeBus()
    SSD1306(bus, I2C_ADDRESS).init()
    assert [data for _, data in bus.writes] == [bytes([0x80, c]) for c in init_commands()]


def test_render_sends_window_then_data():
    bus = FakeBus()
    buffer = new_buffer()
    buffer[0] = 0x55
    area = RenderArea.full_screen()
    SSD1306(bus, I2C_ADDRESS).render(buffer, area)
    commands = [data[1] for _, data in bus.writes[:6]]
    assert commands == [
        ssd1306.SET_COLUMN_ADDRESS, 0, WIDTH - 1,
        ssd1306.SET_PAGE_ADDRESS, 0, ssd1306.N_PAGES - 1,
    ]
    address, payload = bus.writes[-1]
    assert address == I2C_ADDRESS
    assert payload == bytes([0x40]) + bytes(buffer)


def test_render_sends_only_area_length():
    bus = FakeBus()
    buffer = bytearray(range(256)) * 4
    area = RenderArea(0, 3, 0, 1)
    SSD1306(bus, I2C_ADDRESS).render(buffer, area)
    assert bus.writes[-1][1] == bytes([0x40]) + bytes(buffer[: area.buffer_length])


def test_draw_char_at_origin():
    buffer = new_buffer()
    draw_char(buffer, 0, 0, ord("A"))
    assert buffer[:8] == glyph(ord("A"))
    assert not any(buffer[8:])


def test_draw_char_rounds_y_to_page():
    top = new_buffer()
    shifted = new_buffer()
    draw_char(top, 0, 8, ord("Z"))
    draw_char(shifted, 0, 13, ord("Z"))
    assert top == shifted
    assert top[WIDTH : WIDTH + 8] == glyph(ord("Z"))


@pytest.mark.parametrize("x,y", [(WIDTH - 7, 0), (0, ssd1306.HEIGHT - 7)])
def test_draw_char_off_screen_is_skipped(x, y):
    buffer = new_buffer()
    draw_char(buffer, x, y, ord("A"))
    assert buffer == new_buffer()


def test_draw_char_negative_coordinates():
    with pytest.raises(ValueError):
        draw_char(new_buffer(), -1, 0, ord("A"))


def test_multiline_places_consecutive_cells():
    buffer = new_buffer()
    draw_utf8_multiline(buffer, 0, 0, "AB")
    assert buffer[0:8] == glyph(ord("A"))
    assert buffer[8:16] == glyph(ord("B"))


def test_multiline_decodes_two_byte_utf8():
    buffer = new_buffer()
    draw_utf8_multiline(buffer, 0, 0, "Ãç")
    assert buffer[0:8] == glyph(0xC3)
    assert buffer[8:16] == glyph(0xE7)


def test_multiline_accepts_bytes():
    from_str = new_buffer()
    from_bytes = new_buffer()
    draw_utf8_multiline(from_str, 0, 0, "Olá")
    draw_utf8_multiline(from_bytes, 0, 0, "Olá".encode("utf-8"))
    assert from_str == from_bytes


def test_multiline_wraps_at_right_edge():
    buffer = new_buffer()
    draw_utf8_multiline(buffer, 0, 0, "A" * 16 + "B")
    assert buffer[WIDTH - 8 : WIDTH] == glyph(ord("A"))
    assert buffer[WIDTH : WIDTH + 8] == glyph(ord("B"))


def test_multiline_three_byte_sequence_takes_three_cells():
    buffer = new_buffer()
    draw_utf8_multiline(buffer, 0, 0, "€A")
    assert not any(buffer[0:24])
    assert buffer[24:32] == glyph(ord("A"))


def test_multiline_stops_below_screen():
    buffer = new_buffer()
    draw_utf8_multiline(buffer, 0, ssd1306.HEIGHT - 7, "ABC")
    assert buffer == new_buffer()


def test_multiline_stops_at_nul():
    buffer = new_buffer()
    draw_utf8_multiline(buffer, 0, 0, "A\0B")
    assert buffer[0:8] == glyph(ord("A"))
    assert not any(buffer[8:])