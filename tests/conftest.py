"""Shared fixtures for the receipt tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import reportlab

from fanatitra.fonts import FontPaths

CHAR_WIDTH = 0.2  # mm per character per point of font size


class FakeCanvas:
    """Records every drawing call instead of producing a PDF."""

    def __init__(self, width, height, title=None):
        self.width = width
        self.height = height
        self.fonts = {}
        self.texts = []
        self.lines = []
        self.images = []

    def register_font(self, name, path, subfont_index=0):
        self.fonts[name] = (path, subfont_index)

    def text_width(self, text, font='regular', size=10):
        return len(text) * size * CHAR_WIDTH

    def draw_text(self, text, x, y, font='regular', size=10):
        self.texts.append({'text': text, 'x': x, 'y': y, 'font': font, 'size': size})

    def draw_line(self, x1, y1, x2, y2, width=0.1, dashed=False):
        self.lines.append({'points': (x1, y1, x2, y2), 'width': width, 'dashed': dashed})

    def draw_image(self, path, x, y, w, h):
        self.images.append({'path': path, 'x': x, 'y': y, 'w': w, 'h': h})

    def getpdfdata(self):
        return b'%PDF-fake'

    def text(self, value):
        return next(item for item in self.texts if item['text'] == value)

    def strings(self):
        return [item['text'] for item in self.texts]


@pytest.fixture
def fake_fonts():
    def resolver(home=None):
        return FontPaths('regular.ttf', 'bold.ttf')

    return resolver


@pytest.fixture
def vera_fonts() -> FontPaths:
    """reportlab ships the Bitstream Vera family with the package."""
    fonts_dir = Path(reportlab.__file__).resolve().parent / 'fonts'
    regular, bold = fonts_dir / 'Vera.ttf', fonts_dir / 'VeraBd.ttf'
    if not (regular.exists() and bold.exists()):
        pytest.skip('reportlab was installed without its bundled fonts')
    return FontPaths(str(regular), str(bold))
