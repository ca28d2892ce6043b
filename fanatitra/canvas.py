"""
reportlab drawing backend for the receipt.

Positions are millimetres from the top-left corner of the page, the way a
receipt is read. The flip to PDF's bottom-left origin happens here only.
"""

import io

from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont
from reportlab.pdfgen import canvas

from fanatitra.errors import FontLoadError

DASH_PATTERN = [1 * mm, 0.6 * mm]


class ReceiptCanvas:
    def __init__(self, width, height, title=None):
        self.width = width
        self.height = height
        self.c = canvas.Canvas(io.BytesIO(), pagesize=(width * mm, height * mm))
        if title:
            self.c.setTitle(title)
        self.fonts = {}

    # ─── FONTS ───

    def register_font(self, name, path, subfont_index=0):
        """Register a TrueType file under a logical name such as 'bold'"""
        internal = f'fanatitra-{name}-{path}-{subfont_index}'
        if internal not in pdfmetrics.getRegisteredFontNames():
            try:
                pdfmetrics.registerFont(TTFont(internal, path, subfontIndex=subfont_index))
            except (TTFError, OSError) as exc:
                raise FontLoadError(f"could not load {name} font {path}: {exc}") from exc
        self.fonts[name] = internal

    def _font(self, name):
        return self.fonts[name]

    # ─── MEASUREMENT ───

    def text_width(self, text, font='regular', size=10):
        return pdfmetrics.stringWidth(text, self._font(font), size) / mm

    # ─── DRAWING PRIMITIVES ───

    def draw_text(self, text, x, y, font='regular', size=10):
        """Draw text whose cell starts at (x, y)"""
        name = self._font(font)
        baseline = y * mm + pdfmetrics.getAscent(name, size)
        self.c.saveState()
        self.c.setFont(name, size)
        self.c.drawString(x * mm, self.height * mm - baseline, text)
        self.c.restoreState()

    def draw_line(self, x1, y1, x2, y2, width=0.1, dashed=False):
        self.c.saveState()
        self.c.setLineWidth(width * mm)
        if dashed:
            self.c.setDash(DASH_PATTERN, 0)
        self.c.line(x1 * mm, (self.height - y1) * mm, x2 * mm, (self.height - y2) * mm)
        self.c.restoreState()

    def draw_image(self, path, x, y, w, h):
        self.c.drawImage(str(path), x * mm, (self.height - y - h) * mm,
                         w * mm, h * mm, mask='auto')

    # ─── OUTPUT ───

    def getpdfdata(self):
        return self.c.getpdfdata()
