"""
Delivery Receipt Generator

Lays out one block per delivery entry on a single narrow page, top to
bottom, then writes ``~/Downloads/fanatitra_<zone>_<date>.pdf``.
"""

import logging
import os
from datetime import date
from pathlib import Path

from fanatitra.canvas import ReceiptCanvas
from fanatitra.config import DEFAULT_CONFIG
from fanatitra.errors import HomeDirectoryError, OutputDirectoryError, SerializationError
from fanatitra.fonts import find_font
from fanatitra.pricing import format_item, format_total, parse_price
from fanatitra.wrap import wrap_text

logger = logging.getLogger(__name__)

# ─── TEXT ───

ID_PLACEHOLDER = '-'
PHONE_PLACEHOLDER = 'Tsisy lty a! Tsisy'
ADDRESS_MARKER = '>'
PHONE_MARKER = '#'
ITEMS_LABEL = 'Entam-be:'
NOTES_LABEL = 'Notes:'
NOTE_BOX_LABEL = 'Watawata:'
QUOTE = '"Taloha sarotra nirahana, ankehitriny lasa livreur.🥲"'
SLOGAN = 'KIMBASÔ !'
ITEMS_PER_ROW = 3

# ─── FONT SIZES (pt) ───

ZONE_SIZE = 12
NAME_SIZE = 9
ID_SIZE = 7
BODY_SIZE = 8
QUOTE_SIZE = 10
SLOGAN_SIZE = 11


class ReceiptDoc:
    """
    Single-page receipt laid out with one forward-only cursor.

    ``self.y`` is the top of the next thing to draw, in millimetres from the
    top of the page. It only ever grows; nothing is re-laid out if a block
    runs past the estimated page height.
    """

    def __init__(self, zone, entries, fonts, config=DEFAULT_CONFIG,
                 canvas_factory=ReceiptCanvas, today=None):
        self.zone = zone
        self.entries = list(entries)
        self.config = config
        self.today = today or date.today()
        self.height = config.page_height(len(self.entries))
        self.c = canvas_factory(config.page_width, self.height)
        self._register_fonts(fonts)
        self.y = config.margin_top

    def _register_fonts(self, fonts):
        self.c.register_font('regular', fonts.regular)
        # A collection file holds both weights; bold is its second face
        bold_index = 1 if fonts.bold == fonts.regular and fonts.bold.lower().endswith('.ttc') else 0
        self.c.register_font('bold', fonts.bold, subfont_index=bold_index)

    # ─── HELPERS ───

    def measure(self, font, size):
        return lambda text: self.c.text_width(text, font, size)

    def draw_centered(self, text, font, size):
        width = self.c.text_width(text, font, size)
        self.c.draw_text(text, (self.config.page_width - width) / 2, self.y, font, size)

    def draw_right(self, text, font, size):
        width = self.c.text_width(text, font, size)
        self.c.draw_text(text, self.config.right_edge - width, self.y, font, size)

    # ─── HEADER ───

    def draw_logo(self):
        cfg = self.config
        if not os.path.exists(cfg.logo_path):
            return
        self.c.draw_image(cfg.logo_path, (cfg.page_width - cfg.logo_slot) / 2, self.y,
                          cfg.logo_width, cfg.logo_height)
        self.y += cfg.logo_advance

    def draw_zone(self):
        cfg = self.config
        width = cfg.content_width - 2 * cfg.zone_indent
        for line in wrap_text(self.zone, width, self.measure('bold', ZONE_SIZE)):
            self.c.draw_text(line, cfg.margin_left + cfg.zone_indent, self.y, 'bold', ZONE_SIZE)
            self.y += cfg.line_height + cfg.zone_line_gap
        self.y += cfg.zone_spacing

    # ─── ENTRY BLOCK ───

    def draw_entry(self, entry, last=False):
        self.draw_entry_header(entry)
        self.draw_address(entry.address)
        self.draw_phone(entry.phone)
        self.draw_items(entry.item_tokens())
        if entry.notes.strip():
            self.draw_notes(entry.notes)
        self.draw_note_box()
        if not last:
            self.draw_divider()

    def draw_entry_header(self, entry):
        """Customer name with the total on the right, then the ID line"""
        cfg = self.config
        self.c.draw_text(entry.name, cfg.margin_left, self.y, 'bold', NAME_SIZE)
        self.draw_right(format_total(entry.total()), 'bold', NAME_SIZE)
        self.y += cfg.line_height + cfg.header_gap

        self.c.draw_text(f'ID: {entry.id or ID_PLACEHOLDER}', cfg.margin_left, self.y,
                         'regular', ID_SIZE)
        self.y += cfg.line_height + cfg.name_spacing

    def draw_address(self, address):
        cfg = self.config
        width = cfg.content_width - cfg.address_inset
        lines = wrap_text(address, width, self.measure('regular', BODY_SIZE))
        for index, line in enumerate(lines):
            if index == 0:
                self.c.draw_text(ADDRESS_MARKER, cfg.margin_left, self.y, 'regular', BODY_SIZE)
                x = cfg.margin_left + cfg.marker_indent
            else:
                x = cfg.margin_left + cfg.address_indent
            self.c.draw_text(line, x, self.y, 'regular', BODY_SIZE)
            self.y += cfg.line_height + cfg.wrapped_line_gap
        self.y += cfg.address_spacing

    def draw_phone(self, phone):
        cfg = self.config
        self.c.draw_text(PHONE_MARKER, cfg.margin_left, self.y, 'regular', BODY_SIZE)
        self.c.draw_text(phone or PHONE_PLACEHOLDER, cfg.margin_left + cfg.marker_indent,
                         self.y, 'regular', BODY_SIZE)
        self.y += cfg.line_height + cfg.phone_spacing

    def draw_items(self, tokens):
        """Item grid, three per row; tokens that are not prices leave a gap"""
        cfg = self.config
        self.c.draw_text(ITEMS_LABEL, cfg.margin_left, self.y, 'regular', BODY_SIZE)
        self.y += cfg.line_height + cfg.item_spacing

        for row in range(0, len(tokens), ITEMS_PER_ROW):
            for column, token in enumerate(tokens[row:row + ITEMS_PER_ROW]):
                price = parse_price(token)
                if price is None:
                    continue
                x = cfg.margin_left + cfg.item_width * column
                self.c.draw_text(format_item(price), x, self.y, 'regular', BODY_SIZE)
            self.y += cfg.line_height + cfg.item_spacing

    def draw_notes(self, notes):
        cfg = self.config
        self.y += cfg.section_spacing
        self.c.draw_text(NOTES_LABEL, cfg.margin_left, self.y, 'bold', BODY_SIZE)

        width = cfg.content_width - cfg.notes_indent
        for line in wrap_text(notes, width, self.measure('regular', BODY_SIZE)):
            self.c.draw_text(line, cfg.margin_left + cfg.notes_indent, self.y,
                             'regular', BODY_SIZE)
            self.y += cfg.line_height + cfg.wrapped_line_gap

    def draw_note_box(self):
        """Dashed box left empty for the deliverer's handwritten notes"""
        cfg = self.config
        self.y += cfg.section_spacing
        top, bottom = self.y, self.y + cfg.note_box_height
        left, right = cfg.margin_left, cfg.right_edge
        for x1, y1, x2, y2 in [(left, top, right, top), (left, bottom, right, bottom),
                               (left, top, left, bottom), (right, top, right, bottom)]:
            self.c.draw_line(x1, y1, x2, y2, cfg.box_line_width, dashed=True)

        self.c.draw_text(NOTE_BOX_LABEL, left + cfg.note_label_x, top + cfg.note_label_y,
                         'bold', BODY_SIZE)
        self.y = bottom

    def draw_divider(self):
        cfg = self.config
        self.y += cfg.entry_spacing / 2
        self.c.draw_line(cfg.margin_left, self.y, cfg.right_edge, self.y, cfg.divider_width)
        self.y += cfg.entry_spacing / 2

    # ─── FOOTER ───

    def draw_footer(self):
        cfg = self.config
        self.y += cfg.date_spacing
        self.draw_centered(self.today.strftime('%d/%m/%Y'), 'regular', BODY_SIZE)

        self.y += cfg.line_height + cfg.footer_gap
        self.draw_centered(QUOTE, 'bold', QUOTE_SIZE)

        self.y += cfg.line_height + cfg.footer_gap
        self.draw_centered(SLOGAN, 'regular', SLOGAN_SIZE)

    # ═══════════════════════════════════════════════════
    # MAIN GENERATION
    # ═══════════════════════════════════════════════════

    def build(self):
        """Lay out the whole receipt and return the PDF bytes"""
        self.draw_logo()
        self.draw_zone()
        for index, entry in enumerate(self.entries):
            self.draw_entry(entry, last=index == len(self.entries) - 1)
        self.draw_footer()

        if self.y > self.height:
            logger.warning("Receipt content ends at %.1fmm, past the %.1fmm page",
                           self.y, self.height)
        return self.c.getpdfdata()


# ─── OUTPUT ───

def output_dir(config=DEFAULT_CONFIG, home=None):
    """Resolve and create the folder receipts are written to"""
    if home is None:
        try:
            home = Path.home()
        except RuntimeError as exc:
            raise HomeDirectoryError(f"could not get home directory: {exc}") from exc

    folder = Path(home) / config.output_folder
    try:
        folder.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputDirectoryError(f"could not create {config.output_folder} directory: {exc}") from exc
    return folder


def receipt_filename(zone, today, config=DEFAULT_CONFIG):
    # The zone is free text; keep it from escaping the output folder
    safe_zone = zone.replace('/', '-').replace('\\', '-')
    return f'{config.filename_prefix}_{safe_zone}_{today.isoformat()}.pdf'


def compose(zone, entries, config=None, *, home=None, today=None,
            font_resolver=find_font, canvas_factory=ReceiptCanvas):
    """
    Build the receipt for a zone and write it to the Downloads folder.

    Returns ``(path, pdf_bytes)``. The file is written once, after the whole
    document has been laid out; any failure before that leaves no file.
    """
    config = config or DEFAULT_CONFIG
    today = today or date.today()

    fonts = font_resolver(home=home)
    doc = ReceiptDoc(zone, entries, fonts, config=config,
                     canvas_factory=canvas_factory, today=today)
    data = doc.build()

    path = output_dir(config, home) / receipt_filename(zone, today, config)
    try:
        path.write_bytes(data)
    except OSError as exc:
        raise SerializationError(f"could not write {path}: {exc}") from exc

    logger.info("Receipt for %s with %d entries saved to %s", zone, len(doc.entries), path)
    return path, data


def generate_pdf(zone, entries, config=None, **kwargs):
    path, _ = compose(zone, entries, config, **kwargs)
    return path
