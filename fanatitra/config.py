"""
Layout constants for the delivery receipt.

Every distance is in millimetres. The receipt is sized for a 78mm thermal
roll; the page grows with the number of entries instead of paginating.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class PDFConfig:
    """Named spacing values used by the receipt layout."""

    page_width: float = 78.0
    margin_left: float = 4.0
    margin_right: float = 4.0
    margin_top: float = 4.0
    margin_bottom: float = 2.0
    line_height: float = 2.0
    section_spacing: float = 2.0
    item_spacing: float = 2.5
    note_box_height: float = 8.0
    name_spacing: float = 2.0
    entry_spacing: float = 4.0
    item_width: float = 25.0
    date_spacing: float = 3.0
    phone_spacing: float = 2.0
    zone_spacing: float = 3.0
    address_spacing: float = 1.0

    # Offsets inside an entry block
    header_gap: float = 2.0
    wrapped_line_gap: float = 0.5
    marker_indent: float = 4.0
    address_indent: float = 6.0
    address_inset: float = 7.0
    notes_indent: float = 12.0
    note_label_x: float = 1.0
    note_label_y: float = 2.0
    box_line_width: float = 0.1
    divider_width: float = 0.3

    # Heading and footer
    zone_indent: float = 2.0
    zone_line_gap: float = 1.0
    footer_gap: float = 2.0
    logo_width: float = 18.0
    logo_height: float = 16.0
    logo_slot: float = 20.0
    logo_advance: float = 12.0

    # Page height is estimated, not measured: entries * estimate + base
    entry_height_estimate: float = 50.0
    base_height: float = 30.0

    logo_path: str = 'assets/logo.png'
    output_folder: str = 'Downloads'
    filename_prefix: str = 'fanatitra'

    @property
    def content_width(self):
        return self.page_width - self.margin_left - self.margin_right

    @property
    def right_edge(self):
        return self.page_width - self.margin_right

    def page_height(self, entry_count):
        return entry_count * self.entry_height_estimate + self.base_height

    def replace(self, **changes):
        """Return a copy with some values tuned"""
        return replace(self, **changes)


DEFAULT_CONFIG = PDFConfig()
