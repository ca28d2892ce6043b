"""Compact delivery receipts for narrow receipt printers."""

from fanatitra.config import DEFAULT_CONFIG, PDFConfig
from fanatitra.entries import DeliveryEntry, parse_content
from fanatitra.errors import ReceiptError, ValidationError
from fanatitra.pricing import calculate_total, format_number
from fanatitra.receipt import compose, generate_pdf
from fanatitra.wrap import wrap_text

__all__ = [
    'DEFAULT_CONFIG',
    'DeliveryEntry',
    'PDFConfig',
    'ReceiptError',
    'ValidationError',
    'calculate_total',
    'compose',
    'format_number',
    'generate_pdf',
    'parse_content',
    'wrap_text',
]

__version__ = '1.0.0'
