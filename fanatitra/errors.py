"""Errors raised while generating a delivery receipt."""


class ReceiptError(Exception):
    """Base class for every fatal receipt generation failure."""


class ValidationError(ReceiptError):
    """The caller supplied an empty zone or empty content."""


class FontResolutionError(ReceiptError):
    """Neither a system font nor the downloaded fallback could be found."""


class FontLoadError(ReceiptError):
    """A resolved font file could not be registered with the PDF backend."""


class HomeDirectoryError(ReceiptError):
    """The user's home directory could not be determined."""


class OutputDirectoryError(ReceiptError):
    """The folder receipts are saved to could not be created."""


class SerializationError(ReceiptError):
    """The composed document could not be written to disk."""
