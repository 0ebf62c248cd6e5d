"""Classic algorithms, container types, owning handles and byte-string helpers."""

__version__ = "0.1.0"