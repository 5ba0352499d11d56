"""Repository adapters - Record store implementations."""

from .flatfile import FlatFileRecordStore

__all__ = ["FlatFileRecordStore"]
