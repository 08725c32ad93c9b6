"""Decoder for NFC Controller Interface (NCI) packets."""

__version__ = "0.1.0"
__all__ = ["constants", "fields", "core", "dissector"]