"""Shared file I/O helpers."""

from .inputs import load_catalog, load_occurrences
from .json_io import load_json_file, write_json_atomic, write_text_atomic

__all__ = ["load_catalog", "load_json_file", "load_occurrences", "write_json_atomic", "write_text_atomic"]
