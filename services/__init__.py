"""
Services layer for Taxonomy Guard.

Infrastructure services that support the operations layer and the CLI.
"""

from .upload_reader import UploadReader

__all__ = [
    # Upload Reader
    "UploadReader",
]
