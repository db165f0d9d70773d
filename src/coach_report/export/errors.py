"""
Exceptions raised by the export pipeline.
"""

from __future__ import annotations


class ExportError(Exception):
    """Error during report export; the message is suitable for end users."""
    pass


class ExportCancelled(ExportError):
    """Export was cancelled by the caller between block measurements."""

    def __init__(self) -> None:
        super().__init__("Export cancelled")
