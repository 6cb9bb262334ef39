"""
Core upload resource logic.

Exports: UploadAdapter
"""

from .upload_adapter import UploadAdapter

__all__ = ["UploadAdapter"]
