"""
Upload domain models.

Exports: UploadType, UploadConfig, UploadCreateOnlyFields, UploadMutableFields,
UploadUpdate, UploadState
"""

from .upload import (
    UploadConfig,
    UploadCreateOnlyFields,
    UploadMutableFields,
    UploadState,
    UploadType,
    UploadUpdate,
)

__all__ = [
    "UploadConfig",
    "UploadCreateOnlyFields",
    "UploadMutableFields",
    "UploadState",
    "UploadType",
    "UploadUpdate",
]
