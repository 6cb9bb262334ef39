"""
Device Farm components.

Components:
- Upload: Test artifact upload (dynamic resource)
"""

from devicefarm_iac.components.devicefarm.upload import (
    Upload,
    UploadArgs,
    UploadOutputs,
    UploadProvider,
)

__all__ = [
    "Upload",
    "UploadArgs",
    "UploadOutputs",
    "UploadProvider",
]
