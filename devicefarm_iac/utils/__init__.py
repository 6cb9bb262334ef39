"""
Utility functions for the Device Farm upload stack.

Provides naming conventions and ARN helpers.
"""

from devicefarm_iac.utils.naming import ResourceNamer
from devicefarm_iac.utils.arn import (
    Arn,
    decode_upload_project_arn,
    is_valid_arn,
    split_upload_resource,
)

__all__ = [
    "ResourceNamer",
    "Arn",
    "decode_upload_project_arn",
    "is_valid_arn",
    "split_upload_resource",
]
