"""
Device Farm constants for upload resources.

Contains field limits and ARN building blocks.
"""

from typing import Final

# Device Farm is only offered in us-west-2
DEFAULT_REGION: Final[str] = "us-west-2"

DEVICEFARM_SERVICE: Final[str] = "devicefarm"

# ARN resource prefixes
UPLOAD_RESOURCE_PREFIX: Final[str] = "upload:"
PROJECT_RESOURCE_PREFIX: Final[str] = "project:"

# Separator between project id and upload id in an upload ARN
UPLOAD_ID_SEPARATOR: Final[str] = "/"

# Field length limits (inclusive)
NAME_LENGTH: Final[dict[str, int]] = {
    "min": 1,
    "max": 256,
}

CONTENT_TYPE_LENGTH: Final[dict[str, int]] = {
    "min": 0,
    "max": 64,
}

# Properties that force a replacement when changed
REPLACE_ON_CHANGE: Final[tuple[str, ...]] = ("project_arn", "type")

# Properties UpdateUpload can change in place
UPDATABLE_PROPERTIES: Final[tuple[str, ...]] = ("name", "content_type")

# Server-computed properties exposed as resource outputs
COMPUTED_PROPERTIES: Final[tuple[str, ...]] = ("arn", "category", "metadata", "url")
