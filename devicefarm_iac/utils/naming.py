"""
Resource naming conventions for consistent Pulumi resource names.

Follows pattern: {project}-{environment}-{resource}
"""

import re
from dataclasses import dataclass


@dataclass
class ResourceNamer:
    """
    Generates consistent names for upload resources.

    Attributes:
        project: Project identifier
        environment: Deployment environment (dev, staging, prod)
    """
    project: str
    environment: str

    def name(self, resource: str) -> str:
        """
        Generate a resource name.

        Args:
            resource: Resource identifier (e.g., 'upload')

        Returns:
            Formatted resource name
        """
        return f"{self.project}-{self.environment}-{resource}"

    def upload_name(self, upload: str) -> str:
        """
        Generate a Pulumi logical name for an upload.

        Upload names are file names (app-debug.apk), so anything outside
        [a-z0-9-] is collapsed to a single dash.

        Args:
            upload: Upload name as declared

        Returns:
            Logical resource name
        """
        slug = re.sub(r"[^a-z0-9]+", "-", upload.lower()).strip("-")
        return self.name(f"upload-{slug}")
