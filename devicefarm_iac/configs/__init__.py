"""
Configuration module for the Device Farm upload stack.

Provides type-safe configuration loading from Pulumi stack config files and
provider process settings.
"""

from devicefarm_iac.configs.base import (
    EnvironmentConfig,
    ProviderContext,
    UploadDeclaration,
)
from devicefarm_iac.configs.settings import DeviceFarmSettings
from devicefarm_iac.configs.constants import (
    DEFAULT_REGION,
    NAME_LENGTH,
    CONTENT_TYPE_LENGTH,
)

__all__ = [
    "EnvironmentConfig",
    "ProviderContext",
    "UploadDeclaration",
    "DeviceFarmSettings",
    "DEFAULT_REGION",
    "NAME_LENGTH",
    "CONTENT_TYPE_LENGTH",
]
