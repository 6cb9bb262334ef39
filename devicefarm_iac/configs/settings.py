"""
Provider process settings.

Settings read inside the dynamic provider process, where Pulumi stack config
is not available.

Dependencies: pydantic_settings
System role: boto3 session and logging configuration for the provider
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DeviceFarmSettings(BaseSettings):
    """Settings for Device Farm API access."""

    model_config = SettingsConfigDict(
        env_prefix="DEVICEFARM_",
        case_sensitive=False,
        extra="ignore",
    )

    profile: str | None = Field(
        default=None,
        description="Named AWS profile for the boto3 session",
    )
    endpoint_url: str | None = Field(
        default=None,
        description="Override endpoint for the devicefarm client (local emulators)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
