"""
Environment configuration loader.

Loads and validates configuration from Pulumi stack config files and resolves
the AWS account context from the aws provider.
"""

import pulumi
import pulumi_aws as aws

from devicefarm_iac.configs.base import (
    EnvironmentConfig,
    ProviderContext,
    UploadDeclaration,
)


def get_config() -> EnvironmentConfig:
    """
    Load environment configuration from Pulumi stack config.

    Returns:
        EnvironmentConfig: Validated configuration object

    Raises:
        pulumi.ConfigMissingError: If required config values are missing
    """
    config = pulumi.Config()

    uploads = tuple(
        UploadDeclaration(
            name=item["name"],
            type=item["type"],
            content_type=item.get("content_type"),
            import_arn=item.get("import_arn"),
        )
        for item in (config.get_object("uploads") or [])
    )

    return EnvironmentConfig(
        environment=config.require("environment"),
        project_arn=config.require("project_arn"),
        uploads=uploads,
    )


def get_provider_context() -> ProviderContext:
    """
    Resolve account, partition and region from the aws provider.

    Returns:
        ProviderContext: Context passed explicitly to each upload resource
    """
    return ProviderContext(
        account_id=aws.get_caller_identity().account_id,
        partition=aws.get_partition().partition,
        region=aws.get_region().name,
    )
