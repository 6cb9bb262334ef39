"""
Base configuration dataclasses for the Device Farm upload stack.

Provides type-safe configuration structures loaded from Pulumi stack configs,
plus the account context used to rebuild project ARNs.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProviderContext:
    """
    AWS account context the uploads live in.

    Attributes:
        account_id: AWS account ID
        partition: AWS partition (aws, aws-cn, aws-us-gov)
        region: AWS region hosting Device Farm
    """
    account_id: str
    partition: str
    region: str


@dataclass(frozen=True)
class UploadDeclaration:
    """
    A single upload declared in stack config.

    Attributes:
        name: Upload name shown in Device Farm
        type: Upload kind (e.g. ANDROID_APP)
        content_type: Optional MIME type of the artifact
        import_arn: ARN of an existing upload to adopt instead of creating one
    """
    name: str
    type: str
    content_type: str | None = None
    import_arn: str | None = None


@dataclass(frozen=True)
class EnvironmentConfig:
    """
    Environment-specific configuration for the upload stack.

    Attributes:
        environment: Deployment environment (dev, staging, prod)
        project_arn: ARN of the Device Farm project owning the uploads
        uploads: Uploads to declare against the project
    """
    environment: str
    project_arn: str
    uploads: tuple[UploadDeclaration, ...] = field(default_factory=tuple)
