"""
Amazon Resource Name parsing and Device Farm ARN derivation.

Device Farm does not return the owning project of an upload, so the project
ARN is rebuilt from the upload ARN, which embeds it:

    arn:aws:devicefarm:us-west-2:123456789012:upload:PROJECT_ID/UPLOAD_ID
    -> arn:aws:devicefarm:us-west-2:123456789012:project:PROJECT_ID
"""

import re
from dataclasses import dataclass

from devicefarm_iac.configs.base import ProviderContext
from devicefarm_iac.configs.constants import (
    DEVICEFARM_SERVICE,
    PROJECT_RESOURCE_PREFIX,
    UPLOAD_ID_SEPARATOR,
    UPLOAD_RESOURCE_PREFIX,
)
from devicefarm_iac.exceptions import ArnParseError, InvalidUploadArnError

ARN_PREFIX = "arn:"
ARN_SECTIONS = 6

_PARTITION_PATTERN = re.compile(r"^aws(-[a-z]+)*$")
_REGION_PATTERN = re.compile(r"^[a-z]{2}(-[a-z]+)+-\d+$")
_ACCOUNT_PATTERN = re.compile(r"^(aws|\d{12})$")


@dataclass(frozen=True)
class Arn:
    """
    Parsed Amazon Resource Name.

    Attributes:
        partition: AWS partition (aws, aws-cn, aws-us-gov)
        service: Service namespace (devicefarm)
        region: Region, empty for global resources
        account_id: Owning account, empty for some services
        resource: Resource path, may contain ':' and '/'
    """
    partition: str
    service: str
    region: str
    account_id: str
    resource: str

    @classmethod
    def parse(cls, value: str) -> "Arn":
        """
        Parse an ARN string.

        Args:
            value: ARN text

        Returns:
            Arn: Parsed sections

        Raises:
            ArnParseError: If the prefix is missing or sections are short
        """
        if not value.startswith(ARN_PREFIX):
            raise ArnParseError(value, "arn: invalid prefix")

        sections = value.split(":", ARN_SECTIONS - 1)
        if len(sections) != ARN_SECTIONS:
            raise ArnParseError(value, "arn: not enough sections")

        _, partition, service, region, account_id, resource = sections
        return cls(
            partition=partition,
            service=service,
            region=region,
            account_id=account_id,
            resource=resource,
        )

    def __str__(self) -> str:
        return ":".join(
            ["arn", self.partition, self.service, self.region, self.account_id, self.resource]
        )


def is_valid_arn(value: str) -> bool:
    """Check that a string is a well-formed ARN with sane sections."""
    try:
        arn = Arn.parse(value)
    except ArnParseError:
        return False

    if not _PARTITION_PATTERN.match(arn.partition):
        return False
    if arn.region and not _REGION_PATTERN.match(arn.region):
        return False
    if arn.account_id and not _ACCOUNT_PATTERN.match(arn.account_id):
        return False
    return bool(arn.service) and bool(arn.resource)


def split_upload_resource(upload_arn: str) -> tuple[str, str]:
    """
    Split an upload ARN into its project id and upload id.

    Args:
        upload_arn: Upload ARN assigned by Device Farm

    Returns:
        tuple[str, str]: (project_id, upload_id)

    Raises:
        ArnParseError: If upload_arn is not an ARN
        InvalidUploadArnError: If the resource is not project-id/upload-id
    """
    resource = Arn.parse(upload_arn).resource
    path = resource.removeprefix(UPLOAD_RESOURCE_PREFIX)
    parts = path.split(UPLOAD_ID_SEPARATOR)
    if len(parts) != 2:
        raise InvalidUploadArnError(upload_arn, resource)
    return parts[0], parts[1]


def decode_upload_project_arn(upload_arn: str, context: ProviderContext) -> str:
    """
    Derive the owning project ARN from an upload ARN.

    Args:
        upload_arn: Upload ARN assigned by Device Farm
        context: Account, partition and region of the caller

    Returns:
        str: Project ARN

    Raises:
        ArnParseError: If upload_arn is not an ARN
        InvalidUploadArnError: If the resource is not project-id/upload-id
    """
    project_id, _ = split_upload_resource(upload_arn)
    return str(
        Arn(
            partition=context.partition,
            service=DEVICEFARM_SERVICE,
            region=context.region,
            account_id=context.account_id,
            resource=f"{PROJECT_RESOURCE_PREFIX}{project_id}",
        )
    )
