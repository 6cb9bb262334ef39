"""
Device Farm client for upload operations.

Wraps the boto3 devicefarm client for CreateUpload, GetUpload, UpdateUpload
and DeleteUpload. Translates NotFoundException into UploadNotFoundError;
every other ClientError propagates unchanged for the caller to wrap.

Dependencies: boto3
System role: API-level Device Farm operations for upload resources
"""

from typing import Any

import boto3
from botocore.exceptions import ClientError

from devicefarm_iac.configs.constants import DEFAULT_REGION
from devicefarm_iac.exceptions import UploadNotFoundError

NOT_FOUND_CODE = "NotFoundException"


def is_not_found(error: ClientError) -> bool:
    """Check whether a ClientError is Device Farm's NotFoundException."""
    return error.response.get("Error", {}).get("Code") == NOT_FOUND_CODE


class DeviceFarmUploadClient:
    """Device Farm client for upload CRUD."""

    def __init__(
        self,
        region: str = DEFAULT_REGION,
        profile: str | None = None,
        endpoint_url: str | None = None,
        client: Any | None = None,
    ) -> None:
        """
        Initialize Device Farm client.

        Args:
            region: AWS region hosting Device Farm
            profile: Named AWS profile for the session
            endpoint_url: Endpoint override for local emulators
            client: Pre-built boto3 devicefarm client (tests)
        """
        if client is None:
            session = boto3.session.Session(profile_name=profile, region_name=region)
            client = session.client("devicefarm", endpoint_url=endpoint_url)
        self._client = client

    def create_upload(
        self,
        project_arn: str,
        name: str,
        upload_type: str,
        content_type: str | None = None,
    ) -> dict[str, Any]:
        """
        Register a new upload against a project.

        Args:
            project_arn: Owning project ARN
            name: Upload name
            upload_type: Upload kind
            content_type: Optional MIME type

        Returns:
            dict: 'upload' member of the CreateUpload response

        Raises:
            ClientError: If Device Farm rejects the request
        """
        params: dict[str, Any] = {
            "projectArn": project_arn,
            "name": name,
            "type": upload_type,
        }
        if content_type:
            params["contentType"] = content_type

        response = self._client.create_upload(**params)
        return response["upload"]

    def get_upload(self, arn: str) -> dict[str, Any]:
        """
        Fetch an upload by ARN.

        Args:
            arn: Upload ARN

        Returns:
            dict: 'upload' member of the GetUpload response

        Raises:
            UploadNotFoundError: If no upload exists for the ARN
            ClientError: For any other rejection
        """
        try:
            response = self._client.get_upload(arn=arn)
        except ClientError as e:
            if is_not_found(e):
                raise UploadNotFoundError(arn) from e
            raise

        upload = response.get("upload")
        if not upload:
            raise UploadNotFoundError(arn, {"reason": "empty result"})
        return upload

    def update_upload(self, arn: str, changes: dict[str, str]) -> dict[str, Any]:
        """
        Apply a partial update to an upload.

        Args:
            arn: Upload ARN
            changes: Changed fields keyed by model name (name, content_type)

        Returns:
            dict: 'upload' member of the UpdateUpload response

        Raises:
            ClientError: If Device Farm rejects the request
        """
        params: dict[str, Any] = {"arn": arn}
        if "name" in changes:
            params["name"] = changes["name"]
        if "content_type" in changes:
            params["contentType"] = changes["content_type"]

        response = self._client.update_upload(**params)
        return response.get("upload", {})

    def delete_upload(self, arn: str) -> None:
        """
        Delete an upload.

        Args:
            arn: Upload ARN

        Raises:
            UploadNotFoundError: If no upload exists for the ARN
            ClientError: For any other rejection
        """
        try:
            self._client.delete_upload(arn=arn)
        except ClientError as e:
            if is_not_found(e):
                raise UploadNotFoundError(arn) from e
            raise
