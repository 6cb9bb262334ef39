"""
Resource adapter for Device Farm uploads.

Translates declared upload configuration into Device Farm calls and reflects
the remote upload back into local state. Every mutating call is followed by a
full read so computed fields (url, category, metadata) stay current.

Dependencies: botocore (ClientError)
System role: Create/read/update/delete logic behind the upload resource
"""

from typing import cast

from botocore.exceptions import ClientError

from devicefarm_iac.boundary.devicefarm_client import DeviceFarmUploadClient
from devicefarm_iac.configs.base import ProviderContext
from devicefarm_iac.exceptions import (
    ArnParseError,
    InvalidUploadArnError,
    UploadNotFoundError,
    UploadOperationError,
)
from devicefarm_iac.models.upload import UploadConfig, UploadState, UploadUpdate
from devicefarm_iac.observability.logger import get_logger
from devicefarm_iac.utils.arn import decode_upload_project_arn

logger = get_logger(__name__)


class UploadAdapter:
    """Maps upload configuration to Device Farm and back."""

    def __init__(self, client: DeviceFarmUploadClient, context: ProviderContext) -> None:
        """
        Initialize adapter.

        Args:
            client: Device Farm client
            context: Account context used to rebuild project ARNs
        """
        self._client = client
        self._context = context

    def create(self, config: UploadConfig) -> UploadState:
        """
        Create an upload and read it back.

        Args:
            config: Validated upload configuration

        Returns:
            UploadState: State of the new upload

        Raises:
            UploadOperationError: If Device Farm rejects the request
        """
        try:
            upload = self._client.create_upload(
                project_arn=config.project_arn,
                name=config.name,
                upload_type=config.type,
                content_type=config.content_type,
            )
        except ClientError as e:
            raise UploadOperationError(
                f"Error creating Device Farm upload: {e}", operation="create"
            ) from e

        arn = upload["arn"]
        logger.debug("create - Successfully created Device Farm upload: %s", arn)

        # read raises rather than returning None for a new upload
        return cast(UploadState, self.read(arn, is_new=True))

    def read(self, arn: str, is_new: bool = False) -> UploadState | None:
        """
        Read an upload's current remote state.

        Args:
            arn: Upload ARN
            is_new: True when the upload was created in this operation

        Returns:
            UploadState | None: Remote state, or None when the upload is gone
                and should be dropped from local state

        Raises:
            UploadOperationError: If the read fails, or a new upload is missing
        """
        try:
            upload = self._client.get_upload(arn)
        except UploadNotFoundError as e:
            if not is_new:
                logger.warning(
                    "read - Device Farm upload (%s) not found, removing from state", arn
                )
                return None
            raise UploadOperationError(
                f"error reading Device Farm upload ({arn}): {e.message}",
                operation="read",
                arn=arn,
            ) from e
        except ClientError as e:
            raise UploadOperationError(
                f"error reading Device Farm upload ({arn}): {e}",
                operation="read",
                arn=arn,
            ) from e

        upload_arn = upload["arn"]
        try:
            project_arn = self.decode(upload_arn)
        except (ArnParseError, InvalidUploadArnError) as e:
            raise UploadOperationError(
                f"error decoding project_arn ({upload_arn}): {e.message}",
                operation="read",
                arn=upload_arn,
            ) from e

        return UploadState.from_api(upload, project_arn)

    def update(self, arn: str, changes: UploadUpdate) -> UploadState | None:
        """
        Send changed fields and read the upload back.

        Args:
            arn: Upload ARN
            changes: Partial update holding only changed fields

        Returns:
            UploadState | None: Remote state after the update

        Raises:
            UploadOperationError: If Device Farm rejects the request
        """
        if changes.is_empty:
            logger.debug("update - No changed fields for Device Farm upload: %s", arn)
            return self.read(arn)

        logger.debug("update - Updating Device Farm upload: %s", arn)
        try:
            self._client.update_upload(arn, changes.changed_fields())
        except ClientError as e:
            raise UploadOperationError(
                f"Error updating Device Farm upload: {e}", operation="update", arn=arn
            ) from e

        return self.read(arn)

    def delete(self, arn: str) -> None:
        """
        Delete an upload; a missing upload counts as deleted.

        Args:
            arn: Upload ARN

        Raises:
            UploadOperationError: If Device Farm rejects the request
        """
        logger.debug("delete - Deleting Device Farm upload: %s", arn)
        try:
            self._client.delete_upload(arn)
        except UploadNotFoundError:
            return
        except ClientError as e:
            raise UploadOperationError(
                f"Error deleting Device Farm upload: {e}", operation="delete", arn=arn
            ) from e

    def decode(self, arn: str) -> str:
        """Derive the project ARN for an upload ARN."""
        return decode_upload_project_arn(arn, self._context)
