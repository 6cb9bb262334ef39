"""
Unit tests for the upload resource adapter.

Tests create/read/update/delete against a mocked boto3 devicefarm client,
including not-found handling on read and delete.
Dependencies: pytest, unittest.mock, botocore
System role: Upload CRUD behavior
"""

import logging

import pytest

from devicefarm_iac.exceptions import UploadOperationError
from devicefarm_iac.models.upload import UploadConfig, UploadType, UploadUpdate


class TestCreate:
    """Test suite for UploadAdapter.create."""

    def test_create_reads_back(self, adapter, boto_client, upload_props, upload_arn, project_arn):
        """Test create is followed by a full read of the new upload."""
        state = adapter.create(UploadConfig.from_props(upload_props))

        boto_client.create_upload.assert_called_once()
        boto_client.get_upload.assert_called_once_with(arn=upload_arn)
        assert state.arn == upload_arn
        assert state.url.startswith("https://")
        assert state.project_arn == project_arn

    @pytest.mark.parametrize("upload_type", [t.value for t in UploadType])
    def test_every_type_round_trips(self, adapter, boto_client, make_upload, upload_props, upload_type):
        """Test each upload kind is sent on create and read back unchanged."""
        boto_client.get_upload.return_value = {"upload": make_upload(type=upload_type)}
        upload_props["type"] = upload_type

        state = adapter.create(UploadConfig.from_props(upload_props))

        assert boto_client.create_upload.call_args.kwargs["type"] == upload_type
        assert state.type == upload_type

    def test_create_rejection_wrapped(self, adapter, boto_client, client_error, upload_props):
        boto_client.create_upload.side_effect = client_error("ArgumentException", "CreateUpload")

        with pytest.raises(UploadOperationError, match="Error creating Device Farm upload") as exc_info:
            adapter.create(UploadConfig.from_props(upload_props))
        assert exc_info.value.operation == "create"
        boto_client.get_upload.assert_not_called()

    def test_new_upload_missing_is_error(self, adapter, boto_client, client_error, upload_props):
        """Test a new upload that cannot be read back fails the create."""
        boto_client.get_upload.side_effect = client_error("NotFoundException")

        with pytest.raises(UploadOperationError, match="error reading Device Farm upload"):
            adapter.create(UploadConfig.from_props(upload_props))


class TestRead:
    """Test suite for UploadAdapter.read."""

    def test_read_copies_fields(self, adapter, upload_arn, project_arn):
        state = adapter.read(upload_arn)

        assert state.name == "app-debug.apk"
        assert state.type == "ANDROID_APP"
        assert state.content_type == "application/octet-stream"
        assert state.category == "PRIVATE"
        assert state.metadata == '{"package_name": "com.example.app"}'
        assert state.project_arn == project_arn

    def test_missing_upload_removed(self, adapter, boto_client, client_error, upload_arn, caplog):
        """Test a missing existing upload yields the removal signal, not an error."""
        boto_client.get_upload.side_effect = client_error("NotFoundException")

        with caplog.at_level(logging.WARNING):
            assert adapter.read(upload_arn) is None
        assert "removing from state" in caplog.text

    def test_missing_new_upload_raises(self, adapter, boto_client, client_error, upload_arn):
        boto_client.get_upload.side_effect = client_error("NotFoundException")

        with pytest.raises(UploadOperationError) as exc_info:
            adapter.read(upload_arn, is_new=True)
        assert exc_info.value.details["arn"] == upload_arn

    def test_other_read_errors_wrapped(self, adapter, boto_client, client_error, upload_arn):
        boto_client.get_upload.side_effect = client_error("ServiceAccountException")

        with pytest.raises(UploadOperationError, match="error reading"):
            adapter.read(upload_arn)

    def test_undecodable_arn_is_error(self, adapter, boto_client, make_upload):
        """Test an upload ARN without project-id/upload-id fails the read."""
        bad_arn = "arn:aws:devicefarm:us-west-2:123456789012:upload:only-one-segment"
        boto_client.get_upload.return_value = {"upload": make_upload(arn=bad_arn)}

        with pytest.raises(UploadOperationError, match="error decoding project_arn") as exc_info:
            adapter.read(bad_arn)
        assert exc_info.value.details["arn"] == bad_arn


class TestUpdate:
    """Test suite for UploadAdapter.update."""

    def test_name_only_update(self, adapter, boto_client, make_upload, upload_arn):
        """Test only the changed name is sent and the new name is read back."""
        boto_client.get_upload.return_value = {"upload": make_upload(name="renamed.apk")}

        state = adapter.update(upload_arn, UploadUpdate(name="renamed.apk"))

        kwargs = boto_client.update_upload.call_args.kwargs
        assert kwargs == {"arn": upload_arn, "name": "renamed.apk"}
        assert "contentType" not in kwargs
        boto_client.get_upload.assert_called_once_with(arn=upload_arn)
        assert state.name == "renamed.apk"

    def test_update_rejection_wrapped(self, adapter, boto_client, client_error, upload_arn):
        boto_client.update_upload.side_effect = client_error("ArgumentException", "UpdateUpload")

        with pytest.raises(UploadOperationError, match="Error updating") as exc_info:
            adapter.update(upload_arn, UploadUpdate(name="x"))
        assert exc_info.value.operation == "update"

    def test_empty_update_only_reads(self, adapter, boto_client, upload_arn):
        """Test an update with no changed fields skips UpdateUpload."""
        state = adapter.update(upload_arn, UploadUpdate())

        boto_client.update_upload.assert_not_called()
        boto_client.get_upload.assert_called_once_with(arn=upload_arn)
        assert state.arn == upload_arn


class TestDelete:
    """Test suite for UploadAdapter.delete."""

    def test_delete(self, adapter, boto_client, upload_arn):
        adapter.delete(upload_arn)
        boto_client.delete_upload.assert_called_once_with(arn=upload_arn)

    def test_delete_missing_is_success(self, adapter, boto_client, client_error, upload_arn):
        boto_client.delete_upload.side_effect = client_error("NotFoundException", "DeleteUpload")

        assert adapter.delete(upload_arn) is None

    def test_delete_rejection_wrapped(self, adapter, boto_client, client_error, upload_arn):
        boto_client.delete_upload.side_effect = client_error("ArgumentException", "DeleteUpload")

        with pytest.raises(UploadOperationError, match="Error deleting") as exc_info:
            adapter.delete(upload_arn)
        assert exc_info.value.operation == "delete"
