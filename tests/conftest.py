"""
Shared test fixtures and configuration for entire test suite.

Provides: account context, mocked boto3 devicefarm client, upload payload and
ClientError factories
Dependencies: pytest, botocore
System role: Test infrastructure and fixture management
"""

from typing import Any
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from devicefarm_iac.boundary.devicefarm_client import DeviceFarmUploadClient
from devicefarm_iac.configs.base import ProviderContext
from devicefarm_iac.core.upload_adapter import UploadAdapter

ACCOUNT_ID = "123456789012"
PROJECT_ID = "5e01a8c7-c861-4c0a-b1d5-5caa2EXAMPLE"
UPLOAD_ID = "c0e3a1f2-8e43-4b7d-9d65-7a1d1EXAMPLE"
PROJECT_ARN = f"arn:aws:devicefarm:us-west-2:{ACCOUNT_ID}:project:{PROJECT_ID}"
UPLOAD_ARN = f"arn:aws:devicefarm:us-west-2:{ACCOUNT_ID}:upload:{PROJECT_ID}/{UPLOAD_ID}"


def _make_upload(**overrides: Any) -> dict[str, Any]:
    upload = {
        "arn": UPLOAD_ARN,
        "name": "app-debug.apk",
        "type": "ANDROID_APP",
        "status": "INITIALIZED",
        "url": "https://prod-us-west-2-uploads.s3.amazonaws.com/presigned",
        "contentType": "application/octet-stream",
        "category": "PRIVATE",
        "metadata": '{"package_name": "com.example.app"}',
    }
    upload.update(overrides)
    return upload


def _make_client_error(code: str, operation: str = "GetUpload") -> ClientError:
    return ClientError(
        {"Error": {"Code": code, "Message": f"{code} raised by test"}},
        operation,
    )


@pytest.fixture
def project_arn() -> str:
    return PROJECT_ARN


@pytest.fixture
def upload_arn() -> str:
    return UPLOAD_ARN


@pytest.fixture
def make_upload():
    """Factory for Device Farm Upload structures as returned by boto3."""
    return _make_upload


@pytest.fixture
def client_error():
    """Factory for botocore ClientError with a given error code."""
    return _make_client_error


@pytest.fixture
def context() -> ProviderContext:
    """Account context matching the test ARNs."""
    return ProviderContext(account_id=ACCOUNT_ID, partition="aws", region="us-west-2")


@pytest.fixture
def boto_client():
    """
    Create mock boto3 devicefarm client.

    Returns:
        MagicMock: create/get/update/delete return a default upload
    """
    client = MagicMock()
    client.create_upload.return_value = {"upload": _make_upload()}
    client.get_upload.return_value = {"upload": _make_upload()}
    client.update_upload.return_value = {"upload": _make_upload()}
    client.delete_upload.return_value = {}
    return client


@pytest.fixture
def devicefarm_client(boto_client) -> DeviceFarmUploadClient:
    """Device Farm client wired to the mock boto3 client."""
    return DeviceFarmUploadClient(client=boto_client)


@pytest.fixture
def adapter(devicefarm_client, context) -> UploadAdapter:
    """Upload adapter over the mocked client."""
    return UploadAdapter(devicefarm_client, context)


@pytest.fixture
def upload_props() -> dict[str, Any]:
    """Declared upload properties as the dynamic provider receives them."""
    return {
        "project_arn": PROJECT_ARN,
        "name": "app-debug.apk",
        "type": "ANDROID_APP",
        "content_type": "application/octet-stream",
        "arn": None,
        "category": None,
        "metadata": None,
        "url": None,
    }
