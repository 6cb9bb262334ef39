"""
Upload domain models and schemas.

Declared configuration (split into creation-only and mutable fields), the
partial-update payload, and remote upload state.

Dependencies: pydantic
System role: Upload resource contracts
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from devicefarm_iac.configs.constants import (
    CONTENT_TYPE_LENGTH,
    NAME_LENGTH,
)
from devicefarm_iac.utils.arn import is_valid_arn


class UploadType(str, Enum):
    """Upload kinds accepted by Device Farm CreateUpload."""

    ANDROID_APP = "ANDROID_APP"
    IOS_APP = "IOS_APP"
    WEB_APP = "WEB_APP"
    EXTERNAL_DATA = "EXTERNAL_DATA"
    APPIUM_JAVA_JUNIT_TEST_PACKAGE = "APPIUM_JAVA_JUNIT_TEST_PACKAGE"
    APPIUM_JAVA_TESTNG_TEST_PACKAGE = "APPIUM_JAVA_TESTNG_TEST_PACKAGE"
    APPIUM_PYTHON_TEST_PACKAGE = "APPIUM_PYTHON_TEST_PACKAGE"
    APPIUM_NODE_TEST_PACKAGE = "APPIUM_NODE_TEST_PACKAGE"
    APPIUM_RUBY_TEST_PACKAGE = "APPIUM_RUBY_TEST_PACKAGE"
    APPIUM_WEB_JAVA_JUNIT_TEST_PACKAGE = "APPIUM_WEB_JAVA_JUNIT_TEST_PACKAGE"
    APPIUM_WEB_JAVA_TESTNG_TEST_PACKAGE = "APPIUM_WEB_JAVA_TESTNG_TEST_PACKAGE"
    APPIUM_WEB_PYTHON_TEST_PACKAGE = "APPIUM_WEB_PYTHON_TEST_PACKAGE"
    APPIUM_WEB_NODE_TEST_PACKAGE = "APPIUM_WEB_NODE_TEST_PACKAGE"
    APPIUM_WEB_RUBY_TEST_PACKAGE = "APPIUM_WEB_RUBY_TEST_PACKAGE"
    CALABASH_TEST_PACKAGE = "CALABASH_TEST_PACKAGE"
    INSTRUMENTATION_TEST_PACKAGE = "INSTRUMENTATION_TEST_PACKAGE"
    UIAUTOMATION_TEST_PACKAGE = "UIAUTOMATION_TEST_PACKAGE"
    UIAUTOMATOR_TEST_PACKAGE = "UIAUTOMATOR_TEST_PACKAGE"
    XCTEST_TEST_PACKAGE = "XCTEST_TEST_PACKAGE"
    XCTEST_UI_TEST_PACKAGE = "XCTEST_UI_TEST_PACKAGE"
    APPIUM_JAVA_JUNIT_TEST_SPEC = "APPIUM_JAVA_JUNIT_TEST_SPEC"
    APPIUM_JAVA_TESTNG_TEST_SPEC = "APPIUM_JAVA_TESTNG_TEST_SPEC"
    APPIUM_PYTHON_TEST_SPEC = "APPIUM_PYTHON_TEST_SPEC"
    APPIUM_NODE_TEST_SPEC = "APPIUM_NODE_TEST_SPEC"
    APPIUM_RUBY_TEST_SPEC = "APPIUM_RUBY_TEST_SPEC"
    APPIUM_WEB_JAVA_JUNIT_TEST_SPEC = "APPIUM_WEB_JAVA_JUNIT_TEST_SPEC"
    APPIUM_WEB_JAVA_TESTNG_TEST_SPEC = "APPIUM_WEB_JAVA_TESTNG_TEST_SPEC"
    APPIUM_WEB_PYTHON_TEST_SPEC = "APPIUM_WEB_PYTHON_TEST_SPEC"
    APPIUM_WEB_NODE_TEST_SPEC = "APPIUM_WEB_NODE_TEST_SPEC"
    APPIUM_WEB_RUBY_TEST_SPEC = "APPIUM_WEB_RUBY_TEST_SPEC"
    INSTRUMENTATION_TEST_SPEC = "INSTRUMENTATION_TEST_SPEC"
    XCTEST_UI_TEST_SPEC = "XCTEST_UI_TEST_SPEC"


class UploadCreateOnlyFields(BaseModel):
    """Fields fixed at creation; changing them replaces the upload."""

    model_config = ConfigDict(frozen=True)

    project_arn: str = Field(description="ARN of the owning Device Farm project")
    type: UploadType = Field(description="Upload kind")

    @field_validator("project_arn")
    @classmethod
    def _check_project_arn(cls, value: str) -> str:
        if not is_valid_arn(value):
            raise ValueError(f"{value!r} is not a valid ARN")
        return value


class UploadMutableFields(BaseModel):
    """Fields UpdateUpload can change in place."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        min_length=NAME_LENGTH["min"],
        max_length=NAME_LENGTH["max"],
        description="Upload name, usually the artifact file name",
    )
    content_type: str | None = Field(
        default=None,
        min_length=CONTENT_TYPE_LENGTH["min"],
        max_length=CONTENT_TYPE_LENGTH["max"],
        description="MIME type of the artifact",
    )


class UploadConfig(BaseModel):
    """Declared upload configuration."""

    model_config = ConfigDict(frozen=True)

    create_only: UploadCreateOnlyFields
    mutable: UploadMutableFields

    @classmethod
    def from_props(cls, props: dict[str, Any]) -> "UploadConfig":
        """
        Build config from flat resource properties.

        Absent or None properties are left out so pydantic reports them as
        missing rather than as the wrong type.

        Args:
            props: Resource inputs keyed by property name

        Returns:
            UploadConfig: Validated config

        Raises:
            pydantic.ValidationError: If any field is invalid
        """

        def present(*keys: str) -> dict[str, Any]:
            return {key: props[key] for key in keys if props.get(key) is not None}

        return cls(
            create_only=present("project_arn", "type"),
            mutable=present("name", "content_type"),
        )

    @property
    def project_arn(self) -> str:
        return self.create_only.project_arn

    @property
    def type(self) -> str:
        return self.create_only.type.value

    @property
    def name(self) -> str:
        return self.mutable.name

    @property
    def content_type(self) -> str | None:
        return self.mutable.content_type


class UploadUpdate(BaseModel):
    """
    Partial UpdateUpload request.

    Only fields that were explicitly set are sent; an empty string
    content_type clears the stored value.
    """

    name: str | None = Field(
        default=None,
        min_length=NAME_LENGTH["min"],
        max_length=NAME_LENGTH["max"],
    )
    content_type: str | None = Field(
        default=None,
        min_length=CONTENT_TYPE_LENGTH["min"],
        max_length=CONTENT_TYPE_LENGTH["max"],
    )

    def changed_fields(self) -> dict[str, str]:
        """Return only the explicitly set fields."""
        return self.model_dump(exclude_unset=True)

    @property
    def is_empty(self) -> bool:
        return not self.model_fields_set


class UploadState(BaseModel):
    """Remote upload state as reflected into resource outputs."""

    arn: str
    name: str | None = None
    type: str | None = None
    content_type: str | None = None
    url: str | None = None
    category: str | None = None
    metadata: str | None = None
    project_arn: str | None = None

    @classmethod
    def from_api(cls, upload: dict[str, Any], project_arn: str) -> "UploadState":
        """
        Build state from a boto3 Upload structure.

        Args:
            upload: 'upload' member of a GetUpload response
            project_arn: Project ARN derived from the upload ARN

        Returns:
            UploadState: Remote state
        """
        return cls(
            arn=upload["arn"],
            name=upload.get("name"),
            type=upload.get("type"),
            content_type=upload.get("contentType"),
            url=upload.get("url"),
            category=upload.get("category"),
            metadata=upload.get("metadata"),
            project_arn=project_arn,
        )

    def to_outputs(self) -> dict[str, Any]:
        """Flatten to resource output properties."""
        return self.model_dump()
