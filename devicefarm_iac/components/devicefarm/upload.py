"""
Device Farm upload resource.

Pulumi has no native resource for Device Farm uploads, so this module ships a
dynamic provider that drives the UploadAdapter.

Replacement vs. in-place update:
  - project_arn, type: replace (CreateUpload only)
  - name, content_type: UpdateUpload

Import an existing upload by passing its ARN:
  Upload("apk", UploadArgs(...), context, opts=pulumi.ResourceOptions(import_=arn))

Outputs:
  - arn: arn:aws:devicefarm:<REGION>:<ACCOUNT>:upload:<PROJECT_ID>/<UPLOAD_ID>
  - url: pre-signed URL to PUT the artifact to
  - category, metadata: computed by Device Farm after processing
  - project_arn: rebuilt from the upload ARN on every read

Example Pulumi Usage:
  context = get_provider_context()
  upload = Upload(
      "app-debug-apk",
      UploadArgs(project_arn=project.arn, name="app-debug.apk", type="ANDROID_APP"),
      context,
  )
"""

from dataclasses import dataclass
from typing import Any

import pulumi
from pulumi.dynamic import (
    CheckFailure,
    CheckResult,
    CreateResult,
    DiffResult,
    ReadResult,
    Resource,
    ResourceProvider,
    UpdateResult,
)
from pulumi.runtime import rpc
from pydantic import ValidationError as PydanticValidationError

from devicefarm_iac.boundary.devicefarm_client import DeviceFarmUploadClient
from devicefarm_iac.configs.base import ProviderContext
from devicefarm_iac.configs.constants import (
    COMPUTED_PROPERTIES,
    REPLACE_ON_CHANGE,
    UPDATABLE_PROPERTIES,
)
from devicefarm_iac.configs.settings import DeviceFarmSettings
from devicefarm_iac.core.upload_adapter import UploadAdapter
from devicefarm_iac.exceptions import UploadNotFoundError, ValidationError
from devicefarm_iac.models.upload import UploadConfig, UploadUpdate
from devicefarm_iac.observability.logger import configure_logging


def changed_properties(olds: dict[str, Any], news: dict[str, Any]) -> dict[str, Any]:
    """
    Collect in-place updatable properties that differ.

    An unset content_type leaves the stored value alone; set it to "" to
    clear it.

    Args:
        olds: Previous resource outputs
        news: Declared inputs

    Returns:
        dict: Changed properties with their new values
    """
    changes = {}
    for prop in UPDATABLE_PROPERTIES:
        value = news.get(prop)
        if prop == "content_type" and value is None:
            continue
        if value != olds.get(prop):
            changes[prop] = value
    return changes


def _is_known(value: Any) -> bool:
    return isinstance(value, str) and value != rpc.UNKNOWN


def load_config(props: dict[str, Any]) -> UploadConfig:
    """
    Validate resource properties into an UploadConfig.

    Raises:
        ValidationError: Naming the first rejected property
    """
    try:
        return UploadConfig.from_props(props)
    except PydanticValidationError as e:
        error = e.errors()[0]
        prop = str(error["loc"][-1])
        raise ValidationError(
            f"Invalid Device Farm upload {prop}: {error['msg']}",
            field=prop,
            details={"errors": e.error_count()},
        ) from e


class UploadProvider(ResourceProvider):
    """
    Dynamic provider for Device Farm uploads.

    Holds only picklable values; the boto3 client is built on first use
    inside the provider process.
    """

    def __init__(self, context: ProviderContext, adapter: UploadAdapter | None = None) -> None:
        self._context = context
        self._adapter = adapter

    def _get_adapter(self) -> UploadAdapter:
        if self._adapter is None:
            settings = DeviceFarmSettings()
            configure_logging(settings.log_level)
            client = DeviceFarmUploadClient(
                region=self._context.region,
                profile=settings.profile,
                endpoint_url=settings.endpoint_url,
            )
            self._adapter = UploadAdapter(client, self._context)
        return self._adapter

    def check(self, _olds: dict[str, Any], news: dict[str, Any]) -> CheckResult:
        failures = []
        try:
            UploadConfig.from_props(news)
        except PydanticValidationError as e:
            for error in e.errors():
                prop = str(error["loc"][-1])
                # Unknown or absent values are checked again on create
                if _is_known(news.get(prop)):
                    failures.append(CheckFailure(prop, error["msg"]))
        return CheckResult(news, failures)

    def diff(self, _id: str, olds: dict[str, Any], news: dict[str, Any]) -> DiffResult:
        replaces = [prop for prop in REPLACE_ON_CHANGE if olds.get(prop) != news.get(prop)]
        updates = changed_properties(olds, news)
        return DiffResult(
            changes=bool(replaces or updates),
            replaces=replaces,
            stables=["arn"],
            delete_before_replace=False,
        )

    def create(self, props: dict[str, Any]) -> CreateResult:
        state = self._get_adapter().create(load_config(props))
        return CreateResult(id_=state.arn, outs=state.to_outputs())

    def read(self, id_: str, props: dict[str, Any]) -> ReadResult:
        state = self._get_adapter().read(id_)
        if state is None:
            # Empty id tells the engine the upload is gone
            return ReadResult(id_="", outs={})
        return ReadResult(id_=state.arn, outs=state.to_outputs())

    def update(self, id_: str, olds: dict[str, Any], news: dict[str, Any]) -> UpdateResult:
        changes = UploadUpdate(**changed_properties(olds, news))
        state = self._get_adapter().update(id_, changes)
        if state is None:
            raise UploadNotFoundError(id_, {"operation": "update"})
        return UpdateResult(outs=state.to_outputs())

    def delete(self, id_: str, _props: dict[str, Any]) -> None:
        self._get_adapter().delete(id_)


@dataclass
class UploadArgs:
    """Inputs for an Upload resource."""
    project_arn: pulumi.Input[str]
    name: pulumi.Input[str]
    type: pulumi.Input[str]
    content_type: pulumi.Input[str] | None = None


@dataclass
class UploadOutputs:
    """Output values from the Upload resource."""
    arn: pulumi.Output[str]
    url: pulumi.Output[str]
    category: pulumi.Output[str]
    metadata: pulumi.Output[str]
    project_arn: pulumi.Output[str]


class Upload(Resource):
    """
    Device Farm upload registered against a project.

    The ARN doubles as the Pulumi resource id.
    """

    arn: pulumi.Output[str]
    name: pulumi.Output[str]
    type: pulumi.Output[str]
    content_type: pulumi.Output[str | None]
    project_arn: pulumi.Output[str]
    category: pulumi.Output[str]
    metadata: pulumi.Output[str]
    url: pulumi.Output[str]

    def __init__(
        self,
        name: str,
        args: UploadArgs,
        context: ProviderContext,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        props = {
            "project_arn": args.project_arn,
            "name": args.name,
            "type": args.type,
            "content_type": args.content_type,
            **{prop: None for prop in COMPUTED_PROPERTIES},
        }
        super().__init__(UploadProvider(context), name, props, opts)

    def get_outputs(self) -> UploadOutputs:
        """Get upload output values."""
        return UploadOutputs(
            arn=self.arn,
            url=self.url,
            category=self.category,
            metadata=self.metadata,
            project_arn=self.project_arn,
        )
