"""
Pulumi program entry point for Device Farm uploads.

Declares one Upload per entry of the `uploads` stack config against
`project_arn`:
1. Configuration and account context
2. Uploads (created, or adopted when `import_arn` is set)
3. Exports
"""

import pulumi

from devicefarm_iac.components.devicefarm.upload import Upload, UploadArgs
from devicefarm_iac.configs.environment import get_config, get_provider_context
from devicefarm_iac.utils.naming import ResourceNamer


def main() -> None:
    """Deploy Device Farm uploads."""
    config = get_config()
    namer = ResourceNamer(project="devicefarm", environment=config.environment)
    context = get_provider_context()

    outputs = {}
    for declaration in config.uploads:
        opts = None
        if declaration.import_arn:
            opts = pulumi.ResourceOptions(import_=declaration.import_arn)

        resource_name = namer.upload_name(declaration.name)
        upload = Upload(
            resource_name,
            UploadArgs(
                project_arn=config.project_arn,
                name=declaration.name,
                type=declaration.type,
                content_type=declaration.content_type,
            ),
            context,
            opts=opts,
        )
        upload_outputs = upload.get_outputs()
        outputs[f"{resource_name}_arn"] = upload_outputs.arn
        outputs[f"{resource_name}_url"] = upload_outputs.url

    for key, value in outputs.items():
        pulumi.export(key, value)

    pulumi.log.info(f"✓ Declared {len(config.uploads)} Device Farm upload(s)")


# Execute
main()
