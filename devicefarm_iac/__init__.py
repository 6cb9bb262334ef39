"""
Pulumi infrastructure-as-code for AWS Device Farm uploads.

This package defines:
- A dynamic Upload resource (create, read, update, delete, import)
- A boto3 boundary client for the Device Farm upload API
- ARN helpers that rebuild an upload's project ARN from its own ARN
"""
