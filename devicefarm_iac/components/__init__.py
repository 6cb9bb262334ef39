"""
Pulumi resources for Device Farm.

Each submodule provides resource classes backed by dynamic providers:
- devicefarm: Test artifact uploads
"""
