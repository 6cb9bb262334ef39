"""
AWS boundary modules.

Exports: DeviceFarmUploadClient
"""

from .devicefarm_client import DeviceFarmUploadClient

__all__ = ["DeviceFarmUploadClient"]
