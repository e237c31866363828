"""Common module - configuration, schemas, errors and the upload guard."""

from .compute_module import ComputeModule
from .config import ResizeConfig, Settings, get_settings
from .upload_guard import UploadGuard

__all__ = [
    "ComputeModule",
    "ResizeConfig",
    "Settings",
    "UploadGuard",
    "get_settings",
]
