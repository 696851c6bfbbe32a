from .constants import DEFAULT_BUNDLE_MIME_TYPE, DEFAULT_BUNDLE_START_LEVEL, JSON_MIME_TYPE
from .enums import BundleDeploymentMethod
from .models import DeployContext, DeployResultRecord

__all__ = [
    "DEFAULT_BUNDLE_MIME_TYPE",
    "DEFAULT_BUNDLE_START_LEVEL",
    "JSON_MIME_TYPE",
    "BundleDeploymentMethod",
    "DeployContext",
    "DeployResultRecord",
]
