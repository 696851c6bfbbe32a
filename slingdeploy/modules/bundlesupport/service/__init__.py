from .client import build_http_client
from .manager import BundleInstallService, BundleUninstallService, get_target_url

__all__ = ["build_http_client", "BundleInstallService", "BundleUninstallService", "get_target_url"]
