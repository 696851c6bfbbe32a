"""Bundle support module exports."""

from .service.manager import BundleInstallService, BundleUninstallService

__all__ = ["BundleInstallService", "BundleUninstallService"]
