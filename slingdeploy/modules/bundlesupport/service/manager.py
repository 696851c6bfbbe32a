"""Install and uninstall commands built on top of the deploy methods."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Optional
from urllib.parse import urljoin

import httpx

from slingdeploy.modules.bundlesupport.bundle import get_bundle_symbolic_name
from slingdeploy.modules.bundlesupport.deploy import (
    add_trailing_slash,
    create_deploy_method,
    resolve_deployment_method,
)
from slingdeploy.modules.bundlesupport.domain import (
    BundleDeploymentMethod,
    DeployContext,
    DeployResultRecord,
)
from slingdeploy.modules.bundlesupport.util.exceptions import BundleCommandError, DeployError
from slingdeploy.settings import Settings
from .client import build_http_client


def get_target_url(settings: Settings) -> str:
    """Combination of ``sling_url`` and ``sling_url_suffix``, always ending with ``/``."""
    url = settings.sling_url
    if settings.sling_url_suffix:
        url = urljoin(url, settings.sling_url_suffix)
    return add_trailing_slash(url)


class _BundleCommand:
    """Shared plumbing: method resolution, client lifetime and error disposition."""

    def __init__(self, settings: Settings, client: Optional[httpx.Client] = None) -> None:
        self.settings = settings
        self._client = client
        self.log = logging.getLogger(self.__class__.__name__)

    def deployment_method(self) -> BundleDeploymentMethod:
        try:
            return resolve_deployment_method(
                self.settings.sling_deploy_method,
                self.settings.sling_use_put,
            )
        except ValueError as exc:
            raise BundleCommandError(str(exc)) from exc

    def _build_context(self, client: httpx.Client) -> DeployContext:
        return DeployContext(
            http_client=client,
            mime_type=self.settings.sling_mime_type,
            bundle_start_level=self.settings.sling_bundle_start_level,
            bundle_start=self.settings.sling_bundle_start,
            refresh_packages=self.settings.sling_refresh_packages,
            fail_on_error=self.settings.sling_fail_on_error,
            log=logging.getLogger("slingdeploy.deploy"),
        )

    def _run(
        self,
        result: DeployResultRecord,
        call: Callable[[DeployContext], None],
        failure_prefix: str,
        success_message: str,
    ) -> DeployResultRecord:
        owns_client = self._client is None
        client = self._client or build_http_client(self.settings)
        start = time.perf_counter()
        try:
            call(self._build_context(client))
        except (DeployError, httpx.HTTPError) as exc:
            message = f"{failure_prefix}, cause: {exc}"
            result.mark_failure(message)
            if self.settings.sling_fail_on_error:
                raise BundleCommandError(message) from exc
            self.log.error(message, exc_info=exc)
        else:
            result.mark_success(success_message)
            self.log.info(success_message)
        finally:
            result.duration_secs = time.perf_counter() - start
            if owns_client:
                client.close()
        return result


class BundleInstallService(_BundleCommand):
    """Install a bundle file on the configured Sling instance."""

    def install(self, bundle_file: Path) -> DeployResultRecord:
        bundle_file = Path(bundle_file)
        if not bundle_file.exists():
            raise BundleCommandError(f"The given bundle file {bundle_file} does not exist!")
        bundle_name = get_bundle_symbolic_name(bundle_file)
        if bundle_name is None:
            raise BundleCommandError(f"The given file {bundle_file} is no OSGi bundle")

        target_url = get_target_url(self.settings)
        method = self.deployment_method()
        result = DeployResultRecord(
            bundle_name=bundle_name,
            target_url=target_url,
            deploy_method=method.value,
        )
        self.log.info(
            "Installing Bundle %s(%s) to %s via %s...",
            bundle_name,
            bundle_file,
            target_url,
            method,
        )
        deploy_method = create_deploy_method(method)
        return self._run(
            result,
            lambda context: deploy_method.deploy(target_url, bundle_file, bundle_name, context),
            "Installation failed",
            "Bundle installed successfully",
        )


class BundleUninstallService(_BundleCommand):
    """Uninstall a bundle, addressed by name or by its file, from the Sling instance."""

    def uninstall(
        self,
        bundle_file: Optional[Path] = None,
        bundle_name: Optional[str] = None,
    ) -> DeployResultRecord:
        target_url = get_target_url(self.settings)
        method = self.deployment_method()
        result = DeployResultRecord(target_url=target_url, deploy_method=method.value)

        if bundle_name is None:
            if bundle_file is None:
                raise BundleCommandError("Either a bundle name or a bundle file is required")
            bundle_file = Path(bundle_file)
            symbolic_name = get_bundle_symbolic_name(bundle_file)
            if symbolic_name is None:
                message = f"{bundle_file} is not an OSGi Bundle, not uploading"
                self.log.info(message)
                result.mark_skipped(message)
                return result
            # only the Web Console addresses bundles by symbolic name
            if method is BundleDeploymentMethod.WEB_CONSOLE:
                bundle_name = symbolic_name
            else:
                bundle_name = bundle_file.name
        if bundle_name.strip() in ("", ".", ".."):
            raise BundleCommandError(f"Invalid bundle name '{bundle_name}'")
        result.bundle_name = bundle_name

        self.log.info("Uninstalling Bundle %s from %s via %s...", bundle_name, target_url, method)
        deploy_method = create_deploy_method(method)
        return self._run(
            result,
            lambda context: deploy_method.undeploy(target_url, bundle_name, context),
            f"Uninstall from {target_url} failed",
            "Bundle uninstalled successfully!",
        )
