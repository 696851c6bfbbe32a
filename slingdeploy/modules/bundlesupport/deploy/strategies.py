"""Resolve the configured deployment method into a deploy strategy."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from slingdeploy.modules.bundlesupport.domain import BundleDeploymentMethod
from .base import DeployMethod
from .slingpost import SlingPostDeployMethod
from .webconsole import WebConsoleDeployMethod
from .webdav import WebDavDeployMethod

log = logging.getLogger(__name__)

_STRATEGIES: Dict[BundleDeploymentMethod, DeployMethod] = {
    BundleDeploymentMethod.WEB_CONSOLE: WebConsoleDeployMethod(),
    BundleDeploymentMethod.WEB_DAV: WebDavDeployMethod(),
    BundleDeploymentMethod.SLING_POST_SERVLET: SlingPostDeployMethod(),
}


def create_deploy_method(method: BundleDeploymentMethod) -> DeployMethod:
    return _STRATEGIES[method]


def resolve_deployment_method(
    configured: Optional[str],
    use_put: bool = False,
) -> BundleDeploymentMethod:
    """Pick the deployment method from configuration.

    An explicitly configured method wins over the deprecated ``use_put`` flag;
    without either the Web Console is used.
    """
    if configured:
        return BundleDeploymentMethod.parse(configured)
    if use_put:
        log.warning(
            "Using deprecated configuration parameter 'use_put=true', "
            "please instead use the new parameter 'deploy_method=WebDAV'!"
        )
        return BundleDeploymentMethod.WEB_DAV
    return BundleDeploymentMethod.WEB_CONSOLE
