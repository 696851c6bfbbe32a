"""Felix Web Console REST API deployment (HTTP POST)."""

from __future__ import annotations

import json
from pathlib import Path
from urllib.parse import quote

from slingdeploy.modules.bundlesupport.domain import DeployContext
from slingdeploy.modules.bundlesupport.domain.constants import (
    CONSOLE_BUNDLE_FILE_FIELD,
    CONSOLE_BUNDLES_PATH,
    CONSOLE_INSTALL_PATH,
    CONSOLE_NO_REDIRECT,
)
from slingdeploy.modules.bundlesupport.util.exceptions import (
    ResponseErrorKind,
    UnexpectedResponseError,
)
from .base import resolve_relative
from .response import excerpt, read_successful_body


class WebConsoleDeployMethod:
    """Installs via ``POST <console>/install`` and uninstalls via ``POST <console>/bundles/<name>``."""

    def deploy(
        self,
        target_url: str,
        file: Path,
        bundle_symbolic_name: str,
        context: DeployContext,
    ) -> None:
        # the pseudo path "install" keeps the console from redirecting
        post_url = resolve_relative(target_url, CONSOLE_INSTALL_PATH)
        context.log.debug("Installing %s via POST to %s", bundle_symbolic_name, post_url)
        data = {
            "action": "install",
            CONSOLE_NO_REDIRECT: CONSOLE_NO_REDIRECT,
            "bundlestartlevel": context.bundle_start_level,
        }
        if context.bundle_start:
            data["bundlestart"] = "start"
        if context.refresh_packages:
            data["refreshPackages"] = "true"
        with open(file, "rb") as fh:
            response = context.http_client.post(
                post_url,
                data=data,
                files={CONSOLE_BUNDLE_FILE_FIELD: (file.name, fh, "application/octet-stream")},
                headers={"referer": "about:blank"},
            )
        body = read_successful_body(response)
        # only the bundles servlet answers an install with an empty body
        if body:
            raise UnexpectedResponseError(
                ResponseErrorKind.UNEXPECTED_CONTENT,
                f"Unexpected response received from {post_url}. Maybe wrong endpoint? "
                f"Must be empty but was: {excerpt(body)}",
                url=post_url,
                status_code=response.status_code,
                reason_phrase=response.reason_phrase,
                body_excerpt=excerpt(body),
            )

    def undeploy(self, target_url: str, bundle_name: str, context: DeployContext) -> None:
        post_url = resolve_relative(target_url, CONSOLE_BUNDLES_PATH + quote(bundle_name, safe=""))
        context.log.debug("Uninstalling %s via POST to %s", bundle_name, post_url)
        response = context.http_client.post(post_url, data={"action": "uninstall"})
        body = read_successful_body(response)
        if not _is_bundle_status(body):
            raise UnexpectedResponseError(
                ResponseErrorKind.UNEXPECTED_CONTENT,
                f"Unexpected response received from {post_url}. Maybe wrong endpoint? "
                f"Must be valid JSON but was: {excerpt(body)}",
                url=post_url,
                status_code=response.status_code,
                reason_phrase=response.reason_phrase,
                body_excerpt=excerpt(body),
            )
        context.log.debug("Received response from %s: %s", post_url, body)


def _is_bundle_status(body: str) -> bool:
    """The bundles servlet answers with a JSON object carrying a boolean ``fragment``."""
    try:
        payload = json.loads(body)
    except ValueError:
        return False
    return isinstance(payload, dict) and isinstance(payload.get("fragment"), bool)
