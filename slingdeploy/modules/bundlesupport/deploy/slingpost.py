"""Sling POST servlet deployment."""

from __future__ import annotations

from pathlib import Path

from slingdeploy.modules.bundlesupport.domain import DeployContext, JSON_MIME_TYPE
from slingdeploy.modules.bundlesupport.domain.constants import (
    SLING_POST_DELETE_OPERATION,
    SLING_POST_FILE_FIELD,
    SLING_POST_FILE_NODE_TYPE,
    SLING_POST_OPERATION_FIELD,
    SLING_POST_TYPE_HINT_FIELD,
)
from .base import resolve_with_filename, strip_trailing_slash
from .response import read_successful_body


class SlingPostDeployMethod:
    """Creates an ``nt:file`` node below the target URL and deletes it again.

    Only the HTTP status is checked, the servlet's answer is logged but not
    inspected.
    """

    def deploy(
        self,
        target_url: str,
        file: Path,
        bundle_symbolic_name: str,
        context: DeployContext,
    ) -> None:
        # a trailing slash changes how the servlet names the created node
        post_url = strip_trailing_slash(target_url)
        context.log.debug("Installing %s via POST to %s", file.name, post_url)
        with open(file, "rb") as fh:
            response = context.http_client.post(
                post_url,
                data={SLING_POST_TYPE_HINT_FIELD: SLING_POST_FILE_NODE_TYPE},
                files={SLING_POST_FILE_FIELD: (file.name, fh, context.mime_type)},
                headers={"Accept": JSON_MIME_TYPE},
            )
        body = read_successful_body(response)
        context.log.debug("Received response: %s", body)

    def undeploy(self, target_url: str, bundle_name: str, context: DeployContext) -> None:
        post_url = resolve_with_filename(target_url, bundle_name)
        context.log.debug("Uninstalling %s via POST to %s", bundle_name, post_url)
        response = context.http_client.post(
            post_url,
            data={SLING_POST_OPERATION_FIELD: SLING_POST_DELETE_OPERATION},
            headers={"Accept": JSON_MIME_TYPE},
        )
        body = read_successful_body(response)
        context.log.debug("Received response: %s", body)
