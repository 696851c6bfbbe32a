"""WebDAV deployment (HTTP PUT/DELETE) with creation of missing parent collections."""

from __future__ import annotations

from http import HTTPStatus
from pathlib import Path
from typing import List, Optional

import httpx

from slingdeploy.modules.bundlesupport.domain import DeployContext
from slingdeploy.modules.bundlesupport.domain.constants import MKCOL_METHOD
from slingdeploy.modules.bundlesupport.util.exceptions import (
    DeployError,
    IntermediatePathError,
    ResponseErrorKind,
    UnexpectedResponseError,
)
from .base import resolve_with_filename
from .paths import extract_intermediate_uris
from .response import ResponseOutcome, check_response, validate_response

# 201 for new resources, 204 for updated ones
PUT_SUCCESS_CODES = frozenset({HTTPStatus.CREATED, HTTPStatus.NO_CONTENT})
DELETE_SUCCESS_CODES = frozenset({HTTPStatus.NO_CONTENT})
MKCOL_SUCCESS_CODES = frozenset({HTTPStatus.CREATED})


class WebDavDeployMethod:
    """PUTs the bundle below the target collection and DELETEs it on undeploy."""

    def deploy(
        self,
        target_url: str,
        file: Path,
        bundle_symbolic_name: str,
        context: DeployContext,
    ) -> None:
        put_url = resolve_with_filename(target_url, file.name)
        outcome = self._perform_put(put_url, file, context)
        if outcome.status_code == HTTPStatus.CONFLICT:
            context.log.debug(
                "Bundle not installed due to missing parent folders. "
                "Attempting to create parent structure."
            )
            self._create_intermediate_paths(target_url, context)
            context.log.debug("Re-attempting bundle install after creating parent folders.")
            outcome = self._perform_put(put_url, file, context)
        status = outcome.raise_for_error()
        context.log.debug("Received status code %s", status)

    def undeploy(self, target_url: str, bundle_name: str, context: DeployContext) -> None:
        delete_url = resolve_with_filename(target_url, bundle_name)
        context.log.debug("Uninstalling %s via DELETE to %s", bundle_name, delete_url)
        response = context.http_client.delete(delete_url)
        status = validate_response(response, DELETE_SUCCESS_CODES)
        context.log.debug("Received status code %s", status)

    def _perform_put(self, put_url: str, file: Path, context: DeployContext) -> ResponseOutcome:
        context.log.debug("Installing %s via PUT to %s", file.name, put_url)
        with open(file, "rb") as fh:
            response = context.http_client.put(
                put_url,
                content=fh,
                headers={"Content-Type": context.mime_type},
            )
        return check_response(response, PUT_SUCCESS_CODES)

    def _create_intermediate_paths(self, target_url: str, context: DeployContext) -> None:
        intermediate_uris = extract_intermediate_uris(target_url)
        existing_index = self._find_existing_index(intermediate_uris, context)
        if existing_index is None:
            raise IntermediatePathError(
                f"Could not find any intermediate path up until the root of {target_url}.",
                path=target_url,
            )
        # shallowest missing collection first, a collection needs its parent
        for uri in reversed(intermediate_uris[:existing_index]):
            try:
                self._perform_mkcol(uri, context)
            except (DeployError, httpx.HTTPError) as exc:
                raise IntermediatePathError(
                    f"Failed creating intermediate path at '{uri}'. Reason: {exc}",
                    path=uri,
                ) from exc
            context.log.debug("Intermediate path at %s successfully created", uri)

    def _find_existing_index(self, intermediate_uris: List[str], context: DeployContext) -> Optional[int]:
        """Index of the deepest URI that already exists, probing one at a time."""
        for index, uri in enumerate(intermediate_uris):
            try:
                if self._exists(uri, context):
                    return index
            except (DeployError, httpx.HTTPError) as exc:
                raise IntermediatePathError(
                    f"Failed getting intermediate path at {uri}. Reason: {exc}",
                    path=uri,
                ) from exc
        return None

    def _exists(self, uri: str, context: DeployContext) -> bool:
        response = context.http_client.head(uri)
        response.close()
        status = response.status_code
        # 403 when the GET servlet does not list directories
        if status < 300 or status == HTTPStatus.FORBIDDEN:
            context.log.debug("Intermediate path at %s exists (status %s)", uri, status)
            return True
        if status == HTTPStatus.NOT_FOUND:
            return False
        raise UnexpectedResponseError(
            ResponseErrorKind.UNEXPECTED_STATUS,
            f"Unexpected response code {status}: {response.reason_phrase} from {uri}",
            url=uri,
            status_code=status,
            reason_phrase=response.reason_phrase,
        )

    def _perform_mkcol(self, uri: str, context: DeployContext) -> None:
        response = context.http_client.request(MKCOL_METHOD, uri)
        status = validate_response(response, MKCOL_SUCCESS_CODES)
        context.log.info("Created collection %s (status %s)", uri, status)
