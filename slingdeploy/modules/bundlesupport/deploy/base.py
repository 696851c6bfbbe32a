"""Common interface and URL helpers for the deploy methods."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol
from urllib.parse import quote, urljoin, urlsplit, urlunsplit

from slingdeploy.modules.bundlesupport.domain import DeployContext


class DeployMethod(Protocol):
    """Installs and uninstalls bundles on a Sling instance."""

    def deploy(
        self,
        target_url: str,
        file: Path,
        bundle_symbolic_name: str,
        context: DeployContext,
    ) -> None:  # pragma: no cover - interface
        ...

    def undeploy(
        self,
        target_url: str,
        bundle_name: str,
        context: DeployContext,
    ) -> None:  # pragma: no cover - interface
        """``bundle_name`` is the symbolic name for the Web Console, the file name otherwise."""
        ...


def add_trailing_slash(url: str) -> str:
    """Return ``url`` with its path ending in ``/`` (query and fragment are kept)."""
    parts = urlsplit(url)
    if parts.path.endswith("/"):
        return url
    return urlunsplit(parts._replace(path=parts.path + "/"))


def strip_trailing_slash(url: str) -> str:
    parts = urlsplit(url)
    if not parts.path.endswith("/"):
        return url
    return urlunsplit(parts._replace(path=parts.path[:-1]))


def resolve_relative(target_url: str, relative_path: str) -> str:
    """Resolve ``relative_path`` against a trailing-slash normalized ``target_url``."""
    return urljoin(target_url, relative_path)


def resolve_with_filename(target_url: str, filename: str) -> str:
    """Append ``filename`` as the last path segment of ``target_url``.

    ``target_url`` must end with ``/``, otherwise its last segment is replaced.
    The name is percent-encoded so it can never be read as a scheme, query or
    further path.
    """
    if filename in ("", ".", ".."):
        raise ValueError(f"Invalid file name '{filename}'")
    return resolve_relative(target_url, quote(filename, safe=""))
