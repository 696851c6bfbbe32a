"""Dataclasses passed between the command layer and the deploy methods."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import httpx

from .constants import DEFAULT_BUNDLE_MIME_TYPE, DEFAULT_BUNDLE_START_LEVEL


def _default_log() -> logging.Logger:
    return logging.getLogger("slingdeploy.deploy")


@dataclass(frozen=True)
class DeployContext:
    """Parameters for exactly one deploy/undeploy call.

    The HTTP client is owned by the caller; deploy methods use it but never
    close it.
    """

    http_client: httpx.Client
    mime_type: str = DEFAULT_BUNDLE_MIME_TYPE
    bundle_start_level: str = DEFAULT_BUNDLE_START_LEVEL
    bundle_start: bool = True
    refresh_packages: bool = True
    fail_on_error: bool = True
    log: logging.Logger = field(default_factory=_default_log)


@dataclass
class DeployResultRecord:
    msg: str = "OK"
    bundle_name: Optional[str] = None
    target_url: Optional[str] = None
    deploy_method: Optional[str] = None
    duration_secs: float = 0.0
    skipped: bool = False
    success: bool = True

    def mark_success(self, message: str = "OK") -> None:
        self.msg = message
        self.success = True

    def mark_failure(self, message: str) -> None:
        self.msg = message
        self.success = False

    def mark_skipped(self, message: str) -> None:
        self.msg = message
        self.skipped = True
        self.success = True
