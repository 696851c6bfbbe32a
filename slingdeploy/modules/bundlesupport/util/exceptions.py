"""Exceptions raised while talking to a Sling instance."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ResponseErrorKind(str, Enum):
    UNEXPECTED_STATUS = "unexpected status code"
    UNEXPECTED_CONTENT_TYPE = "unexpected content type"
    UNEXPECTED_CONTENT = "unexpected response content"


class DeployError(IOError):
    """Base class for failures of a deploy or undeploy call."""


class UnexpectedResponseError(DeployError):
    """The server answered, but not in the way the deploy method expects."""

    def __init__(
        self,
        kind: ResponseErrorKind,
        message: str,
        *,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        reason_phrase: Optional[str] = None,
        content_type: Optional[str] = None,
        body_excerpt: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.url = url
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        self.content_type = content_type
        self.body_excerpt = body_excerpt


class IntermediatePathError(DeployError):
    """Creating the parent collections of a WebDAV target failed."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class BundleCommandError(RuntimeError):
    """Raised by the install/uninstall commands when the build should stop."""
