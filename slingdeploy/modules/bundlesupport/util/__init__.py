"""Utility modules for bundle support."""

from .exceptions import (
    BundleCommandError,
    DeployError,
    IntermediatePathError,
    ResponseErrorKind,
    UnexpectedResponseError,
)

__all__ = [
    "BundleCommandError",
    "DeployError",
    "IntermediatePathError",
    "ResponseErrorKind",
    "UnexpectedResponseError",
]
