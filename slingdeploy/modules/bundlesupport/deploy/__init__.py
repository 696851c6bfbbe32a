from .base import (
    DeployMethod,
    add_trailing_slash,
    resolve_relative,
    resolve_with_filename,
    strip_trailing_slash,
)
from .paths import extract_intermediate_uris
from .response import ResponseOutcome, check_response, read_successful_body, validate_response
from .slingpost import SlingPostDeployMethod
from .strategies import create_deploy_method, resolve_deployment_method
from .webconsole import WebConsoleDeployMethod
from .webdav import WebDavDeployMethod

__all__ = [
    "DeployMethod",
    "add_trailing_slash",
    "resolve_relative",
    "resolve_with_filename",
    "strip_trailing_slash",
    "extract_intermediate_uris",
    "ResponseOutcome",
    "check_response",
    "read_successful_body",
    "validate_response",
    "SlingPostDeployMethod",
    "create_deploy_method",
    "resolve_deployment_method",
    "WebConsoleDeployMethod",
    "WebDavDeployMethod",
]
