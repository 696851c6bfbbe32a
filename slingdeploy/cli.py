"""Command line entry point: ``sling-deploy install|uninstall``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from slingdeploy.logging_config import configure_logging
from slingdeploy.modules.bundlesupport import BundleInstallService, BundleUninstallService
from slingdeploy.modules.bundlesupport.domain import BundleDeploymentMethod
from slingdeploy.modules.bundlesupport.util.exceptions import BundleCommandError
from slingdeploy.settings import Settings

log = logging.getLogger(__name__)

# argparse destination -> Settings field
_OVERRIDES = {
    "url": "sling_url",
    "url_suffix": "sling_url_suffix",
    "user": "sling_user",
    "password": "sling_password",
    "method": "sling_deploy_method",
    "mime_type": "sling_mime_type",
    "start_level": "sling_bundle_start_level",
    "bundle_start": "sling_bundle_start",
    "refresh_packages": "sling_refresh_packages",
    "fail_on_error": "sling_fail_on_error",
    "connect_timeout": "sling_http_connect_timeout_sec",
    "response_timeout": "sling_http_response_timeout_sec",
    "log_level": "log_level",
}


def _deployment_method(value: str) -> str:
    try:
        return BundleDeploymentMethod.parse(value).value
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from exc
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {number}")
    return number


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--url", help="URL of the running Sling instance (SLING_URL)")
    parser.add_argument("--url-suffix", help="Suffix resolved against --url (SLING_URL_SUFFIX)")
    parser.add_argument("--user", help="User name for basic authentication")
    parser.add_argument("--password", help="Password for basic authentication")
    parser.add_argument(
        "--method",
        type=_deployment_method,
        metavar="{" + ",".join(member.value for member in BundleDeploymentMethod) + "}",
        help="Deployment method, case-insensitive (default: WebConsole)",
    )
    parser.add_argument("--mime-type", help="Content type for WebDAV and Sling POST uploads")
    parser.add_argument("--start-level", help="Start level of newly installed bundles (WebConsole only)")
    parser.add_argument(
        "--no-start",
        dest="bundle_start",
        action="store_false",
        default=None,
        help="Do not start the bundle after installing it (WebConsole only)",
    )
    parser.add_argument(
        "--no-refresh-packages",
        dest="refresh_packages",
        action="store_false",
        default=None,
        help="Do not refresh packages after installing (WebConsole only)",
    )
    parser.add_argument(
        "--no-fail-on-error",
        dest="fail_on_error",
        action="store_false",
        default=None,
        help="Log failures instead of exiting with an error",
    )
    parser.add_argument("--connect-timeout", type=_non_negative_int, help="HTTP connect timeout in seconds")
    parser.add_argument("--response-timeout", type=_non_negative_int, help="HTTP response timeout in seconds")
    parser.add_argument("--log-level", help="Log level (default: INFO)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sling-deploy",
        description="Install or uninstall OSGi bundles on a running Sling instance",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    install = commands.add_parser("install", help="Install a bundle file")
    install.add_argument("file", type=Path, help="Bundle JAR to install")
    _add_common_options(install)

    uninstall = commands.add_parser("uninstall", help="Uninstall a bundle")
    uninstall.add_argument(
        "file",
        type=Path,
        nargs="?",
        help="Bundle JAR, only used to determine the symbolic or file name",
    )
    uninstall.add_argument(
        "--bundle-name",
        help="Symbolic name (WebConsole) or file name (other methods); takes precedence over FILE",
    )
    _add_common_options(uninstall)
    return parser


def settings_from_args(args: argparse.Namespace, base: Optional[Settings] = None) -> Settings:
    """Apply command line overrides on top of the environment configuration."""
    settings = base or Settings()
    updates: Dict[str, Any] = {}
    for dest, field_name in _OVERRIDES.items():
        value = getattr(args, dest, None)
        if value is not None:
            updates[field_name] = value
    # model_copy would skip the field constraints
    return type(settings).model_validate({**settings.model_dump(), **updates})


def main(argv: Optional[Sequence[str]] = None, settings: Optional[Settings] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    settings = settings_from_args(args, settings)
    configure_logging(settings.log_level)

    try:
        if args.command == "install":
            result = BundleInstallService(settings).install(args.file)
        else:
            if args.file is None and args.bundle_name is None:
                parser.error("uninstall requires FILE or --bundle-name")
            result = BundleUninstallService(settings).uninstall(
                bundle_file=args.file,
                bundle_name=args.bundle_name,
            )
    except BundleCommandError as exc:
        log.error("%s", exc)
        return 1
    if not result.success:
        log.warning("Continuing although the %s failed, fail on error is disabled", args.command)
    return 0


def run(argv: Optional[List[str]] = None) -> None:
    sys.exit(main(argv))
