"""Enumerations for the bundle support module."""

from __future__ import annotations

from enum import Enum


class BundleDeploymentMethod(str, Enum):
    """Wire protocol used to install and uninstall bundles."""

    WEB_CONSOLE = "WebConsole"
    WEB_DAV = "WebDAV"
    SLING_POST_SERVLET = "SlingPostServlet"

    @classmethod
    def parse(cls, value: str) -> "BundleDeploymentMethod":
        normalized = (value or "").strip().lower()
        for member in cls:
            if member.value.lower() == normalized or member.name.lower() == normalized:
                return member
        allowed = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown deployment method '{value}', expected one of {allowed}")

    def __str__(self) -> str:
        return self.value
