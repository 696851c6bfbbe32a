"""HTTP client used for all requests of one command."""

from __future__ import annotations

import httpx

from slingdeploy.settings import Settings


def build_http_client(settings: Settings) -> httpx.Client:
    """Client with preemptive basic auth and the configured timeouts.

    Redirects are not followed: a redirect from the Web Console usually means
    the wrong endpoint was configured.
    """
    timeout = httpx.Timeout(
        float(settings.sling_http_response_timeout_sec),
        connect=float(settings.sling_http_connect_timeout_sec),
    )
    return httpx.Client(
        auth=httpx.BasicAuth(settings.sling_user, settings.sling_password),
        timeout=timeout,
        follow_redirects=False,
    )
