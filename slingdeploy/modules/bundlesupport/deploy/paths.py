"""Derive the parent collection URIs of a WebDAV target."""

from __future__ import annotations

from typing import List
from urllib.parse import urlsplit, urlunsplit


def extract_intermediate_uris(uri: str) -> List[str]:
    """Return every non-root path prefix of ``uri``, deepest first.

    ``http://localhost:8080/apps/slingshot/install`` yields::

        http://localhost:8080/apps/slingshot/install
        http://localhost:8080/apps/slingshot
        http://localhost:8080/apps

    Query and fragment are dropped, a trailing slash makes no difference and
    a URI without a path yields an empty list.
    """
    parts = urlsplit(uri)
    uris: List[str] = []
    prefix = ""
    for segment in parts.path.split("/"):
        if not segment:
            continue
        prefix = f"{prefix}/{segment}"
        uris.insert(0, urlunsplit((parts.scheme, parts.netloc, prefix, "", "")))
    return uris
