"""Read OSGi headers from a bundle's JAR manifest."""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import Dict, Optional

log = logging.getLogger(__name__)

MANIFEST_PATH = "META-INF/MANIFEST.MF"
BUNDLE_SYMBOLIC_NAME = "Bundle-SymbolicName"


def read_manifest(jar_file: Path) -> Optional[Dict[str, str]]:
    """Return the main section of the JAR manifest, or ``None`` if there is none.

    Raises ``zipfile.BadZipFile`` and ``OSError`` for unreadable files.
    """
    with zipfile.ZipFile(jar_file) as jar:
        try:
            raw = jar.read(MANIFEST_PATH)
        except KeyError:
            return None
    return _parse_main_section(raw.decode("utf-8", errors="replace"))


def get_bundle_symbolic_name(jar_file: Path) -> Optional[str]:
    """Symbolic name of the bundle, ``None`` if ``jar_file`` is no OSGi bundle.

    Directives such as ``;singleton:=true`` are not part of the name.
    """
    if not jar_file.exists():
        return None
    try:
        manifest = read_manifest(jar_file)
    except (OSError, zipfile.BadZipFile) as exc:
        log.warning("get_bundle_symbolic_name: Problem checking %s", jar_file, exc_info=exc)
        return None
    if manifest is None:
        log.debug("get_bundle_symbolic_name: Missing manifest in %s", jar_file)
        return None
    # header names are case-insensitive
    value = next(
        (value for name, value in manifest.items() if name.lower() == BUNDLE_SYMBOLIC_NAME.lower()),
        None,
    )
    if not value:
        log.debug("get_bundle_symbolic_name: No %s in %s", BUNDLE_SYMBOLIC_NAME, jar_file)
        return None
    return value.split(";", 1)[0].strip() or None


def _parse_main_section(text: str) -> Dict[str, str]:
    headers: Dict[str, str] = {}
    current: Optional[str] = None
    for line in text.splitlines():
        if not line:
            # end of the main section
            break
        if line.startswith(" ") and current is not None:
            headers[current] += line[1:]
            continue
        name, sep, value = line.partition(":")
        if not sep:
            continue
        current = name.strip()
        headers[current] = value[1:] if value.startswith(" ") else value
    return headers
