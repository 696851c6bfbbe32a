import zipfile
from pathlib import Path
from typing import Callable, List, Optional

import httpx
import pytest

from slingdeploy.modules.bundlesupport.domain import DeployContext


def write_bundle(path: Path, manifest: Optional[str]) -> Path:
    with zipfile.ZipFile(path, "w") as jar:
        if manifest is not None:
            jar.writestr("META-INF/MANIFEST.MF", manifest)
        jar.writestr("com/example/Activator.class", b"\xca\xfe\xba\xbe")
    return path


@pytest.fixture
def make_bundle(tmp_path) -> Callable[..., Path]:
    """Factory writing a JAR with the given symbolic name (``None`` for a plain JAR)."""

    def _make(name: str = "bundle-1.0.jar", symbolic_name: Optional[str] = "com.example.bundle") -> Path:
        lines = ["Manifest-Version: 1.0"]
        if symbolic_name is not None:
            lines.append(f"Bundle-SymbolicName: {symbolic_name}")
            lines.append("Bundle-Version: 1.0.0")
        return write_bundle(tmp_path / name, "\r\n".join(lines) + "\r\n\r\n")

    return _make


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request it was asked to handle."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def calls(self) -> List[tuple]:
        return [(request.method, str(request.url)) for request in self.requests]


@pytest.fixture
def recording_client():
    """Factory returning ``(client, transport)`` for a request handler."""
    clients: List[httpx.Client] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response]):
        transport = RecordingTransport(handler)
        client = httpx.Client(transport=transport)
        clients.append(client)
        return client, transport

    yield _make
    for client in clients:
        client.close()


def build_context(client: httpx.Client, **overrides) -> DeployContext:
    return DeployContext(http_client=client, **overrides)
