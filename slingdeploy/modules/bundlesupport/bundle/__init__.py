from .manifest import BUNDLE_SYMBOLIC_NAME, get_bundle_symbolic_name, read_manifest

__all__ = ["BUNDLE_SYMBOLIC_NAME", "get_bundle_symbolic_name", "read_manifest"]
