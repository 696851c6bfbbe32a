"""Deploy OSGi bundles to a running Sling instance over HTTP."""

__version__ = "3.0.0"
