"""Photo album backend: uploads, albums and published album links."""

__version__ = "0.1.0"
