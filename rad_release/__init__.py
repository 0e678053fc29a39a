"""Publish the `latest` release symlink on the Radicle file server."""

__version__ = "0.1.0"
