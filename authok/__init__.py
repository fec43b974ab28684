"""Python client for the Authok identity platform."""
from ._version import __version__

__all__ = ["__version__"]
