"""wpsprint - print a single document through WPS Office automation."""
from .version import __version__

__all__ = ["__version__"]
