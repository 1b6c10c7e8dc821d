"""Help metadata providers and type lookup."""

from .base import HelpProvider, HelpSource
from .python import PythonHelpProvider
from .types import DEFAULT_BASE_URI, TypeResolver

__all__ = [
    "DEFAULT_BASE_URI",
    "HelpProvider",
    "HelpSource",
    "PythonHelpProvider",
    "TypeResolver",
]
