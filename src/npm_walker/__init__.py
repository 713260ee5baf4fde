"""npm-walker core package.

Discovers the installed dependency tree of an npm package and classifies
each physical install as root, production or development, required or
optional, and native or not.
"""

from .errors import ArgumentError, ManifestError, ResolutionError
from .walker import Walker

__all__ = [
    "ArgumentError",
    "ManifestError",
    "ResolutionError",
    "Walker",
    "core",
]
