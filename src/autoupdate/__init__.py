"""
autoupdate - client-side software update checker
"""

__version__ = "0.1.0"
__author__ = "autoupdate Contributors"
__license__ = "MIT"

from .updater import (
    ManifestEntry,
    SemanticVersion,
    UpdateChecker,
    VersionManifest,
)

__all__ = ["ManifestEntry", "SemanticVersion", "UpdateChecker", "VersionManifest"]
