"""
Exceptions raised by the autoupdate updater
"""

from typing import Optional


class UpdateError(Exception):
    """Base class for all updater errors"""


class FormatError(UpdateError, ValueError):
    """A version string or manifest document could not be parsed"""


class EmptyManifestError(UpdateError):
    """The manifest has no entries, so it has no latest version"""


class NoManifestError(UpdateError):
    """A lookup was made before any successful update check"""

    def __init__(self, message: str = "No manifest loaded. Call check_for_updates() first."):
        super().__init__(message)


class TransportError(UpdateError):
    """Fetching the manifest failed"""

    def __init__(self, message: str, uri: Optional[str] = None,
                 status_code: Optional[int] = None):
        super().__init__(message)
        self.uri = uri
        self.status_code = status_code
