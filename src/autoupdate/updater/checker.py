"""
autoupdate UpdateChecker - queries a version manifest and compares versions

Coordinates the check flow: fetch -> parse -> compare. Lookups for a
version's info and download links run against the last manifest loaded.
"""

import logging
from typing import Dict, Mapping, Optional, Union

from autoupdate.updater.config import DEFAULT_CURRENT_VERSION, DEFAULT_QUERY_URI, UpdateConfig
from autoupdate.updater.errors import NoManifestError
from autoupdate.updater.manifest import ManifestEntry, VersionManifest, generate_sample, parse_manifest
from autoupdate.updater.transport import HttpTransport, Transport
from autoupdate.updater.version import SemanticVersion, as_version

logger = logging.getLogger(__name__)


class UpdateChecker:
    """
    Checks a remote version manifest for software updates.

    Not thread-safe: callers sharing a checker must serialize calls to it.

    Examples:
        >>> checker = UpdateChecker('http://example.com/version.manifest')
        >>> if checker.check_for_updates():
        ...     print(f"Update to {checker.latest_version} available")
    """

    def __init__(self, query_uri: str = DEFAULT_QUERY_URI,
                 current_version: Union[str, SemanticVersion] = DEFAULT_CURRENT_VERSION,
                 headers: Optional[Mapping[str, str]] = None,
                 transport: Optional[Transport] = None):
        """
        Initialize the update checker.

        Args:
            query_uri: URI of the version manifest (default: http://localhost/)
            current_version: Installed version to compare against (default: 1.0)
            headers: Optional headers sent with the manifest request
            transport: Optional transport used to fetch the manifest.
                      Creates an HttpTransport if not provided.

        Raises:
            FormatError: If current_version is not a valid version
        """
        self.query_uri = query_uri
        self.current_version = as_version(current_version)
        self.headers: Optional[Dict[str, str]] = dict(headers) if headers is not None else None
        self.transport = transport if transport is not None else HttpTransport()

        self._manifest: Optional[VersionManifest] = None

    @classmethod
    def from_config(cls, config: UpdateConfig,
                    transport: Optional[Transport] = None) -> 'UpdateChecker':
        """
        Create a checker from an UpdateConfig.

        Args:
            config: Loaded configuration
            transport: Optional transport. Defaults to an HttpTransport using
                      the configured timeout and TLS verification.
        """
        if transport is None:
            transport = HttpTransport(
                timeout=config.timeout_seconds,
                verify_tls=config.verify_tls
            )

        return cls(
            query_uri=config.query_uri,
            current_version=config.current_version,
            headers=config.headers or None,
            transport=transport
        )

    @property
    def manifest(self) -> Optional[VersionManifest]:
        """Last successfully loaded manifest, or None"""
        return self._manifest

    def _require_manifest(self) -> VersionManifest:
        if self._manifest is None:
            raise NoManifestError()
        return self._manifest

    @property
    def latest_version(self) -> SemanticVersion:
        """
        Latest version in the loaded manifest.

        Raises:
            NoManifestError: If check_for_updates() has not succeeded yet
        """
        return self._require_manifest().latest_version()

    def check_for_updates(self) -> bool:
        """
        Fetch the manifest and check whether a newer version is available.

        The stored manifest is replaced only once the fetch and parse have
        both succeeded and the manifest has a latest version.

        Returns:
            True if the current version is older than the latest version

        Raises:
            TransportError: If the manifest could not be fetched
            FormatError: If the manifest is malformed
            EmptyManifestError: If the manifest lists no versions
        """
        logger.debug("Fetching version manifest from %s", self.query_uri)
        text = self.transport.fetch(self.query_uri, self.headers)

        manifest = parse_manifest(text)
        latest = manifest.latest_version()

        self._manifest = manifest
        logger.debug("Loaded manifest:\n%s", manifest.describe())

        outdated = SemanticVersion.compare(self.current_version, latest) < 0
        if outdated:
            logger.info("Update available: %s -> %s", self.current_version, latest)
        else:
            logger.info("Already up to date: %s (latest %s)", self.current_version, latest)
        return outdated

    def get_entry(self, version: Union[str, SemanticVersion]) -> Optional[ManifestEntry]:
        """
        Get the manifest entry for a version.

        Args:
            version: A software version

        Returns:
            The first matching entry, or None if the version is not listed

        Raises:
            NoManifestError: If check_for_updates() has not succeeded yet
        """
        return self._require_manifest().find_by_version(version)

    def get_info_uri(self, version: Union[str, SemanticVersion]) -> Optional[str]:
        """Information URI (e.g. a changelog) for a version, or None"""
        entry = self.get_entry(version)
        return entry.info_uri if entry is not None else None

    def get_download_uri(self, version: Union[str, SemanticVersion]) -> Optional[str]:
        """Download URI for a version, or None"""
        entry = self.get_entry(version)
        return entry.download_uri if entry is not None else None

    @staticmethod
    def generate_sample() -> str:
        """Sample version manifest in JSON format"""
        return generate_sample()

    def __repr__(self) -> str:
        return f"UpdateChecker(uri={self.query_uri}, current={self.current_version})"
