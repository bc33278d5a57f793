"""
Version manifest model, parser and serializer for the autoupdate updater
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple, Union

from autoupdate.updater.errors import EmptyManifestError, FormatError
from autoupdate.updater.version import SemanticVersion, as_version


class ManifestEntry:
    """One published release: a version plus optional info and download links"""

    __slots__ = ('_version', '_info_uri', '_download_uri')

    def __init__(self, version: Union[str, SemanticVersion],
                 info_uri: Optional[str] = None,
                 download_uri: Optional[str] = None):
        """
        Create a manifest entry.

        Args:
            version: Release version, as a SemanticVersion or a version string
            info_uri: Optional link to release information, such as a changelog
            download_uri: Optional direct download link, such as a zip or installer

        Raises:
            FormatError: If version is missing or invalid, or a link is not a string
        """
        if version is None:
            raise FormatError("Manifest entry missing required field: version")

        for key, value in (('info', info_uri), ('download', download_uri)):
            if value is not None and not isinstance(value, str):
                raise FormatError(f"Manifest entry field '{key}' must be a string")

        self._version = as_version(version)
        self._info_uri = info_uri
        self._download_uri = download_uri

    @property
    def version(self) -> SemanticVersion:
        return self._version

    @property
    def info_uri(self) -> Optional[str]:
        return self._info_uri

    @property
    def download_uri(self) -> Optional[str]:
        return self._download_uri

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ManifestEntry':
        """
        Build an entry from its wire representation.

        Args:
            data: Mapping with a required 'version' key and optional
                'info' and 'download' keys

        Raises:
            FormatError: If required fields are missing or have the wrong type
        """
        if not isinstance(data, dict):
            raise FormatError("Manifest entry must be an object")

        version = data.get('version')
        if version is None:
            raise FormatError("Manifest entry missing required field: version")

        return cls(version, info_uri=data.get('info'), download_uri=data.get('download'))

    def to_dict(self) -> Dict[str, str]:
        """Wire representation; absent links are left out"""
        result = {'version': self._version.to_string()}
        if self._info_uri is not None:
            result['info'] = self._info_uri
        if self._download_uri is not None:
            result['download'] = self._download_uri
        return result

    def equals(self, other: 'ManifestEntry') -> bool:
        return (self._version.equals(other._version)
                and self._info_uri == other._info_uri
                and self._download_uri == other._download_uri)

    def compare_to(self, other: 'ManifestEntry') -> int:
        """Order by version only; links never take part"""
        return SemanticVersion.compare(self._version, other._version)

    def clone(self) -> 'ManifestEntry':
        return ManifestEntry(self._version, self._info_uri, self._download_uri)

    def describe(self) -> str:
        info = self._info_uri or ''
        download = self._download_uri or ''
        return f"[{self._version} - info={info} download={download}]"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ManifestEntry):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self._version, self._info_uri, self._download_uri))

    def __repr__(self) -> str:
        return (f"ManifestEntry(version={self._version}, info={self._info_uri}, "
                f"download={self._download_uri})")


class VersionManifest:
    """
    Ordered list of published releases.

    Manifest format:
    {
        "versions": [
            {
                "version": "1.0",
                "info": "http://example.com/v1.0/whats_new.html",
                "download": "http://example.com/v1.0/release.zip"
            },
            {"version": "1.1.5"}
        ]
    }

    Entry order is kept as given and duplicate versions are allowed.
    """

    def __init__(self, versions: Iterable[ManifestEntry] = ()):
        self._versions: Tuple[ManifestEntry, ...] = tuple(versions)

    @property
    def versions(self) -> Tuple[ManifestEntry, ...]:
        return self._versions

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'VersionManifest':
        """
        Build a manifest from parsed JSON data.

        Args:
            data: Dictionary with a required 'versions' list

        Returns:
            Parsed VersionManifest

        Raises:
            FormatError: If the manifest is invalid or missing required fields

        Examples:
            >>> manifest = VersionManifest.from_dict({
            ...     'versions': [{'version': '1.0'}, {'version': '1.1'}]
            ... })
            >>> str(manifest.latest_version())
            '1.1'
        """
        if not isinstance(data, dict):
            raise FormatError("Manifest data must be an object")

        if 'versions' not in data:
            raise FormatError("Manifest missing required field: versions")

        versions_data = data['versions']
        if not isinstance(versions_data, list):
            raise FormatError("Manifest 'versions' field must be a list")

        entries = []
        for i, entry_data in enumerate(versions_data):
            try:
                entries.append(ManifestEntry.from_dict(entry_data))
            except FormatError as e:
                raise FormatError(f"Invalid manifest entry at index {i}: {e}") from e

        return cls(entries)

    def to_dict(self) -> Dict[str, Any]:
        return {'versions': [entry.to_dict() for entry in self._versions]}

    def latest_version(self) -> SemanticVersion:
        """
        Highest version in the manifest, wherever it sits in the list.

        Raises:
            EmptyManifestError: If the manifest has no entries
        """
        if not self._versions:
            raise EmptyManifestError("Manifest contains no versions")

        latest = self._versions[0].version
        for entry in self._versions[1:]:
            if SemanticVersion.compare(entry.version, latest) > 0:
                latest = entry.version
        return latest

    def find_by_version(self, version: Union[str, SemanticVersion]) -> Optional[ManifestEntry]:
        """
        Find the first entry with the given version.

        Args:
            version: Version to look up

        Returns:
            Matching ManifestEntry, or None if not present
        """
        wanted = as_version(version)
        for entry in self._versions:
            if entry.version.equals(wanted):
                return entry
        return None

    def equals(self, other: 'VersionManifest') -> bool:
        if len(self._versions) != len(other._versions):
            return False
        return all(a.equals(b) for a, b in zip(self._versions, other._versions))

    def describe(self) -> str:
        return ''.join(entry.describe() + '\n' for entry in self._versions)

    def __len__(self) -> int:
        return len(self._versions)

    def __iter__(self) -> Iterator[ManifestEntry]:
        return iter(self._versions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionManifest):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self._versions)

    def __repr__(self) -> str:
        return f"VersionManifest(versions={len(self._versions)})"


def parse_manifest(text: str) -> VersionManifest:
    """
    Parse manifest JSON text.

    Raises:
        FormatError: If the text is not valid JSON or not a valid manifest
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError, RecursionError) as e:
        raise FormatError(f"Manifest is not valid JSON: {e}") from e

    return VersionManifest.from_dict(data)


def serialize_manifest(manifest: VersionManifest) -> str:
    return json.dumps(manifest.to_dict(), indent=2)


def sample_manifest() -> VersionManifest:
    """Example manifest covering every combination of optional links"""
    return VersionManifest([
        ManifestEntry(SemanticVersion(1, 0),
                      info_uri='http://example.com/v1.0/whats_new.html',
                      download_uri='http://example.com/v1.0/release.zip'),
        ManifestEntry(SemanticVersion(1, 0, 3, 2),
                      download_uri='http://example.com/v1.0.3.2/release.tar.gz'),
        ManifestEntry(SemanticVersion(1, 1),
                      info_uri='http://example.com/v1.1/whats_new.php'),
        ManifestEntry(SemanticVersion(1, 1, 5)),
    ])


def generate_sample() -> str:
    """
    Generate sample manifest JSON text.

    Returns:
        The sample manifest as indented JSON
    """
    return serialize_manifest(sample_manifest())


def load_manifest(path: Path) -> VersionManifest:
    """
    Load and parse a version manifest from a file.

    Args:
        path: Path to the manifest JSON file

    Returns:
        Parsed VersionManifest

    Raises:
        FileNotFoundError: If manifest file doesn't exist
        FormatError: If manifest is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Manifest file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        return parse_manifest(f.read())


def save_manifest(manifest: VersionManifest, path: Path) -> None:
    """
    Save a version manifest to a file.

    Args:
        manifest: VersionManifest to save
        path: Path where manifest should be saved
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w', encoding='utf-8') as f:
        f.write(serialize_manifest(manifest))
        f.write('\n')
