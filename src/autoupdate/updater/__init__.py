"""
autoupdate updater - version manifests and update checks
"""

from .errors import (
    EmptyManifestError,
    FormatError,
    NoManifestError,
    TransportError,
    UpdateError,
)
from .version import SemanticVersion, compare_versions, parse_version
from .manifest import (
    ManifestEntry,
    VersionManifest,
    generate_sample,
    load_manifest,
    parse_manifest,
    sample_manifest,
    save_manifest,
    serialize_manifest,
)
from .transport import HttpTransport, Transport
from .config import UpdateConfig
from .checker import UpdateChecker

__all__ = [
    "UpdateError",
    "FormatError",
    "EmptyManifestError",
    "NoManifestError",
    "TransportError",
    "SemanticVersion",
    "compare_versions",
    "parse_version",
    "ManifestEntry",
    "VersionManifest",
    "generate_sample",
    "load_manifest",
    "parse_manifest",
    "sample_manifest",
    "save_manifest",
    "serialize_manifest",
    "HttpTransport",
    "Transport",
    "UpdateConfig",
    "UpdateChecker",
]
