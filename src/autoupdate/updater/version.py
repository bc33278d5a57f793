"""
Version parsing and comparison for the autoupdate updater
"""

from typing import Optional, Tuple, Union

from autoupdate.updater.errors import FormatError

MAX_COMPONENTS = 4


class SemanticVersion:
    """
    Four-part version identifier: major.minor.build.revision.

    Trailing components may be left out. A missing component is not rendered
    and sorts before any present value at the same position, so
    1.2 < 1.2.0 < 1.2.0.1 < 1.3.
    """

    __slots__ = ('_parts',)

    def __init__(self, major: int, minor: Optional[int] = None,
                 build: Optional[int] = None, revision: Optional[int] = None):
        """
        Create a version from its components.

        Args:
            major: Major component (required)
            minor: Optional minor component
            build: Optional build component, requires minor
            revision: Optional revision component, requires build

        Raises:
            FormatError: If a component is negative, not an integer, or
                follows a missing component
        """
        if major is None:
            raise FormatError("Version component 'major' is required")

        parts = []
        missing = False
        for name, value in (('major', major), ('minor', minor),
                            ('build', build), ('revision', revision)):
            if value is None:
                missing = True
                continue
            if missing:
                raise FormatError(f"Version component '{name}' given without the ones before it")
            if isinstance(value, bool) or not isinstance(value, int):
                raise FormatError(f"Version component '{name}' must be an integer, got {value!r}")
            if value < 0:
                raise FormatError(f"Version component '{name}' must be non-negative, got {value}")
            parts.append(value)

        self._parts: Tuple[int, ...] = tuple(parts)

    @classmethod
    def parse(cls, text: str) -> 'SemanticVersion':
        """
        Parse a version string of 1 to 4 dot-separated non-negative integers.

        Args:
            text: Version string such as "1", "1.2", "1.2.3" or "1.2.3.4"

        Returns:
            Parsed SemanticVersion

        Raises:
            FormatError: If the string is not a valid version

        Examples:
            >>> SemanticVersion.parse("1.0.3.2").to_string()
            '1.0.3.2'
            >>> SemanticVersion.parse("1.2").revision is None
            True
        """
        if not isinstance(text, str):
            raise FormatError(f"Version must be a string, got {type(text).__name__}")

        segments = text.split('.')
        if len(segments) > MAX_COMPONENTS:
            raise FormatError(f"Invalid version format: {text!r} has more than {MAX_COMPONENTS} components")

        parts = []
        for segment in segments:
            # isdigit() alone accepts non-ASCII digits like '²'
            if not (segment.isascii() and segment.isdigit()):
                raise FormatError(f"Invalid version format: {text!r}")
            try:
                parts.append(int(segment))
            except ValueError as e:
                # Digit strings past the interpreter's int conversion limit
                raise FormatError(f"Invalid version format: {text!r}") from e

        return cls(*parts)

    @property
    def major(self) -> int:
        return self._parts[0]

    @property
    def minor(self) -> Optional[int]:
        return self._component(1)

    @property
    def build(self) -> Optional[int]:
        return self._component(2)

    @property
    def revision(self) -> Optional[int]:
        return self._component(3)

    @property
    def parts(self) -> Tuple[int, ...]:
        """The components that were supplied, in order"""
        return self._parts

    def _component(self, index: int) -> Optional[int]:
        return self._parts[index] if index < len(self._parts) else None

    def _key(self) -> Tuple[int, ...]:
        # Missing components become -1 so they sort below any real value
        return self._parts + (-1,) * (MAX_COMPONENTS - len(self._parts))

    @staticmethod
    def compare(a: 'SemanticVersion', b: 'SemanticVersion') -> int:
        """
        Compare two versions.

        Returns:
            -1 if a < b, 0 if a == b, 1 if a > b
        """
        key_a, key_b = a._key(), b._key()
        if key_a < key_b:
            return -1
        if key_a > key_b:
            return 1
        return 0

    def compare_to(self, other: 'SemanticVersion') -> int:
        return SemanticVersion.compare(self, other)

    def equals(self, other: 'SemanticVersion') -> bool:
        return SemanticVersion.compare(self, other) == 0

    def to_string(self) -> str:
        return '.'.join(str(part) for part in self._parts)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"SemanticVersion('{self.to_string()}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other: 'SemanticVersion') -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return SemanticVersion.compare(self, other) < 0

    def __le__(self, other: 'SemanticVersion') -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return SemanticVersion.compare(self, other) <= 0

    def __gt__(self, other: 'SemanticVersion') -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return SemanticVersion.compare(self, other) > 0

    def __ge__(self, other: 'SemanticVersion') -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return SemanticVersion.compare(self, other) >= 0

    def __hash__(self) -> int:
        return hash(self._parts)


def as_version(value: Union[str, SemanticVersion]) -> SemanticVersion:
    """Accept either a SemanticVersion or a version string"""
    if isinstance(value, SemanticVersion):
        return value
    return SemanticVersion.parse(value)


def parse_version(version: str) -> Tuple[int, ...]:
    """
    Parse a version string into a tuple of the components it contains.

    Args:
        version: Version string in format "X", "X.Y", "X.Y.Z" or "X.Y.Z.W"

    Returns:
        Tuple of integers representing version components

    Examples:
        >>> parse_version("0.2.0")
        (0, 2, 0)
        >>> parse_version("1.1")
        (1, 1)
    """
    return SemanticVersion.parse(version).parts


def compare_versions(version1: str, version2: str) -> int:
    """
    Compare two version strings.

    Args:
        version1: First version string
        version2: Second version string

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Examples:
        >>> compare_versions("1.2", "1.2.0")
        -1
        >>> compare_versions("1.3", "1.2.0.1")
        1
        >>> compare_versions("0.2.0", "0.2.0")
        0
    """
    return SemanticVersion.compare(SemanticVersion.parse(version1),
                                   SemanticVersion.parse(version2))
