class PersistenceError(Exception):
    """Base exception for scene save/load errors."""


class VersionMismatchError(PersistenceError):
    """Raised when a scene document was written by an unsupported format version."""

    def __init__(self, found: int, expected: int) -> None:
        super().__init__(f"Scene format version is {found} but required is {expected}")
        self.found = found
        self.expected = expected


class DecodeCorruptionError(PersistenceError):
    """Raised when terrain data or a scene document is malformed or truncated."""


class DocumentError(DecodeCorruptionError):
    """Raised when a scene document cannot be parsed or fails schema validation."""


class UnresolvedReferenceError(PersistenceError):
    """Raised when a named tileset, foliage set, auto-tile family or foliage region is unknown."""

    def __init__(self, kind: str, name: str, detail: str = "") -> None:
        message = f"Unknown {kind} '{name}'"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.kind = kind
        self.name = name


class PreconditionViolationError(PersistenceError):
    """Raised when a scene is not fully initialized for saving (e.g. a tile without an auto-tile)."""


class LifecycleError(PersistenceError):
    """Raised when a lifecycle phase is invoked out of order on an artifact."""


class SceneNotFoundError(PersistenceError):
    """Raised when a scene file does not exist in a scene store."""
