"""
auteur.exceptions - Custom exception classes.

All auteur-specific exceptions inherit from AuteurError.
"""


class AuteurError(Exception):
    """Base exception for all auteur errors."""

    pass


class InvalidVectorError(AuteurError):
    """A style vector is missing a recognized axis or carries a bad value."""

    def __init__(self, message: str, axes: list[str] | None = None):
        self.axes = axes or []
        super().__init__(message)


class IncompatibleAxisSetError(AuteurError):
    """Distance or blend attempted between vectors with different axis sets."""

    def __init__(self, left: list[str], right: list[str]):
        self.left = left
        self.right = right
        super().__init__(
            f"Axis sets differ: {', '.join(left) or '(none)'} vs {', '.join(right) or '(none)'}"
        )


class CatalogError(AuteurError):
    """Director catalog loading or validation error."""

    pass


class UnknownDirectorError(CatalogError):
    """Requested director id is not in the catalog."""

    def __init__(self, director_id: str):
        self.director_id = director_id
        super().__init__(f"Unknown director: {director_id}")


class ConfigError(AuteurError):
    """Configuration loading or validation error."""

    pass
