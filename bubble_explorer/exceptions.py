"""Exception hierarchy for bubble-explorer."""

from pathlib import Path


class BubbleExplorerError(Exception):
    """Base exception for all bubble-explorer errors.

    All exceptions in this package inherit from this class,
    allowing callers to catch all bubble-explorer errors with
    a single except clause.
    """

    pass


# Configuration Errors
class ConfigError(BubbleExplorerError):
    """Configuration-related errors."""

    pass


class ConfigParseError(ConfigError):
    """Configuration file has invalid syntax."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid config at {path}: {detail}")


class ConfigValidationError(ConfigError):
    """Configuration value is invalid."""

    def __init__(self, key: str, value: object, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid config value for '{key}': {reason}")


# Document Errors
class DocumentError(BubbleExplorerError):
    """Document ingestion errors."""

    pass


class DocumentNotFoundError(DocumentError):
    """Document file doesn't exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Document not found: {path}")


class DocumentTooLargeError(DocumentError):
    """Document file exceeds the configured size limit."""

    def __init__(self, path: Path, size: int, limit: int) -> None:
        self.path = path
        self.size = size
        self.limit = limit
        super().__init__(
            f"File too large: {path} ({size} bytes). "
            f"Maximum size is {limit // (1024 * 1024)} MB."
        )


class DocumentDecodeError(DocumentError):
    """Document bytes are not valid UTF-8 text."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Error reading {path}: {detail}")


class DocumentParseError(DocumentError):
    """Document text is not valid JSON."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Error parsing {path}: {detail}")


class DocumentTooDeepError(DocumentError):
    """Document nesting exceeds the configured depth limit."""

    def __init__(self, depth: int, limit: int) -> None:
        self.depth = depth
        self.limit = limit
        super().__init__(f"Document nesting depth {depth} exceeds limit of {limit}")


# Entity Not Found Errors
class NotFoundError(BubbleExplorerError):
    """Requested entity not found."""

    pass


class SectionNotFoundError(NotFoundError):
    """Named section doesn't exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Section not found: {name}")
