"""Exception taxonomy for manifest-config-core."""

from typing import Any, Optional


class ManifestConfigError(Exception):
    """Base exception for all manifest config errors."""

    pass


class MissingIdentifierError(ManifestConfigError):
    """No API key could be resolved from the override or the metadata source."""

    def __init__(self, message: str = "No API key set") -> None:
        super().__init__(message)


class ConfigSourceUnavailableError(ManifestConfigError):
    """The platform could not supply a usable metadata source."""

    def __init__(self, source: Any, details: Optional[str] = None) -> None:
        self.source = source
        self.details = details
        message = f"Unable to read config from manifest metadata: {source}"
        if details:
            message = f"{message} ({details})"
        super().__init__(message)


class MetadataTypeError(ManifestConfigError, TypeError):
    """A metadata value has a type the bundle cannot hold."""

    def __init__(self, key: str, value: Any) -> None:
        self.key = key
        self.value = value
        super().__init__(
            f"Metadata value for {key} must be str, bool or int, got {type(value).__name__}"
        )
