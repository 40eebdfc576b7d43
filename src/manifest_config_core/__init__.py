"""Manifest Config Core - merge manifest metadata into crash-reporting client configuration."""

from .__version__ import __version__, __version_info__

from .metadata import (
    MetadataSource,
    coerce_manifest_value,
    read_android_manifest,
    read_metadata,
    read_metadata_json,
    read_metadata_toml,
)
from .models import Configuration, EndpointConfiguration
from .loader import ManifestConfigLoader, MergeResult, load_config, merge
from .errors import (
    ConfigSourceUnavailableError,
    ManifestConfigError,
    MetadataTypeError,
    MissingIdentifierError,
)

__all__ = [
    # Version
    "__version__",
    "__version_info__",
    # Metadata
    "MetadataSource",
    "coerce_manifest_value",
    "read_android_manifest",
    "read_metadata",
    "read_metadata_json",
    "read_metadata_toml",
    # Models
    "Configuration",
    "EndpointConfiguration",
    # Loader
    "ManifestConfigLoader",
    "MergeResult",
    "load_config",
    "merge",
    # Errors
    "ConfigSourceUnavailableError",
    "ManifestConfigError",
    "MetadataTypeError",
    "MissingIdentifierError",
]
