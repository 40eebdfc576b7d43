"""Merge manifest metadata and a caller-supplied API key into a Configuration.

Precedence per field (earlier wins):
1) Caller-supplied API key (identity only)
2) Canonical metadata key
3) Deprecated alias key (error detection only)
4) Current record value (built-in default, or the ``base`` record)

Field groups resolve in passes: identity, detection, endpoints, app/project,
misc. Only a missing API key is fatal; every other absent or mistyped value
keeps the current record value.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Set, Union, cast

from . import keys
from .errors import MissingIdentifierError
from .metadata import MetadataSource, read_metadata
from .models import Configuration, EndpointConfiguration

logger = logging.getLogger(__name__)

DELIMITER = ","


@dataclass(frozen=True)
class MergeResult:
    """Outcome of a merge: a populated configuration or the error that prevented it."""

    config: Optional[Configuration] = None
    error: Optional[MissingIdentifierError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Configuration:
        """Return the configuration or raise the merge error."""
        if self.error is not None:
            raise self.error
        return cast(Configuration, self.config)


class ManifestConfigLoader:
    """Resolve a Configuration from manifest metadata."""

    @staticmethod
    def resolve_api_key(data: MetadataSource, override: Optional[str]) -> Optional[str]:
        if override:
            return override
        return data.get_string(keys.API_KEY)

    @staticmethod
    def parse_delimited(value: str) -> Set[str]:
        """Split a comma-delimited value into a set of trimmed, non-empty tokens."""
        return {token.strip() for token in value.split(DELIMITER) if token.strip()}

    @staticmethod
    def _get_str_set(
        data: MetadataSource, key: str, default: Optional[Set[str]]
    ) -> Optional[Set[str]]:
        delimited = data.get_string(key)
        if delimited is None:
            return default
        return ManifestConfigLoader.parse_delimited(delimited)

    @staticmethod
    def _load_detection_config(config: Configuration, data: MetadataSource) -> None:
        if data.contains_key(keys.ENABLE_EXCEPTION_HANDLER):
            logger.warning(
                "%s is deprecated; use %s instead",
                keys.ENABLE_EXCEPTION_HANDLER,
                keys.AUTO_DETECT_ERRORS,
            )
        config.auto_detect_errors = data.get_bool(
            keys.ENABLE_EXCEPTION_HANDLER, config.auto_detect_errors
        )
        config.auto_detect_errors = data.get_bool(keys.AUTO_DETECT_ERRORS, config.auto_detect_errors)
        config.auto_detect_anrs = data.get_bool(keys.AUTO_DETECT_ANRS, config.auto_detect_anrs)
        config.auto_detect_ndk_crashes = data.get_bool(
            keys.AUTO_DETECT_NDK_CRASHES, config.auto_detect_ndk_crashes
        )
        config.auto_track_sessions = data.get_bool(
            keys.AUTO_TRACK_SESSIONS, config.auto_track_sessions
        )
        config.send_threads = data.get_bool(keys.SEND_THREADS, config.send_threads)
        config.persist_user = data.get_bool(keys.PERSIST_USER, config.persist_user)

    @staticmethod
    def _load_endpoints_config(config: Configuration, data: MetadataSource) -> None:
        if not data.contains_key(keys.ENDPOINT_NOTIFY):
            if data.contains_key(keys.ENDPOINT_SESSIONS):
                logger.warning(
                    "Ignoring %s: it only takes effect together with %s",
                    keys.ENDPOINT_SESSIONS,
                    keys.ENDPOINT_NOTIFY,
                )
            return
        current = config.endpoints
        config.endpoints = EndpointConfiguration(
            notify=data.get_string(keys.ENDPOINT_NOTIFY, current.notify),
            sessions=data.get_string(keys.ENDPOINT_SESSIONS, current.sessions),
        )
        logger.debug("Endpoints replaced: %s", config.endpoints)

    @staticmethod
    def _load_app_config(config: Configuration, data: MetadataSource) -> None:
        config.release_stage = data.get_string(keys.RELEASE_STAGE, config.release_stage)
        config.app_version = data.get_string(keys.APP_VERSION, config.app_version)
        config.app_type = data.get_string(keys.APP_TYPE, config.app_type)
        config.code_bundle_id = data.get_string(keys.CODE_BUNDLE_ID, config.code_bundle_id)

        if data.contains_key(keys.VERSION_CODE):
            config.version_code = data.get_int(keys.VERSION_CODE)

        get_set = ManifestConfigLoader._get_str_set
        config.enabled_release_stages = get_set(
            data, keys.ENABLED_RELEASE_STAGES, config.enabled_release_stages
        )
        config.ignore_classes = get_set(data, keys.IGNORE_CLASSES, config.ignore_classes)
        config.project_packages = get_set(data, keys.PROJECT_PACKAGES, config.project_packages)
        config.redacted_keys = get_set(data, keys.REDACTED_KEYS, config.redacted_keys)

    @staticmethod
    def _load_misc_config(config: Configuration, data: MetadataSource) -> None:
        config.build_uuid = data.get_string(keys.BUILD_UUID, config.build_uuid)
        config.max_breadcrumbs = data.get_int(keys.MAX_BREADCRUMBS, config.max_breadcrumbs)
        config.launch_crash_threshold_ms = data.get_int(
            keys.LAUNCH_CRASH_THRESHOLD_MS, config.launch_crash_threshold_ms
        )

    @staticmethod
    def merge(
        data: MetadataSource,
        override: Optional[str] = None,
        base: Optional[Configuration] = None,
    ) -> MergeResult:
        """Merge metadata into a fresh record.

        Args:
            data: Manifest metadata bundle.
            override: Caller-supplied API key; wins over metadata when non-empty.
            base: Record to start from instead of the built-in defaults. It is
                copied, never mutated.

        Returns:
            MergeResult holding the configuration, or a MissingIdentifierError.
        """
        api_key = ManifestConfigLoader.resolve_api_key(data, override)
        if api_key is None:
            return MergeResult(error=MissingIdentifierError())

        if base is None:
            config = Configuration(api_key=api_key)
        else:
            config = base.model_copy(deep=True, update={"api_key": api_key})

        ManifestConfigLoader._load_detection_config(config, data)
        ManifestConfigLoader._load_endpoints_config(config, data)
        ManifestConfigLoader._load_app_config(config, data)
        ManifestConfigLoader._load_misc_config(config, data)
        return MergeResult(config=config)

    @staticmethod
    def load(
        data: MetadataSource,
        override: Optional[str] = None,
        base: Optional[Configuration] = None,
    ) -> Configuration:
        """Merge metadata into a record, raising MissingIdentifierError on failure."""
        return ManifestConfigLoader.merge(data, override, base).unwrap()

    @staticmethod
    def load_file(path: Union[str, Path], override: Optional[str] = None) -> Configuration:
        """Read a metadata file and merge it.

        Raises:
            ConfigSourceUnavailableError: The file cannot be read as metadata.
            MissingIdentifierError: No API key in the override or the file.
        """
        data = read_metadata(path)
        return ManifestConfigLoader.load(data, override)


def merge(
    data: MetadataSource,
    override: Optional[str] = None,
    base: Optional[Configuration] = None,
) -> MergeResult:
    return ManifestConfigLoader.merge(data, override, base)


def load_config(
    data: MetadataSource,
    override: Optional[str] = None,
    base: Optional[Configuration] = None,
) -> Configuration:
    return ManifestConfigLoader.load(data, override, base)
